"""
Lookup tables for hypothesis-test objects.

A hypothesis test reports a free-text method description and the name of
its test statistic. A few well-known methods are matched on their
description first; everything else is matched on the statistic name.
"""

from __future__ import annotations

from types import MappingProxyType

from pyinsight.core.vocabulary import (
    STATISTIC_T,
    STATISTIC_Z,
    STATISTIC_F,
    STATISTIC_CHI_SQUARED,
)

# Sentinel: the lookup has no opinion, keep looking
NO_MATCH = object()

# Keyed by method description. None means the test has no statistic with
# a reference distribution (exact tests report only a p-value).
METHOD_STATISTICS = MappingProxyType({
    "Fisher's Exact Test for Count Data": None,
    "Wilcoxon signed rank test with continuity correction": STATISTIC_Z,
})

# Keyed by statistic name
STATISTIC_NAMES = MappingProxyType({
    "t": STATISTIC_T,
    "Z": STATISTIC_Z,
    "F": STATISTIC_F,
    "Quade F": STATISTIC_F,
    "X-squared": STATISTIC_CHI_SQUARED,
    "Bartlett's K-squared": STATISTIC_CHI_SQUARED,
    "Fligner-Killeen:med chi-squared": STATISTIC_CHI_SQUARED,
    "Friedman chi-squared": STATISTIC_CHI_SQUARED,
    "Kruskal-Wallis chi-squared": STATISTIC_CHI_SQUARED,
    "Cochran-Mantel-Haenszel M^2": STATISTIC_CHI_SQUARED,
    "McNemar's chi-squared": STATISTIC_CHI_SQUARED,
    # counts, not test statistics
    "number of successes": None,
    "number of events": None,
})


def lookup_test(method: str | None, statistic_name: str | None):
    """
    Resolve a hypothesis test to a statistic token.
    
    Returns:
        A statistic token, None (no reference distribution), or NO_MATCH
        when neither the method nor the statistic name is known.
    """
    if method is not None and method in METHOD_STATISTICS:
        return METHOD_STATISTICS[method]
    if statistic_name is not None and statistic_name in STATISTIC_NAMES:
        return STATISTIC_NAMES[statistic_name]
    return NO_MATCH
