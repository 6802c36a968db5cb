"""
Statistic family classification.

Decides which sampling distribution (t, z, F, chi-squared) governs the
test statistics of a fitted model, from its back-end type tag and
already-extracted facts such as the fitted family.

Public API:
    classify(type_tag, family, summary_column_names, degrees_of_freedom)
    statistic_label(token)
"""

from pyinsight.statistic.solvers import classify, statistic_label

__all__ = [
    "classify",
    "statistic_label",
]
