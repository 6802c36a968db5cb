"""
Passes that run over the complete record sequence after per-name decoding.

Both need facts about the whole result set (all cleaned names, the
model's term list), which a single-name rule cannot see.
"""

from __future__ import annotations

import re
from dataclasses import replace

from pyinsight.core.vocabulary import (
    EFFECTS_RANDOM,
    FUNCTION_SMOOTH,
    INTERACTION_SEPARATOR,
)
from pyinsight.parameters._common import TaxonomyRecord

_RANDOM_SMOOTH = re.compile(r'^s\((.*)(bs="re"+)\)')
_SMOOTH_VARIABLE = re.compile(r'^s\(([^,]*)(.*)(bs="re"+)\)')


def normalize_interactions(
    records: list[TaxonomyRecord],
    separator: str | None,
) -> list[TaxonomyRecord]:
    """
    Rewrite back-end interaction separators to ':'.

    A fixed-effect name is rewritten only when every operand on either
    side of the separator is itself a cleaned name in the result set, so
    names that merely contain the separator character are left alone.
    """
    if not separator or separator == INTERACTION_SEPARATOR:
        return records

    known = {r.cleaned_parameter for r in records}
    out = []
    for record in records:
        name = record.cleaned_parameter
        if (record.effects != EFFECTS_RANDOM
                and separator in name
                and all(part in known for part in name.split(separator))):
            record = replace(
                record,
                cleaned_parameter=name.replace(separator, INTERACTION_SEPARATOR),
            )
        out.append(record)
    return out


def random_smooth_terms(terms: tuple[str, ...]) -> set[str]:
    """
    Smooth terms specified as random effects, in the form their
    coefficients are named: `s(g, bs = "re")` -> `s(g)`.
    """
    found = set()
    for term in terms:
        compact = term.replace(' ', '')
        if _RANDOM_SMOOTH.search(compact):
            variable = _SMOOTH_VARIABLE.match(compact).group(1)
            found.add(f"s({variable})")
    return found


def fix_random_effect_smooths(
    records: list[TaxonomyRecord],
    terms: tuple[str, ...],
) -> list[TaxonomyRecord]:
    """
    Reclassify random-effect smooth terms from fixed to random.

    Only runs when at least one record is a smooth. The smooth variable
    becomes the grouping factor.
    """
    if not any(r.function == FUNCTION_SMOOTH for r in records):
        return records

    targets = random_smooth_terms(terms)
    if not targets:
        return records

    out = []
    for record in records:
        if record.parameter in targets and record.effects != EFFECTS_RANDOM:
            record = replace(
                record,
                effects=EFFECTS_RANDOM,
                group=record.parameter[2:-1],
            )
        out.append(record)
    return out
