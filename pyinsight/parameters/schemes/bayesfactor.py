"""
Naming scheme for BayesFactor posterior samples.

BayesFactor names coefficients `<term>-<level>`. Continuous predictors
repeat the term (`x-x`); interactions join factors with ':' and levels
with '.&.' (`f1:f2-a.&.b`). Random factors look the same as fixed ones,
so they are recognized only through the declared random groups.
"""

from __future__ import annotations

from pyinsight.core.vocabulary import EFFECTS_RANDOM, COMPONENT_EXTRA
from pyinsight.parameters._rules import Fragment, RuleScheme, rule

LEVEL_SEPARATOR = '-'
INTERACTION_LEVEL_SEPARATOR = '.&.'


def clean_bayesfactor_name(name: str) -> str:
    """
    Readable name for a `<term>-<level>` identifier.

    Examples:
        >>> clean_bayesfactor_name('x-x')
        'x'
        >>> clean_bayesfactor_name('cyl-6')
        'cyl [6]'
        >>> clean_bayesfactor_name('cyl:am-6.&.1')
        'cyl [6] * am [1]'
    """
    term, sep, level = name.partition(LEVEL_SEPARATOR)
    if not sep:
        return name
    if term == level:
        return term
    if ':' not in term:
        return f"{term} [{level}]"

    factors = term.split(':')
    levels = level.split(INTERACTION_LEVEL_SEPARATOR)
    marked = ['' if lv in factors else f" [{lv}]" for lv in levels]
    return ' * '.join(f + lv for f, lv in zip(factors, marked))


@rule('extra', r'^(mu|sig2|g(_.*)?)$')
def _extra(match, context):
    return Fragment(cleaned=match.string, component=COMPONENT_EXTRA)


@rule('random', r'^([^-]+)-(.+)$')
def _random(match, context):
    factor = match.group(1)
    if factor not in context.design.random_groups:
        return None
    context.note_group(factor)
    if context.design.separate_levels:
        return Fragment(
            cleaned=factor, effects=EFFECTS_RANDOM,
            group=factor, level=match.group(2),
        )
    return Fragment(
        cleaned=clean_bayesfactor_name(match.string),
        effects=EFFECTS_RANDOM,
        group=factor,
    )


@rule('term', r'^[^-]+-.+$')
def _term(match, context):
    return Fragment(cleaned=clean_bayesfactor_name(match.string))


class BayesFactorScheme(RuleScheme):
    """Decoder for BayesFactor (BFBayesFactor) sample names."""
    name = 'bayesfactor'
    rules = (_extra, _random, _term)
