"""
Generic naming scheme.

Used for back-ends whose coefficient names carry no role markers. The
role of each parameter comes from the per-parameter component and group
hints a back-end adapter supplies (the labels its own "find parameters"
query returns, such as 'conditional', 'zero_inflated_random' or
'smooth_terms'). Without hints, only a few widely shared conventions
are recognized.
"""

from __future__ import annotations

from pyinsight.core.vocabulary import (
    EFFECTS_FIXED,
    EFFECTS_RANDOM,
    COMPONENT_CONDITIONAL,
    COMPONENT_ZERO_INFLATED,
    COMPONENT_SMOOTH_TERMS,
    FUNCTION_SMOOTH,
    HINT_COMPONENTS,
)
from pyinsight.parameters._rules import Fragment, RuleScheme, rule


def strip_backticks(name: str) -> str:
    return name.replace('`', '')


def component_from_label(label: str) -> str:
    """
    First known component contained in a back-end label.

    >>> component_from_label('zero_inflated_random')
    'zero_inflated'
    >>> component_from_label('random')
    'conditional'
    """
    for component in HINT_COMPONENTS:
        if component in label:
            return component
    return COMPONENT_CONDITIONAL


@rule('component-hint', r'^')
def _component_hint(match, context):
    design = context.design
    parameter = match.string
    label = design.component_hint(parameter)
    if label is None:
        return None

    function = FUNCTION_SMOOTH if 'smooth' in label else ''
    cleaned = strip_backticks(parameter)
    component = component_from_label(label)

    if 'random' not in label:
        return Fragment(cleaned=cleaned, component=component, function=function)

    group = design.group_hint(parameter) or design.random_groups[0]
    context.note_group(group)
    return Fragment(
        cleaned=cleaned,
        component=component,
        effects=EFFECTS_RANDOM,
        group=group,
        function=function,
    )


@rule('count', r'^count_(.+)$')
def _count(match, context):
    return Fragment(cleaned=strip_backticks(match.group(1)))


@rule('zero', r'^zero_(.+)$')
def _zero(match, context):
    return Fragment(
        cleaned=strip_backticks(match.group(1)),
        component=COMPONENT_ZERO_INFLATED,
    )


@rule('smooth', r'^(s|te|ti|t2)\(')
def _smooth(match, context):
    return Fragment(
        cleaned=strip_backticks(match.string),
        component=COMPONENT_SMOOTH_TERMS,
        effects=EFFECTS_FIXED,
        function=FUNCTION_SMOOTH,
    )


@rule('backticks', r'`')
def _backticks(match, context):
    return Fragment(cleaned=strip_backticks(match.string))


class GenericScheme(RuleScheme):
    """Decoder driven by back-end component hints."""
    name = 'generic'
    rules = (_component_hint, _count, _zero, _smooth, _backticks)
