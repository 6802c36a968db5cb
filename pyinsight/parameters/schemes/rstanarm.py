"""
Naming scheme for rstanarm fits (stanreg, stanmvreg) and plain stanfit
objects using the same conventions.

    b[<term> <factor>:<level>]           group-level (random) effects
    Sigma[<factor>:<term1>,<term2>]      variance/covariance components
    smooth_sd[<term>]                    smooth standard deviations
    <resp>|<name>                        multivariate (stanmvreg) scoping
"""

from __future__ import annotations

from pyinsight.core.vocabulary import (
    EFFECTS_RANDOM,
    COMPONENT_SIGMA,
    COMPONENT_SMOOTH_SD,
    COMPONENT_SMOOTH_TERMS,
    COMPONENT_AUXILIARY,
    FUNCTION_SMOOTH,
    INTERCEPT_LABEL,
    CORRELATION_SEPARATOR,
    GROUP_PREFIX_VAR_COV,
)
from pyinsight.parameters._rules import Fragment, RuleScheme, rule

RESPONSE_SEPARATOR = '|'


@rule('random', r'^b\[(.*) (.*):(.*)\]$')
def _random(match, context):
    term, factor, level = match.group(1), match.group(2), match.group(3)
    context.note_group(factor)
    if context.design.separate_levels:
        return Fragment(
            cleaned=term, effects=EFFECTS_RANDOM, group=factor, level=level,
        )
    label = 'Intercept' if term == INTERCEPT_LABEL else term
    return Fragment(
        cleaned=term, effects=EFFECTS_RANDOM, group=f"{label}: {factor}",
    )


@rule('var-cov', r'^Sigma\[(.*):(.*),(.*)\]$')
def _var_cov(match, context):
    factor, first, second = match.group(1), match.group(2), match.group(3)
    context.note_group(factor)
    cleaned = first if first == second else first + CORRELATION_SEPARATOR + second
    group = factor if context.design.separate_levels else GROUP_PREFIX_VAR_COV + factor
    return Fragment(cleaned=cleaned, effects=EFFECTS_RANDOM, group=group)


@rule('smooth-sd', r'^smooth_sd\[(.*)\]$')
def _smooth_sd(match, context):
    return Fragment(
        cleaned=match.group(1),
        component=COMPONENT_SMOOTH_SD,
        function=FUNCTION_SMOOTH,
    )


@rule('sigma', r'sigma')
def _sigma(match, context):
    return Fragment(cleaned=match.string, component=COMPONENT_SIGMA)


@rule('auxiliary', r'(shape|phi|precision)')
def _auxiliary(match, context):
    return Fragment(cleaned=match.string, component=COMPONENT_AUXILIARY)


@rule('smooth', r'^(s|te|ti|t2)\(')
def _smooth(match, context):
    return Fragment(
        cleaned=match.string,
        component=COMPONENT_SMOOTH_TERMS,
        function=FUNCTION_SMOOTH,
    )


class RstanarmScheme(RuleScheme):
    """Decoder for rstanarm parameter names."""
    name = 'stan-rstanarm'
    rules = (_random, _var_cov, _smooth_sd, _sigma, _auxiliary, _smooth)

    def split_response(self, parameter, context):
        text, found = parameter, ''
        for response in context.design.responses:
            marker = response + RESPONSE_SEPARATOR
            if marker in text:
                text = text.replace(marker, '')
                found = found or response
        return text, found
