"""
Naming scheme for brms (Stan) fits.

brms encodes a parameter's role in prefixes and double-underscore
markers:

    b_x, bs_sx_1, bsp_mox, bcs_x      population-level (fixed) effects
    b_zi_x, bs_zi_...                 zero-inflation fixed effects
    b_<dpar>_x                        fixed effects of a distributional parameter
    r_<factor>[<level>,<term>]        group-level (random) effects
    r_<factor>__zi[<level>,<term>]    zero-inflation random effects
    sd_<factor>__<term>               group-level standard deviations
    cor_<factor>__<term1>__<term2>    group-level correlations
    simo_<term>[<n>]                  monotonic-effect simplex
    sds_<term>                        smooth standard deviations
    prior_<name>                      prior draws

Multivariate fits additionally embed the response name as `_<resp>_`,
`__<resp>`, `__zi_<resp>` or `sigma_<resp>`.
"""

from __future__ import annotations

import re

from pyinsight.core.vocabulary import (
    EFFECTS_RANDOM,
    COMPONENT_CONDITIONAL,
    COMPONENT_ZERO_INFLATED,
    COMPONENT_DISPERSION,
    COMPONENT_SIGMA,
    COMPONENT_SMOOTH_SD,
    COMPONENT_SIMPLEX,
    COMPONENT_PRIORS,
    COMPONENT_AUXILIARY,
    COMPONENT_BETA,
    COMPONENT_CAR,
    COMPONENT_MIX,
    COMPONENT_SHIFTPROP,
    FUNCTION_SMOOTH,
    CORRELATION_SEPARATOR,
    GROUP_PREFIX_SD_COR,
    INTERCEPT_LABEL,
)
from pyinsight.parameters._rules import DecodeContext, Fragment, RuleScheme, rule

# Response markers of multivariate fits, applied in this order
_RESPONSE_MARKERS = (
    (r'_{}_(.*)', r'_\1'),
    (r'__{}(.*)', r'\1'),
    (r'__zi_{}(.*)', r'\1'),
    (r'(sigma)(_{})', r'\1'),
)

_INDEXED = re.compile(r'^(.*)\.(\d)\.$')
_MIXTURE_CLASS = re.compile(r'^mu(\d+)_(.*)$')

CAR_GROUP = 'CAR'

INTERCEPT_NAMES = frozenset({'Intercept', 'zi_Intercept'})
INTERCEPT_SUFFIX = '_Intercept'


def _dpars(context: DecodeContext) -> tuple[str, ...]:
    """Distributional parameters that may prefix a name, longest first."""
    names = set(context.design.auxiliary) | {'sigma'}
    names.discard('zi')
    return tuple(sorted(names, key=len, reverse=True))


def _dpar_component(dpar: str) -> str:
    return COMPONENT_SIGMA if dpar == 'sigma' else dpar


def _strip_term_prefix(term: str, context: DecodeContext) -> tuple[str, str]:
    """Split 'zi_x' / '<dpar>_x' into (component, 'x')."""
    if term.startswith('zi_'):
        return COMPONENT_ZERO_INFLATED, term[3:]
    for dpar in _dpars(context):
        if term.startswith(dpar + '_'):
            return _dpar_component(dpar), term[len(dpar) + 1:]
    return COMPONENT_CONDITIONAL, term


def _intercept(term: str) -> str:
    if term in INTERCEPT_NAMES or term.endswith(INTERCEPT_SUFFIX):
        return INTERCEPT_LABEL
    return term


def _group_label(factor: str, context: DecodeContext) -> str:
    context.note_group(factor)
    if context.design.separate_levels:
        return factor
    return GROUP_PREFIX_SD_COR + factor


# --- Rule table ---

@rule('zero-inflated-fixed', r'^(b_zi_|bs_zi_|bsp_zi_|bcs_zi_)(.*)$')
def _zero_inflated_fixed(match, context):
    prefix, body = match.group(1), match.group(2)
    if prefix == 'b_zi_':
        body = _INDEXED.sub(r'\1[\2]', body)
    return Fragment(
        cleaned=body,
        component=COMPONENT_ZERO_INFLATED,
        function=FUNCTION_SMOOTH if prefix == 'bs_zi_' else '',
    )


@rule('fixed', r'^(b_|bs_|bsp_|bcs_)(.*)$')
def _fixed(match, context):
    prefix, body = match.group(1), match.group(2)
    function = FUNCTION_SMOOTH if prefix == 'bs_' else ''

    if prefix == 'b_' and context.design.mixture:
        mixture = _MIXTURE_CLASS.match(body)
        if mixture is not None:
            return Fragment(
                cleaned=mixture.group(2),
                effects=EFFECTS_RANDOM,
                group=f"Class {mixture.group(1)}",
            )

    if prefix == 'b_':
        for dpar in _dpars(context):
            if body.startswith(dpar + '_'):
                return Fragment(
                    cleaned=body[len(dpar) + 1:],
                    component=_dpar_component(dpar),
                )
        body = _INDEXED.sub(r'\1[\2]', body)

    return Fragment(cleaned=body, function=function)


@rule('random', r'^r_(.*)\[(.*),(.*)\]$')
def _random(match, context):
    factor, level, term = match.group(1), match.group(2), match.group(3)

    component = COMPONENT_CONDITIONAL
    if '__zi' in factor:
        component = COMPONENT_ZERO_INFLATED
        factor = factor.replace('__zi', '')
        level = level.replace('__zi', '')
    for dpar in _dpars(context):
        marker = '__' + dpar
        if marker in factor:
            component = _dpar_component(dpar)
            factor = factor.replace(marker, '')
            level = level.replace(marker, '')

    context.note_group(factor)
    if context.design.separate_levels:
        return Fragment(
            cleaned=term, component=component,
            effects=EFFECTS_RANDOM, group=factor, level=level,
        )
    return Fragment(
        cleaned=term, component=component,
        effects=EFFECTS_RANDOM, group=f"{term}: {factor}",
    )


@rule('car', r'^(sd|rho)?car$')
def _car(match, context):
    return Fragment(
        cleaned=match.group(0),
        component=COMPONENT_CAR,
        effects=EFFECTS_RANDOM,
        group=CAR_GROUP,
    )


@rule('smooth-sd', r'^sds_(.*)$')
def _smooth_sd(match, context):
    return Fragment(
        cleaned=match.group(1),
        component=COMPONENT_SMOOTH_SD,
        function=FUNCTION_SMOOTH,
    )


@rule('sd', r'^sd_(.*?)__(.*)$')
def _sd(match, context):
    component, term = _strip_term_prefix(match.group(2), context)
    return Fragment(
        cleaned=term,
        component=component,
        effects=EFFECTS_RANDOM,
        group=_group_label(match.group(1), context),
    )


@rule('cor', r'^cor_(.*?)__(.*)$')
def _cor(match, context):
    first, sep, second = match.group(2).partition('__')
    component, first = _strip_term_prefix(first, context)
    first = _intercept(first)
    if sep:
        second = _intercept(_strip_term_prefix(second, context)[1])
        cleaned = first if first == second else first + CORRELATION_SEPARATOR + second
    else:
        cleaned = first
    return Fragment(
        cleaned=cleaned,
        component=component,
        effects=EFFECTS_RANDOM,
        group=_group_label(match.group(1), context),
    )


@rule('simplex', r'^simo_(.*)\[(\d+)\]$')
def _simplex(match, context):
    return Fragment(
        cleaned=f"{match.group(1)}[{match.group(2)}]",
        component=COMPONENT_SIMPLEX,
    )


@rule('prior', r'^prior_(.*)$')
def _prior(match, context):
    return Fragment(cleaned=match.group(1), component=COMPONENT_PRIORS)


@rule('sigma', r'sigma')
def _sigma(match, context):
    text = match.string
    if text.startswith('sigma_'):
        text = text[len('sigma_'):]
    return Fragment(cleaned=text.replace('sigma_', ''), component=COMPONENT_SIGMA)


def _marker(name: str, pattern: str, component: str):
    @rule(name, pattern)
    def extract(match, context):
        return Fragment(cleaned=match.string, component=component)
    return extract


class BrmsScheme(RuleScheme):
    """Decoder for brms parameter names."""
    name = 'stan-brms'
    interaction_separator = '.'
    intercept_names = INTERCEPT_NAMES
    intercept_suffix = INTERCEPT_SUFFIX

    rules = (
        _zero_inflated_fixed,
        _fixed,
        _random,
        _car,
        _smooth_sd,
        _sd,
        _cor,
        _simplex,
        _prior,
        _sigma,
        _marker('beta', r'beta', COMPONENT_BETA),
        _marker('dispersion', r'dispersion', COMPONENT_DISPERSION),
        _marker('mix', r'mix', COMPONENT_MIX),
        _marker('shiftprop', r'shiftprop', COMPONENT_SHIFTPROP),
        _marker('auxiliary', r'(shape|phi|precision|_ndt_)', COMPONENT_AUXILIARY),
    )

    def split_response(self, parameter, context):
        responses = context.design.responses
        if not responses:
            return parameter, ''

        text, found = parameter, ''
        for pattern, replacement in _RESPONSE_MARKERS:
            for response in responses:
                stripped = re.sub(pattern.format(re.escape(response)), replacement, text)
                if stripped != text:
                    text = stripped
                    found = found or response
        return text, found
