"""
Naming scheme for bamlss fits.

bamlss names samples `<dpar>.<p|s>.<term>`: `p` marks parametric
coefficients, `s` smooth terms. Dots replace every character R cannot
use in a column name, so cleaning also undoes that mangling:

    mu.p.(Intercept)    ->  (Intercept)
    mu.p.x1             ->  x1
    sigma.p.x           ->  sigma (x)
"""

from __future__ import annotations

import re

from pyinsight.core.vocabulary import (
    COMPONENT_CONDITIONAL,
    COMPONENT_SIGMA,
    COMPONENT_SMOOTH_TERMS,
    COMPONENT_ALPHA,
    FUNCTION_SMOOTH,
)
from pyinsight.parameters._rules import Fragment, RuleScheme, rule

# Sampler diagnostics that share the parametric prefixes
_DIAGNOSTIC = re.compile(r'(\.alpha|logLik|\.accepted|\.edf)$')


def clean_bamlss_name(name: str) -> str:
    """Undo bamlss prefixing and dot mangling."""
    name = re.sub(r'^(mu\.p\.|pi\.p\.)(.*)', r'\2', name)
    name = re.sub(r'^(mu\.s\.|pi\.s\.)(.*)', r's(\2)', name)
    name = re.sub(r'^sigma\.p\.(.*)', r'sigma (\1)', name)
    name = name.replace('..', '.')
    name = name.replace('.)', ')')
    name = name.replace('(.', '(')
    name = name.replace('.Intercept.', 'Intercept')
    return re.sub(r'\.$', '', name)


def _cleaned(component: str, function: str = ''):
    def extract(match, context):
        return Fragment(
            cleaned=clean_bamlss_name(match.string),
            component=component,
            function=function,
        )
    return extract


@rule('smooth-variance', r'^mu\.s\.(.*)(\.tau\d+|\.edf)$')
def _smooth_variance(match, context):
    return _cleaned(COMPONENT_SMOOTH_TERMS, FUNCTION_SMOOTH)(match, context)


@rule('alpha', r'\.alpha$')
def _alpha(match, context):
    return Fragment(cleaned=match.string, component=COMPONENT_ALPHA)


@rule('conditional', r'^(mu\.p\.|pi\.p\.)')
def _conditional(match, context):
    if _DIAGNOSTIC.search(match.string):
        return None
    return _cleaned(COMPONENT_CONDITIONAL)(match, context)


@rule('sigma', r'^sigma\.p\.')
def _sigma(match, context):
    if _DIAGNOSTIC.search(match.string):
        return None
    return _cleaned(COMPONENT_SIGMA)(match, context)


@rule('smooth', r'^(mu\.s\.|pi\.s\.)')
def _smooth(match, context):
    return _cleaned(COMPONENT_SMOOTH_TERMS, FUNCTION_SMOOTH)(match, context)


class BamlssScheme(RuleScheme):
    """Decoder for bamlss sample names."""
    name = 'bamlss'
    rules = (_smooth_variance, _alpha, _conditional, _sigma, _smooth)
