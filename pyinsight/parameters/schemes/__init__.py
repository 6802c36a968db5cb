"""
Registry of naming schemes.

One scheme instance per back-end naming convention, keyed by scheme
name. The mapping is read-only and shared by all callers.
"""

from types import MappingProxyType

from pyinsight.core.exceptions import UnsupportedBackendError
from pyinsight.parameters._rules import RuleScheme
from pyinsight.parameters.schemes.bamlss import BamlssScheme
from pyinsight.parameters.schemes.bayesfactor import BayesFactorScheme
from pyinsight.parameters.schemes.brms import BrmsScheme
from pyinsight.parameters.schemes.generic import GenericScheme
from pyinsight.parameters.schemes.rstanarm import RstanarmScheme

GENERIC_SCHEME = GenericScheme.name

SCHEMES = MappingProxyType({
    scheme.name: scheme
    for scheme in (
        BrmsScheme(),
        RstanarmScheme(),
        BamlssScheme(),
        BayesFactorScheme(),
        GenericScheme(),
    )
})

# back-end type tag -> scheme name; unlisted tags use the generic scheme
SCHEME_BY_TYPE = MappingProxyType({
    'brmsfit': BrmsScheme.name,
    'stanreg': RstanarmScheme.name,
    'stanfit': RstanarmScheme.name,
    'stanmvreg': RstanarmScheme.name,
    'bamlss': BamlssScheme.name,
    'BFBayesFactor': BayesFactorScheme.name,
})


def get_scheme(name: str) -> RuleScheme:
    """
    Look up a registered naming scheme.

    Raises:
        UnsupportedBackendError: If no scheme is registered under `name`.
    """
    try:
        return SCHEMES[name]
    except KeyError:
        available = tuple(sorted(SCHEMES))
        raise UnsupportedBackendError(
            f"No naming scheme registered for {name!r}. "
            f"Available: {', '.join(available)}",
            scheme=name,
            available=available,
        ) from None


def scheme_for_model(type_tag: str) -> str:
    """Scheme name for a back-end type tag."""
    return SCHEME_BY_TYPE.get(type_tag, GENERIC_SCHEME)


__all__ = [
    'SCHEMES',
    'SCHEME_BY_TYPE',
    'GENERIC_SCHEME',
    'get_scheme',
    'scheme_for_model',
    'BrmsScheme',
    'RstanarmScheme',
    'BamlssScheme',
    'BayesFactorScheme',
    'GenericScheme',
]
