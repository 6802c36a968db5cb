"""
Link-function lookup for supported models.

Resolution order:
    1. an explicit link name
    2. a fixed link for the concrete model type (linear models, logistic
       and multinomial models, survival models, count models, ivprobit)
    3. the default link of the fitted family
    4. a fixed link for a parent class in the type hierarchy
    5. None, when none of the above applies
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from numpy.typing import ArrayLike, NDArray

from pyinsight.core.exceptions import ValidationError
from pyinsight.core.validation import check_string
from pyinsight.links._links import LINK_CLASSES, Link
from pyinsight.models import check_model

IDENTITY_TYPES = frozenset({
    "lm", "asym", "phylolm", "lme", "mmrm", "mmrm_fit", "mmrm_tmb",
    "systemfit", "lqmm", "lqm", "bayesx", "mixed", "truncreg", "censReg",
    "gls", "rq", "rqs", "rqss", "crq", "crqs", "lmRob", "complmrob",
    "speedlm", "biglm", "lmrob", "lm_robust", "iv_robust", "aovlist",
    "felm", "feis", "ivreg", "ivFixed", "plm", "MANOVA", "RM", "afex_aov",
    "svy2lme",
})

LOGIT_TYPES = frozenset({
    "multinom", "logitr", "BBreg", "BBmm", "gmnl", "logistf", "flac",
    "flic", "lrm", "orm", "cph", "mlogit", "mclogit", "mblogit",
    "mmclogit", "coxph", "coxr", "survfit", "coxme", "riskRegression",
    "comprisk", "nestedLogit",
})

LOG_TYPES = frozenset({"zeroinfl", "hurdle", "zerotrunc"})

PROBIT_TYPES = frozenset({"ivprobit"})

LINK_BY_TYPE = MappingProxyType({
    **{t: 'identity' for t in IDENTITY_TYPES},
    **{t: 'logit' for t in LOGIT_TYPES},
    **{t: 'log' for t in LOG_TYPES},
    **{t: 'probit' for t in PROBIT_TYPES},
})

# Family names are matched case-insensitively
DEFAULT_LINKS = MappingProxyType({
    'gaussian': 'identity',
    'binomial': 'logit',
    'quasibinomial': 'logit',
    'poisson': 'log',
    'quasipoisson': 'log',
    'gamma': 'inverse',
    'inverse.gaussian': '1/mu^2',
})


class LinkInverse:
    """
    Inverse of a link, callable as g⁻¹(η).

    The wrapped Link stays available as `link_object`; its attributes are
    reachable directly (`.name`, `.linkinv`, `.mu_eta`).
    """

    def __init__(self, link: Link):
        self.link_object = link

    def __call__(self, eta: ArrayLike) -> NDArray:
        return self.link_object.linkinv(eta)

    def __getattr__(self, attr: str):
        if attr == 'link_object':
            raise AttributeError(attr)
        return getattr(self.link_object, attr)

    def __repr__(self) -> str:
        return f"LinkInverse({self.link_object.name!r})"


def make_link(name: str) -> Link:
    """
    Link object by name.

    Raises:
        ValidationError: If the name is not a known link.
    """
    check_string(name, "link")
    cls = LINK_CLASSES.get(name)
    if cls is None:
        valid = ', '.join(sorted(LINK_CLASSES))
        raise ValidationError(f"Unknown link: {name!r}. Valid links: {valid}")
    return cls()


def _link_name(tags: tuple[str, ...], family: str | None) -> str | None:
    # concrete class, then family, then parent classes: ("glm", "lm") must
    # not inherit the identity link of "lm"
    if tags[0] in LINK_BY_TYPE:
        return LINK_BY_TYPE[tags[0]]
    if family is not None:
        name = DEFAULT_LINKS.get(family.lower())
        if name is not None:
            return name
    for tag in tags[1:]:
        if tag in LINK_BY_TYPE:
            return LINK_BY_TYPE[tag]
    return None


def link_function(
    type_tag: str | Iterable[str],
    family: str | None = None,
    link: str | None = None,
) -> Link | None:
    """
    Link function g(μ) of a model.

    Args:
        type_tag: Back-end type tag, or class hierarchy (concrete first).
        family: Fitted family name, e.g. 'binomial', 'Gamma'.
        link: Link name reported by the fitted family; takes precedence.

    Returns:
        A Link (callable as g(μ)), or None if it cannot be determined.

    Raises:
        NotAModelError: If type_tag is not a supported model.
        ValidationError: If `link` names an unknown link.
    """
    tags = check_model(type_tag)
    if family is not None:
        check_string(family, "family")
    if link is not None:
        return make_link(link)

    name = _link_name(tags, family)
    return make_link(name) if name is not None else None


def link_inverse(
    type_tag: str | Iterable[str],
    family: str | None = None,
    link: str | None = None,
) -> LinkInverse | None:
    """
    Inverse link g⁻¹(η) of a model; same lookup as `link_function`.

    Returns:
        A LinkInverse (callable as g⁻¹(η)), or None.
    """
    found = link_function(type_tag, family=family, link=link)
    return LinkInverse(found) if found is not None else None
