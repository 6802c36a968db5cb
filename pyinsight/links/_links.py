"""
Link functions.

Each Link maps a mean μ to the linear predictor η and back:

- link(μ) → η
- linkinv(η) → μ
- mu_eta(η) = dμ/dη

Values are clamped where the transform is undefined at the boundary,
matching the behaviour of R's stats::make.link closely enough for
back-transforming estimates and confidence limits.

References:
    McCullagh, P., & Nelder, J. A. (1989). Generalized Linear Models (2nd ed.)
    R Core Team. stats::make.link
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import special, stats

_EPS = np.finfo(np.float64).eps
_TINY = 1e-10


def _as_float(x: ArrayLike) -> NDArray:
    return np.asarray(x, dtype=np.float64)


class Link(ABC):
    """Abstract link g(μ) = η. Calling a Link applies g."""

    name: str = ''

    @abstractmethod
    def link(self, mu: ArrayLike) -> NDArray:
        ...

    @abstractmethod
    def linkinv(self, eta: ArrayLike) -> NDArray:
        ...

    @abstractmethod
    def mu_eta(self, eta: ArrayLike) -> NDArray:
        ...

    def __call__(self, mu: ArrayLike) -> NDArray:
        return self.link(mu)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Link) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class IdentityLink(Link):
    name = 'identity'

    def link(self, mu):
        return _as_float(mu).copy()

    def linkinv(self, eta):
        return _as_float(eta).copy()

    def mu_eta(self, eta):
        return np.ones_like(_as_float(eta))


class LogitLink(Link):
    """log(μ / (1 - μ))"""
    name = 'logit'

    def link(self, mu):
        return special.logit(np.clip(_as_float(mu), _TINY, 1 - _TINY))

    def linkinv(self, eta):
        return special.expit(_as_float(eta))

    def mu_eta(self, eta):
        p = special.expit(_as_float(eta))
        return np.maximum(p * (1.0 - p), _EPS)


class ProbitLink(Link):
    """Standard normal quantile function."""
    name = 'probit'

    def link(self, mu):
        return stats.norm.ppf(np.clip(_as_float(mu), _TINY, 1 - _TINY))

    def linkinv(self, eta):
        # R clamps η so that μ stays strictly inside (0, 1)
        bound = -stats.norm.ppf(_EPS)
        return stats.norm.cdf(np.clip(_as_float(eta), -bound, bound))

    def mu_eta(self, eta):
        return np.maximum(stats.norm.pdf(_as_float(eta)), _EPS)


class CauchitLink(Link):
    """Standard Cauchy quantile function."""
    name = 'cauchit'

    def link(self, mu):
        return stats.cauchy.ppf(np.clip(_as_float(mu), _TINY, 1 - _TINY))

    def linkinv(self, eta):
        bound = -stats.cauchy.ppf(_EPS)
        return stats.cauchy.cdf(np.clip(_as_float(eta), -bound, bound))

    def mu_eta(self, eta):
        return np.maximum(stats.cauchy.pdf(_as_float(eta)), _EPS)


class CloglogLink(Link):
    """log(-log(1 - μ))"""
    name = 'cloglog'

    def link(self, mu):
        mu = np.clip(_as_float(mu), _TINY, 1 - _TINY)
        return np.log(-np.log1p(-mu))

    def linkinv(self, eta):
        mu = -np.expm1(-np.exp(_as_float(eta)))
        return np.clip(mu, _EPS, 1 - _EPS)

    def mu_eta(self, eta):
        eta = np.minimum(_as_float(eta), 700.0)
        return np.maximum(np.exp(eta) * np.exp(-np.exp(eta)), _EPS)


class LogLink(Link):
    name = 'log'

    def link(self, mu):
        return np.log(np.maximum(_as_float(mu), _TINY))

    def linkinv(self, eta):
        return np.maximum(np.exp(np.clip(_as_float(eta), -700.0, 700.0)), _EPS)

    def mu_eta(self, eta):
        return np.maximum(np.exp(np.clip(_as_float(eta), -700.0, 700.0)), _EPS)


class InverseLink(Link):
    """1 / μ"""
    name = 'inverse'

    def link(self, mu):
        return 1.0 / _as_float(mu)

    def linkinv(self, eta):
        return 1.0 / _as_float(eta)

    def mu_eta(self, eta):
        return -1.0 / _as_float(eta) ** 2


class InverseSquareLink(Link):
    """1 / μ², the canonical link of the inverse Gaussian family."""
    name = '1/mu^2'

    def link(self, mu):
        return 1.0 / _as_float(mu) ** 2

    def linkinv(self, eta):
        return 1.0 / np.sqrt(_as_float(eta))

    def mu_eta(self, eta):
        return -1.0 / (2.0 * _as_float(eta) ** 1.5)


class SqrtLink(Link):
    name = 'sqrt'

    def link(self, mu):
        return np.sqrt(_as_float(mu))

    def linkinv(self, eta):
        return _as_float(eta) ** 2

    def mu_eta(self, eta):
        return 2.0 * _as_float(eta)


LINK_CLASSES: dict[str, type[Link]] = {
    cls.name: cls
    for cls in (
        IdentityLink, LogitLink, ProbitLink, CauchitLink, CloglogLink,
        LogLink, InverseLink, InverseSquareLink, SqrtLink,
    )
}
