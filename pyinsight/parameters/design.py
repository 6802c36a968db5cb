"""
ParameterDesign: validated inputs for the parameter taxonomy decoder.

Holds the raw parameter identifiers of one model together with the
structural hints a back-end adapter can supply cheaply. Immutable after
construction; build through `from_names()`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from collections.abc import Iterable, Mapping

from pyinsight.core.exceptions import ValidationError
from pyinsight.core.validation import (
    check_string,
    check_string_mapping,
    check_string_sequence,
)


def _optional_names(values: Iterable[str] | None, name: str) -> tuple[str, ...]:
    if values is None:
        return ()
    return check_string_sequence(values, name)


def _check_flag(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{name}: expected bool, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ParameterDesign:
    """
    Design for one decode call.

    Do not construct directly; use `from_names()`.
    """
    _parameters: tuple[str, ...]
    _scheme: str

    # Structural hints
    _responses: tuple[str, ...] = ()
    _auxiliary: tuple[str, ...] = ()
    _random_groups: tuple[str, ...] = ()
    _terms: tuple[str, ...] = ()
    _mixture: bool = False

    # Scheme flag
    _separate_levels: bool = False

    # Per-parameter hints (generic scheme)
    _components: dict[str, str] = field(default_factory=dict)
    _groups: dict[str, str] = field(default_factory=dict)

    # --- Properties ---

    @property
    def parameters(self) -> tuple[str, ...]:
        return self._parameters

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def responses(self) -> tuple[str, ...]:
        return self._responses

    @property
    def is_multivariate(self) -> bool:
        return len(self._responses) > 0

    @property
    def auxiliary(self) -> tuple[str, ...]:
        return self._auxiliary

    @property
    def random_groups(self) -> tuple[str, ...]:
        return self._random_groups

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    @property
    def mixture(self) -> bool:
        return self._mixture

    @property
    def separate_levels(self) -> bool:
        return self._separate_levels

    @property
    def components(self) -> dict[str, str]:
        return dict(self._components)

    @property
    def groups(self) -> dict[str, str]:
        return dict(self._groups)

    def component_hint(self, parameter: str) -> str | None:
        return self._components.get(parameter)

    def group_hint(self, parameter: str) -> str | None:
        return self._groups.get(parameter)

    # --- Factory ---

    @classmethod
    def from_names(
        cls,
        parameters: Iterable[str],
        scheme: str = 'generic',
        *,
        responses: Iterable[str] | None = None,
        auxiliary: Iterable[str] | None = None,
        random_groups: Iterable[str] | None = None,
        terms: Iterable[str] | None = None,
        mixture: bool = False,
        separate_levels: bool = False,
        components: Mapping[str, str] | None = None,
        groups: Mapping[str, str] | None = None,
    ) -> 'ParameterDesign':
        """
        Build a validated design.

        Args:
            parameters: Raw parameter identifiers, in model order.
            scheme: Naming scheme name, e.g. 'stan-brms'.
            responses: Response names of a multivariate model.
            auxiliary: Distributional parameters the model exposes
                (e.g. 'sigma', 'phi', 'zi').
            random_groups: Declared random-effect grouping factors.
            terms: Conditional model terms, as written in the formula.
            mixture: Whether the model uses a mixture family.
            separate_levels: Report grouping-factor levels in their own
                column and use bare factor names as groups.
            components: Per-parameter component labels from the back-end
                (e.g. {'x': 'conditional', 'u1': 'random'}).
            groups: Per-parameter grouping factor for random parameters.

        Returns:
            ParameterDesign

        Raises:
            ValidationError: On malformed input, or when a parameter
                labelled random has no resolvable grouping factor.
        """
        params = check_string_sequence(parameters, "parameters")
        scheme = check_string(scheme, "scheme")

        comp = check_string_mapping(components, "components") if components is not None else {}
        grp = check_string_mapping(groups, "groups") if groups is not None else {}
        rand_groups = _optional_names(random_groups, "random_groups")

        known = set(params)
        for name, hints in (("components", comp), ("groups", grp)):
            unknown = sorted(set(hints) - known)
            if unknown:
                raise ValidationError(
                    f"{name}: hints given for unknown parameters {unknown!r}"
                )

        for parameter, label in comp.items():
            if 'random' in label and not grp.get(parameter) and len(rand_groups) != 1:
                raise ValidationError(
                    f"components: parameter {parameter!r} is labelled {label!r} "
                    f"but has no grouping factor; pass it in groups= or declare "
                    f"exactly one random group (got {len(rand_groups)})"
                )

        return cls(
            _parameters=params,
            _scheme=scheme,
            _responses=_optional_names(responses, "responses"),
            _auxiliary=_optional_names(auxiliary, "auxiliary"),
            _random_groups=rand_groups,
            _terms=_optional_names(terms, "terms"),
            _mixture=_check_flag(mixture, "mixture"),
            _separate_levels=_check_flag(separate_levels, "separate_levels"),
            _components=comp,
            _groups=grp,
        )

    def with_scheme(self, scheme: str) -> 'ParameterDesign':
        """Copy of this design decoded under another scheme."""
        return ParameterDesign(
            _parameters=self._parameters,
            _scheme=check_string(scheme, "scheme"),
            _responses=self._responses,
            _auxiliary=self._auxiliary,
            _random_groups=self._random_groups,
            _terms=self._terms,
            _mixture=self._mixture,
            _separate_levels=self._separate_levels,
            _components=self._components,
            _groups=self._groups,
        )
