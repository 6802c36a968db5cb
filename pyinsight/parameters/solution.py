"""
Parameter taxonomy solution type.

Wraps Result[ParameterTable] with table views, filtering and a
printable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyinsight.core.result import Result
from pyinsight.core.vocabulary import COLUMN_PARAMETER
from pyinsight.parameters._common import ParameterTable, TaxonomyRecord

if TYPE_CHECKING:
    from pyinsight.parameters.design import ParameterDesign


@dataclass
class ParameterSolution:
    """
    User-facing taxonomy table for one model.

    Wraps Result[ParameterTable] and provides convenient accessors.
    """
    _result: Result[ParameterTable]
    _design: 'ParameterDesign'

    # --- Table ---

    @property
    def table(self) -> ParameterTable:
        return self._result.params

    @property
    def records(self) -> tuple[TaxonomyRecord, ...]:
        return self._result.params.records

    @property
    def columns(self) -> tuple[str, ...]:
        """Output columns, with all-empty optional columns dropped."""
        return self._result.params.columns

    @property
    def parameters(self) -> list[str]:
        """Raw identifiers, in input order."""
        return [r.parameter for r in self.records]

    @property
    def cleaned_parameters(self) -> list[str]:
        return [r.cleaned_parameter for r in self.records]

    def column(self, name: str) -> list[str]:
        return self._result.params.column(name)

    def to_dict(self) -> dict[str, list[str]]:
        return self._result.params.to_dict()

    def to_rows(self) -> list[dict[str, str]]:
        return self._result.params.to_rows()

    # --- Lookups ---

    def filter(
        self,
        *,
        effects: str | None = None,
        component: str | None = None,
        group: str | None = None,
    ) -> ParameterTable:
        """
        Records matching every given criterion, in input order.

        Column dropping is recomputed for the subset.
        """
        return ParameterTable(records=tuple(
            r for r in self.records
            if (effects is None or r.effects == effects)
            and (component is None or r.component == component)
            and (group is None or r.group == group)
        ))

    def by_component(self) -> dict[str, list[str]]:
        """Raw identifiers keyed by component, components in first-seen order."""
        out: dict[str, list[str]] = {}
        for r in self.records:
            out.setdefault(r.component, []).append(r.parameter)
        return out

    def lookup(self, parameter: str) -> TaxonomyRecord:
        """
        Record of one raw identifier (first occurrence).

        Raises:
            KeyError: If the identifier is not part of this table.
        """
        for r in self.records:
            if r.parameter == parameter:
                return r
        raise KeyError(parameter)

    # --- Metadata ---

    @property
    def scheme(self) -> str:
        return self._result.info['scheme']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __len__(self) -> int:
        return len(self.records)

    def summary(self) -> str:
        """Plain-text table of all non-empty columns."""
        cols = self.columns
        rows = self.to_rows()
        widths = [
            max([len(c)] + [len(row[c]) for row in rows])
            for c in cols
        ]

        lines = [f"# Parameters ({self.scheme})", ""]
        lines.append(" | ".join(c.ljust(w) for c, w in zip(cols, widths)).rstrip())
        lines.append("-+-".join("-" * w for w in widths))
        for row in rows:
            lines.append(
                " | ".join(row[c].ljust(w) for c, w in zip(cols, widths)).rstrip()
            )
        if self.warnings:
            lines.append("")
            lines.extend(f"Warning: {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        n_random = sum(1 for r in self.records if r.group)
        return (
            f"ParameterSolution(scheme={self.scheme!r}, "
            f"n={len(self.records)}, random={n_random}, "
            f"columns=[{', '.join(c for c in self.columns if c != COLUMN_PARAMETER)}])"
        )
