"""
Common data types for the parameter taxonomy decoder.

Contains the frozen record and table payloads that go inside Result[P]
envelopes. TaxonomyRecord is a pure data container; ParameterTable adds
only read-only views over its records.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyinsight.core.vocabulary import (
    ALL_COLUMNS,
    OPTIONAL_COLUMNS,
    COLUMN_PARAMETER,
    COLUMN_EFFECTS,
    COLUMN_COMPONENT,
    COLUMN_GROUP,
    COLUMN_RESPONSE,
    COLUMN_FUNCTION,
    COLUMN_LEVEL,
    COLUMN_CLEANED,
)


@dataclass(frozen=True)
class TaxonomyRecord:
    """Canonical description of one model parameter.

    Attributes:
        parameter: Raw identifier as reported by the back-end.
        effects: 'fixed' or 'random'.
        component: Model component, e.g. 'conditional', 'zero_inflated'.
        group: Grouping-factor label ('' for fixed effects).
        response: Response label of a multivariate model ('' otherwise).
        function: 'smooth' for smooth-term parameters, else ''.
        level: Level of the grouping factor, when reported separately.
        cleaned_parameter: Human-readable name without scheme mangling.
    """
    parameter: str
    effects: str
    component: str
    cleaned_parameter: str
    group: str = ''
    response: str = ''
    function: str = ''
    level: str = ''

    def as_row(self) -> dict[str, str]:
        """All columns, keyed by output column name."""
        return {
            COLUMN_PARAMETER: self.parameter,
            COLUMN_EFFECTS: self.effects,
            COLUMN_COMPONENT: self.component,
            COLUMN_GROUP: self.group,
            COLUMN_RESPONSE: self.response,
            COLUMN_FUNCTION: self.function,
            COLUMN_LEVEL: self.level,
            COLUMN_CLEANED: self.cleaned_parameter,
        }


# column name -> record attribute
_ATTRIBUTES = dict(zip(ALL_COLUMNS, (
    'parameter', 'effects', 'component', 'group',
    'response', 'function', 'level', 'cleaned_parameter',
)))


@dataclass(frozen=True)
class ParameterTable:
    """
    Ordered taxonomy records for one model, one per raw parameter.

    Optional columns (Group, Response, Function, Level) that are empty
    for every record are not part of `columns`.
    """
    records: tuple[TaxonomyRecord, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, index: int) -> TaxonomyRecord:
        return self.records[index]

    @property
    def columns(self) -> tuple[str, ...]:
        """Output columns, with all-empty optional columns dropped."""
        return tuple(
            c for c in ALL_COLUMNS
            if c not in OPTIONAL_COLUMNS
            or any(getattr(r, _ATTRIBUTES[c]) for r in self.records)
        )

    def column(self, name: str) -> list[str]:
        """Values of one column, in record order."""
        try:
            attr = _ATTRIBUTES[name]
        except KeyError:
            raise KeyError(
                f"Unknown column {name!r}. Valid columns: {', '.join(ALL_COLUMNS)}"
            ) from None
        return [getattr(r, attr) for r in self.records]

    def to_dict(self) -> dict[str, list[str]]:
        """Column-oriented view with empty optional columns dropped."""
        return {c: self.column(c) for c in self.columns}

    def to_rows(self) -> list[dict[str, str]]:
        """Row-oriented view with empty optional columns dropped."""
        cols = self.columns
        return [{c: row[c] for c in cols} for row in (r.as_row() for r in self.records)]
