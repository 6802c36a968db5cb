"""
Statistic family classifier.

Public API:
    classify()         - sampling distribution of a model's test statistics
    statistic_label()  - human-readable label for a statistic token
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import numpy as np
from numpy.typing import ArrayLike

from pyinsight.core.exceptions import ValidationError
from pyinsight.core.validation import (
    check_degrees_of_freedom,
    check_string_sequence,
)
from pyinsight.core.vocabulary import (
    STATISTIC_T,
    STATISTIC_Z,
    STATISTIC_F,
    STATISTIC_CHI_SQUARED,
)
from pyinsight.models import check_model
from pyinsight.statistic._htest import NO_MATCH, lookup_test
from pyinsight.statistic._registry import (
    STAGE_BY_TAG,
    STAGE_UNSUPPORTED,
    STAGE_T,
    STAGE_Z,
    STAGE_F,
    STAGE_CHI_SQUARED,
    STAGE_MIXED,
    STAGE_AMBIGUOUS,
    REFERENCE_GRID_TYPES,
    T_FAMILIES,
    TWEEDIE_TYPES,
    TWEEDIE_FALLBACK,
    TWEEDIE_LINEAR_FAMILIES,
    T_COLUMNS,
    Z_COLUMNS,
    F_COLUMNS,
    CHI_SQUARED_COLUMNS,
)


_FIXED_STAGES = {
    STAGE_T: STATISTIC_T,
    STAGE_Z: STATISTIC_Z,
    STAGE_F: STATISTIC_F,
    STAGE_CHI_SQUARED: STATISTIC_CHI_SQUARED,
}

_LABELS = {
    STATISTIC_T: 't-statistic',
    STATISTIC_Z: 'z-statistic',
    STATISTIC_F: 'F-statistic',
    STATISTIC_CHI_SQUARED: 'chi-squared statistic',
}

# Family names ending in " t", e.g. "Student t"
_STUDENT_T_SUFFIX = re.compile(r"\st$")


def _check_optional_str(value: object, name: str) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(
            f"{name}: expected str or None, got {type(value).__name__}"
        )
    return value


def _is_tweedie(tags: tuple[str, ...], family: str | None, link: str | None) -> bool:
    """Compound Poisson type, or a Gaussian/t family with a tweedie marker."""
    if any(t in TWEEDIE_TYPES for t in tags):
        return True
    if family is None:
        return False
    linear_model = (
        family in TWEEDIE_LINEAR_FAMILIES
        or _STUDENT_T_SUFFIX.search(family) is not None
    )
    tweedie_family = (
        'tweedie' in family.lower()
        or (link is not None and 'tweedie' in link.lower())
    )
    return linear_model and tweedie_family


def _reference_grid_statistic(dof: np.ndarray | None) -> str:
    """z when every df is undefined, or every df is infinite (asymptotic); else t."""
    if dof is None:
        return STATISTIC_T
    if np.all(np.isnan(dof)) or np.all(np.isinf(dof)):
        return STATISTIC_Z
    return STATISTIC_T


def _sniff_columns(columns: tuple[str, ...] | None) -> str | None:
    """Match summary column names against the statistic vocabularies, in priority order."""
    if not columns:
        return None
    present = set(columns)
    for vocabulary, token in (
        (T_COLUMNS, STATISTIC_T),
        (Z_COLUMNS, STATISTIC_Z),
        (F_COLUMNS, STATISTIC_F),
        (CHI_SQUARED_COLUMNS, STATISTIC_CHI_SQUARED),
    ):
        if present & vocabulary:
            return token
    return None


def _ambiguous_statistic(
    model_class: str,
    family: str | None,
    columns: tuple[str, ...] | None,
    dof: np.ndarray | None,
) -> str | None:
    """Structural resolution. The per-type exceptions below are a closed list."""
    if model_class == 'fixest':
        if family in ('binomial', 'poisson'):
            return STATISTIC_Z
        return STATISTIC_T

    if model_class == 'glht' and dof is not None:
        if np.all(dof == 0):
            return STATISTIC_Z
        return STATISTIC_T

    if model_class == 'coeftest' and columns is not None:
        if 'z value' in columns:
            return STATISTIC_Z
        return STATISTIC_T

    return _sniff_columns(columns)


def classify(
    type_tag: str | Iterable[str],
    family: str | None = None,
    summary_column_names: Iterable[str] | None = None,
    degrees_of_freedom: ArrayLike | None = None,
    *,
    link: str | None = None,
    multivariate: bool = False,
    test_method: str | None = None,
    statistic_name: str | None = None,
) -> str | None:
    """
    Find the sampling distribution of a model's test statistics.

    Parameters
    ----------
    type_tag : str or sequence of str
        Back-end type tag of the fitted object, or its class hierarchy
        (concrete class first).
    family : str or None
        Name of the fitted distributional family, e.g. "gaussian",
        "binomial", "Tweedie".
    summary_column_names : sequence of str or None
        Column names of the model's coefficient summary table.
    degrees_of_freedom : number, sequence of numbers, or None
        Residual / per-estimate degrees of freedom. NaN means undefined,
        Inf means asymptotic.
    link : str or None
        Name of the link function.
    multivariate : bool
        Whether the model has more than one response.
    test_method : str or None
        Method description of a hypothesis-test object.
    statistic_name : str or None
        Name of a hypothesis test's statistic, e.g. "t", "X-squared".

    Returns
    -------
    str or None
        One of 't', 'z', 'F', 'chi-squared'; None when the model has no
        test statistic with a known sampling distribution.

    Raises
    ------
    NotAModelError
        If type_tag is not a supported model type.
    ValidationError
        If an argument has the wrong type.

    Examples
    --------
    >>> classify("lm")
    't'
    >>> classify("glm", family="binomial")
    'z'
    >>> classify("emmGrid", degrees_of_freedom=[float("inf")] * 2)
    'z'
    >>> classify("survfit") is None
    True
    """
    tags = check_model(type_tag)
    family = _check_optional_str(family, "family")
    link = _check_optional_str(link, "link")
    test_method = _check_optional_str(test_method, "test_method")
    statistic_name = _check_optional_str(statistic_name, "statistic_name")

    columns = None
    if summary_column_names is not None:
        columns = check_string_sequence(
            summary_column_names, "summary_column_names", allow_empty_strings=True
        )
    dof = None
    if degrees_of_freedom is not None:
        dof = check_degrees_of_freedom(degrees_of_freedom)

    # hypothesis tests ---------------------------------------------------

    is_htest = 'htest' in tags
    if is_htest or test_method is not None or statistic_name is not None:
        stat = lookup_test(test_method, statistic_name)
        if stat is not NO_MATCH:
            return stat
        if is_htest:
            return None

    # tweedie-check needs to come first, because glm can also have a
    # tweedie family, which would otherwise be caught by the mixed bag

    if not multivariate and _is_tweedie(tags, family, link):
        return STATISTIC_T

    # type-tag lookup ----------------------------------------------------

    model_class = next((t for t in tags if t in STAGE_BY_TAG), None)
    if model_class is None:
        return None
    stage = STAGE_BY_TAG[model_class]

    if stage == STAGE_UNSUPPORTED:
        return None

    if stage in _FIXED_STAGES:
        return _FIXED_STAGES[stage]

    if stage == STAGE_MIXED:
        if model_class in REFERENCE_GRID_TYPES:
            return _reference_grid_statistic(dof)
        if family in T_FAMILIES:
            return STATISTIC_T
        return STATISTIC_Z

    if stage == STAGE_AMBIGUOUS:
        return _ambiguous_statistic(model_class, family, columns, dof)

    # tweedie types of multivariate models, which skipped the pre-check
    return _FIXED_STAGES.get(TWEEDIE_FALLBACK.get(model_class))


def statistic_label(statistic: str | None) -> str | None:
    """
    Human-readable label for a statistic token.

    >>> statistic_label('chi-squared')
    'chi-squared statistic'
    """
    if statistic is None:
        return None
    try:
        return _LABELS[statistic]
    except KeyError:
        raise ValidationError(
            f"statistic: expected one of {sorted(_LABELS)} or None, got {statistic!r}"
        ) from None
