"""
Input validation utilities for PyInsight.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on numeric array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyinsight.core.exceptions import ValidationError


def check_string(value: Any, name: str) -> str:
    """
    Verify a value is a non-empty string.
    
    Args:
        value: Input to validate
        name: Parameter name for error messages
        
    Returns:
        The string, unchanged
        
    Raises:
        ValidationError: If value is not a str or is empty
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{name}: expected str, got {type(value).__name__}"
        )
    if not value:
        raise ValidationError(f"{name}: must not be empty")
    return value


def check_string_sequence(
    values: Any,
    name: str,
    allow_empty_strings: bool = False,
) -> tuple[str, ...]:
    """
    Validate and convert an ordered collection of strings to a tuple.
    
    A bare string is rejected: iterating it would silently split it into
    characters.
    
    Args:
        values: Ordered iterable of strings
        name: Parameter name for error messages
        allow_empty_strings: Whether "" is an acceptable element
        
    Returns:
        Tuple of strings in input order
        
    Raises:
        ValidationError: If values is not an iterable of str
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ValidationError(
            f"{name}: expected a sequence of str, got {type(values).__name__}"
        )
    
    result = tuple(values)
    bad = [i for i, v in enumerate(result) if not isinstance(v, str)]
    if bad:
        raise ValidationError(
            f"{name}: elements at positions {bad} are not str"
        )
    
    if not allow_empty_strings:
        empty = [i for i, v in enumerate(result) if not v]
        if empty:
            raise ValidationError(
                f"{name}: elements at positions {empty} are empty strings"
            )
    return result


def check_string_mapping(values: Any, name: str) -> dict[str, str]:
    """
    Validate a str -> str mapping and return a plain dict copy.
    
    Args:
        values: Mapping to validate
        name: Parameter name for error messages
        
    Returns:
        dict copy of the mapping
        
    Raises:
        ValidationError: If values is not a Mapping of str to str
    """
    if not isinstance(values, Mapping):
        raise ValidationError(
            f"{name}: expected a mapping, got {type(values).__name__}"
        )
    
    bad = [k for k, v in values.items() if not isinstance(k, str) or not isinstance(v, str)]
    if bad:
        raise ValidationError(
            f"{name}: keys and values must be str, offending keys: {bad!r}"
        )
    return dict(values)


def check_degrees_of_freedom(
    dof: ArrayLike,
    name: str = "degrees_of_freedom",
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert degrees of freedom to a 1D float array.
    
    Scalars are promoted to length-1 arrays. NaN and Inf are legal values
    here: they mean "undefined" and "asymptotic" respectively.
    
    Args:
        dof: Scalar or array-like of numbers (None entries become NaN)
        name: Parameter name for error messages
        
    Returns:
        1D numpy.ndarray of float64
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    if isinstance(dof, (str, bytes)):
        raise ValidationError(
            f"{name}: expected numbers, got {type(dof).__name__}"
        )
    
    if isinstance(dof, Iterable):
        dof = [np.nan if d is None else d for d in dof]
    elif dof is None:
        dof = np.nan
    
    try:
        result = np.asarray(dof, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    return result.ravel()
