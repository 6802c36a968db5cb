"""
Core infrastructure for PyInsight.

This module provides shared abstractions and utilities used by all
domain-specific submodules (parameters, statistic, links, models).

Key components:
    protocols: NamingScheme protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    vocabulary: Label constants for taxonomy tables and statistic tokens
    validation: Input validators
    compute: Timing
"""

from pyinsight.core.protocols import NamingScheme
from pyinsight.core.result import Result
from pyinsight.core.exceptions import (
    PyInsightError,
    ValidationError,
    NotAModelError,
    UnsupportedBackendError,
    MalformedNameError,
)

__all__ = [
    # Protocols
    "NamingScheme",
    # Result
    "Result",
    # Exceptions
    "PyInsightError",
    "ValidationError",
    "NotAModelError",
    "UnsupportedBackendError",
    "MalformedNameError",
]
