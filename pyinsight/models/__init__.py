"""
Supported-model registry.

Public API:
    is_model(type_tag)             - True for any supported model type
    is_regression_model(type_tag)  - True for supported regression models only
    check_model(type_tag)          - raise NotAModelError for unsupported types
"""

from pyinsight.models._registry import (
    MODEL_TYPES,
    REGRESSION_TYPES,
    is_model,
    is_regression_model,
    check_model,
)

__all__ = [
    "MODEL_TYPES",
    "REGRESSION_TYPES",
    "is_model",
    "is_regression_model",
    "check_model",
]
