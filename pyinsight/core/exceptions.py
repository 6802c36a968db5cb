"""
Exception hierarchy for PyInsight.

All exceptions inherit from PyInsightError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyInsightError(Exception):
    """Base exception for all PyInsight errors."""
    pass


class ValidationError(PyInsightError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class NotAModelError(ValidationError):
    """
    Object is not a supported model.
    
    Raised when a type tag is not a member of the supported-model
    registry. Callers must check this before asking for any model facts.
    
    Attributes:
        type_tag: The offending type tag (or class hierarchy)
    """
    
    def __init__(self, message: str, type_tag: str | tuple[str, ...] | None = None):
        super().__init__(message)
        self.type_tag = type_tag


class UnsupportedBackendError(PyInsightError):
    """
    No naming scheme is registered for a back-end.
    
    Fatal for the call that raised it. Callers may retry with the
    'generic' scheme as a degraded service.
    
    Attributes:
        scheme: The requested scheme name
        available: Names of all registered schemes
    """
    
    def __init__(
        self,
        message: str,
        scheme: str | None = None,
        available: tuple[str, ...] = ()
    ):
        super().__init__(message)
        self.scheme = scheme
        self.available = available


class MalformedNameError(PyInsightError):
    """
    A decode rule matched a parameter but produced no usable name.
    
    Indicates an inconsistency in a naming scheme's rule table. Treat as
    a defect report rather than something to recover from.
    
    Attributes:
        parameter: The raw parameter identifier
        scheme: Name of the naming scheme in use
        rule: Name of the rule that claimed the match
    """
    
    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        scheme: str | None = None,
        rule: str | None = None
    ):
        super().__init__(message)
        self.parameter = parameter
        self.scheme = scheme
        self.rule = rule
