"""
Generic result container for all PyInsight computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics and
serialization while allowing domains to define their own payload structures.

Design decisions:
    - Generic over payload P for type safety
    - info dict for flexible metadata (scheme, rule counts, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for introspection computations.
    
    Type Parameters:
        P: The domain-specific payload type
        
    Attributes:
        params: Domain-specific payload (taxonomy table, etc.)
        info: Structured metadata (scheme, rule match counts, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the naming scheme that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=ParameterTable(records=records),
        ...     info={'scheme': 'stan-brms', 'n_parameters': 12},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='stan-brms'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
