"""
Core protocols for PyInsight.

These define structural interfaces that domain-specific implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Stateless: all per-call state lives in a context object owned by the caller
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, runtime_checkable

C = TypeVar('C', contravariant=True)  # Per-call context type
R = TypeVar('R', covariant=True)      # Record type


@runtime_checkable
class NamingScheme(Protocol[C, R]):
    """
    Protocol for back-end naming schemes.
    
    Each scheme knows how to turn one raw parameter identifier, as produced
    by a particular model-fitting back-end, into one taxonomy record. The
    scheme itself holds only read-only rule tables; anything accumulated
    while decoding a batch of names lives in the context argument.
    
    Type Parameters:
        C: The per-call context type this scheme reads
        R: The record type this scheme produces
    """
    
    @property
    def name(self) -> str:
        """
        Scheme identifier.
        
        Examples: 'stan-brms', 'stan-rstanarm', 'bamlss', 'generic'
        """
        ...
    
    @property
    def interaction_separator(self) -> str | None:
        """
        Separator the back-end uses between interaction operands, or None
        if its names already use the canonical separator.
        """
        ...
    
    def decode_one(self, parameter: str, context: C) -> R:
        """
        Decode a single raw parameter identifier.
        
        Args:
            parameter: Raw identifier exactly as the back-end reports it
            context: Call-scoped context (structural hints and accumulators)
            
        Returns:
            One taxonomy record
            
        Raises:
            MalformedNameError: If a rule claims the name but cannot extract it
        """
        ...

