"""
Shared compute infrastructure for PyInsight.

Submodules:
    timing: Execution timing utilities
"""

from pyinsight.core.compute.timing import Timer

__all__ = [
    "Timer",
]
