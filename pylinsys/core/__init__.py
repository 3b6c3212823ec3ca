"""
Core infrastructure for pylinsys.

Shared abstractions used by the matrix and system subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    protocols: Element capability protocols
"""

from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    RowIndexError,
    ConcurrentMutationError,
)
from pylinsys.core.protocols import SupportsMul, SupportsAdd, SupportsRowArithmetic

__all__ = [
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "RowIndexError",
    "ConcurrentMutationError",
    # Protocols
    "SupportsMul",
    "SupportsAdd",
    "SupportsRowArithmetic",
]
