"""
pylinsys: generic dense matrices with row operations for linear systems.

A small library for elimination-style algorithms over any element type
that supports the arithmetic they need (int, float, Fraction, Decimal,
numpy scalars).

Submodules:
    core: Exceptions, validators and element capability protocols
    matrix: The Matrix container, row operations and row iteration
    system: Treating a matrix as a system of linear equations
"""

__version__ = "0.1.0"

from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    RowIndexError,
    ConcurrentMutationError,
)
from pylinsys.matrix import Matrix, RowIterator
from pylinsys.system import substitute

__all__ = [
    "__version__",
    "Matrix",
    "RowIterator",
    "substitute",
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "RowIndexError",
    "ConcurrentMutationError",
]
