"""
Dense generic matrix with row operations.

Public API:
    Matrix       - rectangular container with row access and row operations
    RowIterator  - iterator over a matrix's rows
"""

from pylinsys.matrix.matrix import Matrix
from pylinsys.matrix.iteration import RowIterator

__all__ = [
    "Matrix",
    "RowIterator",
]
