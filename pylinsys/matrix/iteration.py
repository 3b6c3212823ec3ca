"""
Row iteration over a Matrix.

The iterator keeps only a reference to its matrix and a cursor, and
re-queries the matrix on every step. The matrix must not be mutated
while an iterator over it is alive; this is checked on each step
against the matrix's mutation counter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic

from pylinsys.core.exceptions import ConcurrentMutationError
from pylinsys.core.protocols import T

if TYPE_CHECKING:
    from pylinsys.matrix.matrix import Matrix


class RowIterator(Generic[T]):
    """
    Lazy, finite iterator yielding each row of a matrix as a tuple.

    Rows come out in index order 0..n_rows-1. Once exhausted it stays
    exhausted; create a new one with Matrix.row_iter() to start over.

    Raises:
        ConcurrentMutationError: On next() if the matrix was mutated
            after this iterator was created
    """

    def __init__(self, matrix: Matrix[T]):
        self._matrix = matrix
        self._index = 0
        self._version = matrix._version
        self._exhausted = False

    def __iter__(self) -> RowIterator[T]:
        return self

    def __next__(self) -> tuple[T, ...]:
        if self._exhausted:
            raise StopIteration

        current = self._matrix._version
        if current != self._version:
            raise ConcurrentMutationError(
                f"matrix was mutated during row iteration "
                f"(at row {self._index})",
                expected_version=self._version,
                actual_version=current,
            )

        row = self._matrix.get_row_checked(self._index)
        if row is None:
            self._exhausted = True
            raise StopIteration

        self._index += 1
        return row
