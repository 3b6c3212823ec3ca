"""
Matrix[T]: a dense two-dimensional container with row-granular access.

Storage is a list of rows, each row a list of elements owned by the
matrix. Rows never leave the matrix as mutable objects: accessors return
tuples, and every row handed in is copied. The element type is generic;
each operation asks only for the capability it needs (see
pylinsys.core.protocols).

Construction:
    Matrix.new(n, m)                  every cell is element_type()
    Matrix.new_with(n, m, f)          cell (i, j) is f(i, j)
    Matrix.from_rows(rows)            None if rows is empty or ragged
    Matrix.from_array(array)          strict, validated numpy conversion
"""

from __future__ import annotations

import copy
import warnings
from collections.abc import Callable, Iterable
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinsys.core.exceptions import ValidationError
from pylinsys.core.protocols import SupportsMul, SupportsRowArithmetic, T
from pylinsys.core.validation import (
    check_2d,
    check_array,
    check_capability,
    check_dimension,
    check_length,
    check_row_index,
    check_row_index_type,
)
from pylinsys.matrix.iteration import RowIterator


class Matrix(Generic[T]):
    """
    Rectangular matrix of elements of type T, stored row by row.

    Invariant: every row holds exactly n_cols elements and n_rows equals
    the number of rows. The constructors below are the supported way to
    build a Matrix; they establish the invariant and every mutator keeps
    it.

    Out-of-range row indices raise RowIndexError and length mismatches
    raise DimensionError. Negative indices are out of range.

    Matrices are mutable and therefore unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: list[list[T]], n_cols: int):
        self._rows = rows
        self._n_cols = n_cols
        # Bumped by every mutation; RowIterator uses it to detect changes.
        self._version = 0

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def new(
        cls,
        n_rows: int,
        n_cols: int,
        element_type: Callable[[], T] = int,
    ) -> Matrix[T]:
        """
        Create an (n_rows x n_cols) matrix filled with the default value.

        The default value is ``element_type()``, called once per cell so
        that no two cells share a mutable element. Zero rows or columns
        give an empty but consistent matrix.

        Args:
            n_rows: Number of rows
            n_cols: Number of columns
            element_type: Zero-argument callable producing the default
                element, e.g. int, float, fractions.Fraction, np.float64

        Raises:
            ValidationError: If a dimension is negative or not an integer,
                or element_type is not callable
        """
        n = check_dimension(n_rows, "n_rows")
        m = check_dimension(n_cols, "n_cols")
        if not callable(element_type):
            raise ValidationError(
                f"element_type: must be callable, got {type(element_type).__name__}"
            )
        rows = [[element_type() for _ in range(m)] for _ in range(n)]
        return cls(rows, m)

    @classmethod
    def new_with(
        cls,
        n_rows: int,
        n_cols: int,
        generator: Callable[[int, int], T],
    ) -> Matrix[T]:
        """
        Create an (n_rows x n_cols) matrix using ``generator(row, col)``.

        The generator is called once per cell in row-major order and is
        expected to be free of side effects.

        Raises:
            ValidationError: If a dimension is invalid or generator is
                not callable
        """
        n = check_dimension(n_rows, "n_rows")
        m = check_dimension(n_cols, "n_cols")
        if not callable(generator):
            raise ValidationError(
                f"generator: must be callable, got {type(generator).__name__}"
            )
        rows = [[generator(i, j) for j in range(m)] for i in range(n)]
        return cls(rows, m)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> Matrix[T] | None:
        """
        Create a matrix from a sequence of rows.

        Returns None, without raising, when ``rows`` is empty or the rows
        do not all have the length of the first one. Callers must check
        for None.

        The rows are copied; later changes to the caller's sequences do
        not reach the matrix.
        """
        owned = [list(row) for row in rows]
        if not owned:
            return None

        width = len(owned[0])
        if any(len(row) != width for row in owned):
            return None

        return cls(owned, width)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Create a matrix from a 2D numeric array-like.

        Elements become Python scalars (via ``ndarray.tolist``). Unlike
        from_rows, malformed input raises instead of returning None, and a
        zero-row array is accepted.

        Raises:
            ValidationError: If the input is ragged or not numeric
            DimensionError: If the input is not 2D
        """
        arr = check_array(array, "array")
        check_2d(arr, "array")
        return cls(arr.tolist(), arr.shape[1])

    # ─────────────────────────────────────────────────────────────────
    # Shape
    # ─────────────────────────────────────────────────────────────────

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        """Number of columns."""
        return self._n_cols

    def dimensions(self) -> tuple[int, int]:
        """
        Return the dimensions as (n_cols, n_rows).

        Note the order: columns first, then rows.
        """
        return (self._n_cols, len(self._rows))

    def __len__(self) -> int:
        return len(self._rows)

    # ─────────────────────────────────────────────────────────────────
    # Row access
    # ─────────────────────────────────────────────────────────────────

    def get_row(self, index: int) -> tuple[T, ...]:
        """
        Return row ``index`` as a tuple.

        Raises:
            RowIndexError: If index is out of range
        """
        i = check_row_index(index, len(self._rows), "index")
        return tuple(self._rows[i])

    def get_row_checked(self, index: int) -> tuple[T, ...] | None:
        """
        Return row ``index`` as a tuple, or None if it is out of range.

        Accepts the same index types as get_row.

        Raises:
            RowIndexError: If index is not an integer
        """
        n = len(self._rows)
        i = check_row_index_type(index, n, "index")
        if 0 <= i < n:
            return tuple(self._rows[i])
        return None

    def row_iter(self) -> RowIterator[T]:
        """
        Iterate over the rows in index order.

        The matrix must not be mutated while the iterator is in use;
        advancing it after a mutation raises ConcurrentMutationError.
        Call row_iter() again to start over.
        """
        return RowIterator(self)

    def __iter__(self) -> RowIterator[T]:
        return self.row_iter()

    def to_rows(self) -> list[list[T]]:
        """Return the contents as a new list of row lists."""
        return [list(row) for row in self._rows]

    # ─────────────────────────────────────────────────────────────────
    # Row mutation
    # ─────────────────────────────────────────────────────────────────

    def swap_rows(self, i: int, j: int) -> None:
        """
        Exchange rows ``i`` and ``j`` in place.

        Raises:
            RowIndexError: If either index is out of range
        """
        n = len(self._rows)
        i = check_row_index(i, n, "i")
        j = check_row_index(j, n, "j")
        self._rows[i], self._rows[j] = self._rows[j], self._rows[i]
        self._version += 1

    def set_row(self, index: int, row: Iterable[T]) -> None:
        """
        Replace row ``index`` with a copy of ``row``.

        Raises:
            RowIndexError: If index is out of range
            DimensionError: If len(row) != n_cols
        """
        i = check_row_index(index, len(self._rows), "index")
        new_row = list(row)
        check_length(new_row, self._n_cols, "row")
        self._rows[i] = new_row
        self._version += 1

    def add_column(self, values: Iterable[T]) -> None:
        """
        Append a column; ``values[i]`` is appended to row i.

        Raises:
            DimensionError: If len(values) != n_rows
        """
        column = list(values)
        check_length(column, len(self._rows), "values")
        for row, value in zip(self._rows, column):
            row.append(value)
        self._n_cols += 1
        self._version += 1

    def scale_row(self, index: int, scalar: T) -> None:
        """
        Multiply every element of row ``index`` by ``scalar`` in place.

        Raises:
            RowIndexError: If index is out of range
            ValidationError: If scalar does not support multiplication
        """
        i = check_row_index(index, len(self._rows), "index")
        check_capability(scalar, SupportsMul, "scalar")
        row = self._rows[i]
        for k in range(len(row)):
            row[k] = row[k] * scalar
        self._version += 1

    def add_scaled(self, i: int, j: int, scalar: T) -> None:
        """
        Elementary row operation R_j <- R_i * scalar + R_j.

        Row ``i`` is left unchanged; ``i == j`` is allowed.

        Raises:
            RowIndexError: If either index is out of range
            ValidationError: If scalar does not support multiply and add
        """
        n = len(self._rows)
        i = check_row_index(i, n, "i")
        j = check_row_index(j, n, "j")
        check_capability(scalar, SupportsRowArithmetic, "scalar")
        source, target = self._rows[i], self._rows[j]
        self._rows[j] = [x * scalar + y for x, y in zip(source, target)]
        self._version += 1

    # ─────────────────────────────────────────────────────────────────
    # Conversion, copying, comparison
    # ─────────────────────────────────────────────────────────────────

    def to_array(self, dtype: DTypeLike | None = None) -> NDArray[Any]:
        """
        Return the contents as a new (n_rows, n_cols) numpy array.

        If no dtype is given and the elements are not numpy-numeric
        (e.g. Fraction), an object array is returned with a warning.
        """
        n, m = len(self._rows), self._n_cols
        if n == 0:
            return np.empty((0, m), dtype=dtype if dtype is not None else np.float64)

        result = np.array(self._rows, dtype=dtype).reshape(n, m)
        if dtype is None and result.dtype == object:
            warnings.warn(
                "Matrix elements are not numpy-numeric; returning an "
                "object-dtype array",
                UserWarning,
                stacklevel=2,
            )
        return result

    def copy(self) -> Matrix[T]:
        """Return an independent copy; elements themselves are shared."""
        return type(self)([list(row) for row in self._rows], self._n_cols)

    def __copy__(self) -> Matrix[T]:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix[T]:
        return type(self)(copy.deepcopy(self._rows, memo), self._n_cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.dimensions() == other.dimensions()
            and all(a == b for a, b in zip(self._rows, other._rows))
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r}, n_cols={self._n_cols})"
