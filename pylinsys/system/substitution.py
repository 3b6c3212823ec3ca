"""
Substitution of values into a system of linear equations.

A matrix is read as a system of linear equations, one equation per row,
each row holding the coefficients. Substituting a vector of values
evaluates every equation:

    result[r] = sum_k values[k] * matrix[r][k]

This is a standalone utility function; the input matrix is not modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pylinsys.core.exceptions import DimensionError, ValidationError
from pylinsys.core.protocols import SupportsRowArithmetic, T
from pylinsys.core.validation import check_capability, check_length
from pylinsys.matrix import Matrix


def substitute(
    matrix: Matrix[T],
    values: Iterable[T],
    zero: T | None = None,
) -> Matrix[T]:
    """
    Evaluate each row of ``matrix`` at ``values``.

    Parameters
    ----------
    matrix : Matrix
        Coefficient matrix, one equation per row.
    values : iterable
        Its length must equal the number of rows (the second component of
        ``matrix.dimensions()``). Value k multiplies column k, so a matrix
        may have fewer columns than values but not more.
    zero : element, optional
        Starting value of each sum. Defaults to ``type(values[0])()``,
        or the int 0 when there are no values. Required when the value
        type cannot be constructed without arguments.

    Returns
    -------
    Matrix
        New (n_rows x 1) matrix whose row r holds the value of equation r.

    Raises
    ------
    DimensionError
        If the number of values does not match the number of rows, or the
        matrix has more columns than there are values.
    ValidationError
        If a value does not support multiplication and addition, or no
        zero was given and none can be derived from the value type.
    """
    vals = list(values)
    n_cols, n_rows = matrix.dimensions()
    check_length(vals, n_rows, "values")
    if n_cols > len(vals):
        raise DimensionError(
            f"matrix: value k multiplies column k, so at most {len(vals)} "
            f"columns are allowed, got {n_cols}",
            expected=len(vals),
            actual=n_cols,
        )
    for k, value in enumerate(vals):
        check_capability(value, SupportsRowArithmetic, f"values[{k}]")

    if zero is None:
        zero = _default_zero(vals)

    return Matrix.new_with(
        n_rows, 1, lambda row, _col: _dot(matrix.get_row(row), vals, zero)
    )


def _default_zero(values: Sequence[T]) -> T:
    if not values:
        return 0
    value_type = type(values[0])
    try:
        return value_type()
    except TypeError as e:
        raise ValidationError(
            f"zero: cannot derive a zero from {value_type.__name__}(); "
            f"pass zero= explicitly"
        ) from e


def _dot(row: Sequence[T], values: Sequence[T], zero: T) -> T:
    """Sum of values[k] * row[k] over the row's columns, from zero."""
    total = zero
    for coefficient, value in zip(row, values):
        total = total + value * coefficient
    return total
