"""
Input validation utilities for pylinsys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Index and length checks raise the dedicated RowIndexError and
      DimensionError so callers can tell them apart from other failures
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.exceptions import DimensionError, RowIndexError, ValidationError


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Unlike a float-only pipeline, integer dtypes are kept as they are:
    matrices are generic over their element type.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric (or bool) dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            expected=2,
            actual=array.ndim,
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_row_index_type(index: Any, n_rows: int, name: str) -> int:
    """
    Verify a row index is an integer (bool excluded), without range checks.

    Raises:
        RowIndexError: If index is not an integer
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise RowIndexError(
            f"{name}: row index must be an integer, got {type(index).__name__}",
            index=index,
            n_rows=n_rows,
        )
    return int(index)


def check_row_index(index: Any, n_rows: int, name: str) -> int:
    """
    Verify a row index lies in [0, n_rows).

    Negative indices are rejected rather than wrapped.

    Raises:
        RowIndexError: If index is not an integer or is out of range
    """
    index = check_row_index_type(index, n_rows, name)
    if not 0 <= index < n_rows:
        raise RowIndexError(
            f"{name}: row index {index} out of range for matrix with {n_rows} rows",
            index=index,
            n_rows=n_rows,
        )
    return index


def check_length(values: Any, expected: int, name: str) -> None:
    """
    Verify a sequence has exactly the expected length.

    Raises:
        DimensionError: If len(values) != expected
    """
    actual = len(values)
    if actual != expected:
        raise DimensionError(
            f"{name}: expected length {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_capability(value: Any, capability: type, name: str) -> None:
    """
    Verify a value satisfies a runtime-checkable capability protocol.

    Args:
        value: Scalar or element to check
        capability: A runtime_checkable Protocol from core.protocols
        name: Parameter name for error messages

    Raises:
        ValidationError: If value lacks the protocol's operators
    """
    if not isinstance(value, capability):
        raise ValidationError(
            f"{name}: {type(value).__name__} does not support "
            f"{capability.__name__}"
        )
