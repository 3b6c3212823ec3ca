"""
Exception hierarchy for pylinsys.

All exceptions inherit from PyLinSysError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Contract violations (bad indices, mismatched lengths) always raise;
      only Matrix.from_rows reports malformed input by returning None
"""


class PyLinSysError(Exception):
    """Base exception for all pylinsys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Raised when a row, column or value vector does not have the length
    the matrix requires.

    Attributes:
        expected: Required length, if known
        actual: Length that was supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class RowIndexError(PyLinSysError, IndexError):
    """
    Row index is out of range.

    Also an IndexError, so code written against plain sequences keeps
    working. Negative indices are never wrapped around.

    Attributes:
        index: The offending index
        n_rows: Number of rows in the matrix
    """

    def __init__(self, message: str, index: int, n_rows: int):
        super().__init__(message)
        self.index = index
        self.n_rows = n_rows


class ConcurrentMutationError(PyLinSysError, RuntimeError):
    """
    Matrix was mutated while a row iterator over it was alive.

    Attributes:
        expected_version: Mutation counter seen when the iterator was created
        actual_version: Mutation counter at the time of the failed step
    """

    def __init__(self, message: str, expected_version: int, actual_version: int):
        super().__init__(message)
        self.expected_version = expected_version
        self.actual_version = actual_version
