"""
pytest configuration and shared fixtures.
"""

import pytest

from pylinsys import Matrix


@pytest.fixture
def square3():
    """3x3 integer matrix [[1, 2, 3], [4, 5, 6], [7, 8, 9]]."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def ones2():
    """2x2 matrix of ones."""
    return Matrix.new_with(2, 2, lambda _i, _j: 1)
