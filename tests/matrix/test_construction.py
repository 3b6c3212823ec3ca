"""
Tests for Matrix construction: new, new_with, from_rows, from_array.
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinsys import Matrix
from pylinsys.core.exceptions import DimensionError, ValidationError


class TestNew:
    """Matrix.new fills every cell with element_type()."""

    @pytest.mark.parametrize("n, m", [(3, 2), (1, 1), (2, 5), (0, 3), (3, 0), (0, 0)])
    def test_dimensions_are_cols_then_rows(self, n, m):
        x = Matrix.new(n, m)
        assert x.dimensions() == (m, n)
        assert x.n_rows == n
        assert x.n_cols == m

    def test_default_int_is_zero(self):
        x = Matrix.new(2, 3)
        assert x.to_rows() == [[0, 0, 0], [0, 0, 0]]

    @pytest.mark.parametrize("element_type", [float, Fraction, Decimal, np.float64])
    def test_element_type_default(self, element_type):
        x = Matrix.new(2, 2, element_type=element_type)
        for row in x.row_iter():
            assert all(type(v) is element_type for v in row)
            assert all(v == 0 for v in row)

    def test_mutable_defaults_not_shared(self):
        x = Matrix.new(2, 2, element_type=list)
        x.get_row(0)[0].append(1)
        assert x.get_row(0)[1] == []
        assert x.get_row(1)[0] == []

    def test_matches_new_with(self):
        assert Matrix.new(3, 2) == Matrix.new_with(3, 2, lambda _i, _j: 0)

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValidationError, match="n_rows"):
            Matrix.new(-1, 2)

    def test_non_callable_element_type(self):
        with pytest.raises(ValidationError, match="element_type"):
            Matrix.new(2, 2, element_type=0)


class TestNewWith:
    """Matrix.new_with calls generator(row, col) once per cell."""

    def test_generator_receives_row_then_col(self):
        x = Matrix.new_with(2, 3, lambda i, j: (i, j))
        assert x.get_row(1) == ((1, 0), (1, 1), (1, 2))

    def test_row_major_order(self):
        calls = []

        def gen(i, j):
            calls.append((i, j))
            return i * 10 + j

        Matrix.new_with(2, 2, gen)
        assert calls == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_empty(self):
        x = Matrix.new_with(0, 4, lambda i, j: 1)
        assert x.dimensions() == (4, 0)

    def test_non_callable_generator(self):
        with pytest.raises(ValidationError, match="generator"):
            Matrix.new_with(1, 1, 5)


class TestFromRows:
    """Matrix.from_rows returns None for malformed input instead of raising."""

    def test_well_formed(self):
        x = Matrix.from_rows([[1, 2], [3, 4]])
        assert x is not None
        assert x.dimensions() == (2, 2)

    def test_empty_input_is_none(self):
        assert Matrix.from_rows([]) is None

    def test_ragged_is_none(self):
        assert Matrix.from_rows([[1, 2], [3, 4, 5]]) is None

    def test_ragged_later_row_is_none(self):
        assert Matrix.from_rows([[1], [2], [3, 4]]) is None

    def test_equals_new_with_same_values(self):
        x = Matrix.from_rows([[0, 1, 2], [10, 11, 12]])
        y = Matrix.new_with(2, 3, lambda i, j: 10 * i + j)
        assert x == y

    def test_accepts_tuples_and_generators(self):
        x = Matrix.from_rows((r for r in [(1, 2), (3, 4)]))
        assert x == Matrix.from_rows([[1, 2], [3, 4]])

    def test_single_empty_row(self):
        x = Matrix.from_rows([[]])
        assert x.dimensions() == (0, 1)

    def test_caller_rows_are_copied(self):
        rows = [[1, 2], [3, 4]]
        x = Matrix.from_rows(rows)
        rows[0][0] = 99
        rows.append([5, 6])
        assert x.get_row(0) == (1, 2)
        assert x.n_rows == 2


class TestFromArray:
    """Matrix.from_array is a strict, validated numpy conversion."""

    def test_int_array(self):
        x = Matrix.from_array(np.array([[1, 2], [3, 4]]))
        assert x == Matrix.from_rows([[1, 2], [3, 4]])
        assert type(x.get_row(0)[0]) is int

    def test_float_array(self):
        x = Matrix.from_array(np.eye(2))
        assert x.get_row(0) == (1.0, 0.0)

    def test_nested_list(self):
        x = Matrix.from_array([[1.5, 2.5]])
        assert x.dimensions() == (2, 1)

    def test_zero_rows_allowed(self):
        x = Matrix.from_array(np.zeros((0, 3)))
        assert x.dimensions() == (3, 0)

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array(np.array([1, 2, 3]))

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            Matrix.from_array([["a", "b"]])
