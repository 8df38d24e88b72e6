"""Tests for utils/grid.py"""

import numpy as np
import pytest

from decomposition import accessor_for, call_access, nested_access, tuple_access
from utils.grid import grid_proportions, grid_value_type


class TestGridProportions:
    def test_nested(self):
        assert grid_proportions([[0, 1, 2], [3, 4, 5]]) == (2, 3)

    def test_strings(self):
        assert grid_proportions(["ab", "cd", "ef"]) == (3, 2)

    def test_numpy(self):
        assert grid_proportions(np.zeros((4, 7), dtype=bool)) == (4, 7)

    def test_empty(self):
        assert grid_proportions([]) == (0, 0)

    def test_empty_rows(self):
        assert grid_proportions([[], []]) == (2, 0)

    def test_ragged(self):
        with pytest.raises(ValueError, match="Ragged"):
            grid_proportions([[True], [True, False]])

    def test_not_2d(self):
        with pytest.raises(ValueError, match="2D"):
            grid_proportions(np.zeros((2, 2, 3), dtype=bool))

    def test_callable_has_no_shape(self):
        with pytest.raises(TypeError):
            grid_proportions(lambda row, col: True)


class TestAccessorFor:
    def test_numpy(self):
        assert accessor_for(np.zeros((1, 1))) is tuple_access

    def test_callable(self):
        assert accessor_for(lambda row, col: True) is call_access

    def test_nested(self):
        assert accessor_for([[True]]) is nested_access


class TestGridValueType:
    def test_numpy(self):
        assert grid_value_type(np.zeros((1, 1), dtype=np.uint8)) == np.dtype(np.uint8)

    def test_nested(self):
        assert grid_value_type([[False, True]]) is bool
        assert grid_value_type(["ab"]) is str
