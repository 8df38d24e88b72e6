"""Tests for decomposition/labels.py"""

import numpy as np
import pytest

from constants import LABEL_START, NOLABEL
from decomposition import InvalidSizeError, LabelGrid
from localtypes import Coord


class TestLabelGrid:
    def test_initialized_to_nolabel(self):
        labels = LabelGrid(3, 4)
        assert len(labels) == 12
        assert all(
            labels[Coord(row, col)] == NOLABEL for row in range(3) for col in range(4)
        )
        assert list(labels.labeled_cells()) == []

    def test_sentinel_below_every_label(self):
        assert NOLABEL < LABEL_START
        assert NOLABEL == np.iinfo(np.int64).min

    def test_set_and_get(self):
        labels = LabelGrid(2, 2)
        labels[Coord(1, 0)] = LABEL_START
        assert labels[Coord(1, 0)] == LABEL_START
        assert labels.is_labeled(Coord(1, 0))
        assert not labels.is_labeled(Coord(0, 1))

    def test_row_major_addressing(self):
        """Writing (1, 0) leaves (0, 1) untouched and lands at [1, 0]."""
        labels = LabelGrid(3, 2)
        labels[Coord(1, 0)] = 5
        assert labels[Coord(0, 1)] == NOLABEL
        assert labels.to_array()[1, 0] == 5

    def test_labeled_cells_row_major(self):
        labels = LabelGrid(2, 3)
        labels[Coord(1, 2)] = 9
        labels[Coord(0, 1)] = 8
        labels[Coord(1, 0)] = 7
        assert list(labels.labeled_cells()) == [
            (Coord(0, 1), 8),
            (Coord(1, 0), 7),
            (Coord(1, 2), 9),
        ]

    def test_to_array_is_a_copy(self):
        labels = LabelGrid(2, 3)
        array = labels.to_array()
        assert array.shape == (2, 3)
        array[0, 0] = 1
        assert not labels.is_labeled(Coord(0, 0))

    @pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (-1, 5), (0, 0)])
    def test_invalid_size(self, rows, cols):
        with pytest.raises(InvalidSizeError, match="Invalid grid size"):
            LabelGrid(rows, cols)
