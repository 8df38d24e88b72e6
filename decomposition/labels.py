"""
Dense label storage for a single labeling scan.

A LabelGrid maps every cell of a rows×cols grid to a label, or to the
NOLABEL sentinel when the cell has not been assigned yet. Storage is one
contiguous row-major array: index = row * cols + col.
"""

from collections.abc import Iterator

import numpy as np

from constants import LABEL_DTYPE, NOLABEL
from decomposition.errors import InvalidSizeError
from localtypes import Coord, Label


class LabelGrid:
    """
    Fixed-size label arena.

    Example:
        >>> labels = LabelGrid(2, 3)
        >>> labels.is_labeled(Coord(1, 2))
        False
        >>> labels[Coord(1, 2)] = 7
        >>> list(labels.labeled_cells())
        [(Coord(row=1, col=2), 7)]
    """

    __slots__ = ("rows", "cols", "_data")

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise InvalidSizeError(rows, cols)
        self.rows = rows
        self.cols = cols
        self._data = np.full(rows * cols, NOLABEL, dtype=LABEL_DTYPE)

    def __len__(self) -> int:
        return self.rows * self.cols

    def __getitem__(self, coord: Coord) -> Label:
        row, col = coord
        return int(self._data[row * self.cols + col])

    def __setitem__(self, coord: Coord, label: Label) -> None:
        row, col = coord
        self._data[row * self.cols + col] = label

    def is_labeled(self, coord: Coord) -> bool:
        return self[coord] != NOLABEL

    def labeled_cells(self) -> Iterator[tuple[Coord, Label]]:
        """Yield every labeled cell with its label, in row-major order."""
        for index in np.flatnonzero(self._data != NOLABEL):
            row, col = divmod(int(index), self.cols)
            yield Coord(row, col), int(self._data[index])

    def to_array(self) -> np.ndarray:
        """Copy of the labels as a rows×cols array."""
        return self._data.reshape(self.rows, self.cols).copy()

    def __repr__(self) -> str:
        return f"LabelGrid(rows={self.rows}, cols={self.cols})"
