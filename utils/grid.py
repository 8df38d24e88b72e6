"""
Grid introspection.

Supported grid representations:
    - Nested sequences: grid[row][col] -> value
    - 2D numpy arrays: grid[row, col] -> value
    - Callables: grid(row, col) -> value (no intrinsic shape)
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from localtypes import NestedGrid, Proportions


def grid_proportions(grid: np.ndarray | NestedGrid) -> Proportions:
    """
    Dimensions of a grid as (rows, cols).

    An empty grid yields a zero dimension; rejecting it is left to the caller.

    Raises:
        TypeError: for callables, which carry no shape.
        ValueError: for arrays that are not 2D and for ragged nested sequences.
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {grid.ndim} dimensions")
        rows, cols = grid.shape
        return Proportions(rows, cols)

    if callable(grid) or not isinstance(grid, Sequence):
        raise TypeError(f"Cannot infer the dimensions of {type(grid).__name__}")

    rows = len(grid)
    if rows == 0:
        return Proportions(0, 0)

    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("Ragged grid: rows have different lengths")
    return Proportions(rows, cols)


def grid_value_type(grid: np.ndarray | NestedGrid) -> type | np.dtype:
    """Value type of a non-empty grid: its dtype, or the type of its first cell."""
    if isinstance(grid, np.ndarray):
        return grid.dtype
    return type(grid[0][0])
