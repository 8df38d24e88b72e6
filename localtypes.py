"""
Type definitions for grid labeling operations.

This module contains all custom types used throughout the labeling library,
organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Literal, NamedTuple, TypeAlias, TypeVar

# Basic type variables for generic operations
V = TypeVar("V")  # Cell value type
G = TypeVar("G")  # Grid type
T = TypeVar("T")
H = TypeVar("H")


# Coordinate systems
class Coord(NamedTuple):
    row: int
    col: int


class Proportions(NamedTuple):
    rows: int
    cols: int


# Grid representations
NestedGrid: TypeAlias = Sequence[Sequence[Any]]  # Functional: grid[row][col] -> value

# Labeling
Label: TypeAlias = int
Component: TypeAlias = frozenset[Coord]
Components: TypeAlias = tuple[Component, ...]  # Indexed by discovery order

# Strategies
Classifier: TypeAlias = Callable[[T], bool]  # value -> is_foreground
Accessor: TypeAlias = Callable[[H, int, int], T]  # (grid, row, col) -> value
Neighborhood: TypeAlias = Callable[[Coord], tuple[Coord, ...]]  # unfiltered by bounds

Connectivity = Literal[4, 8]
