"""
Connected component extraction on grids.

Objects are maximal sets of foreground cells connected under a neighbor
function (connectivity). A ConnectedComponentFinder composes three
strategies:
    - classifier: value -> is foreground
    - accessor: (grid, row, col) -> value
    - neighborhood: coord -> candidate neighbors

Algorithm: single-pass multi-source breadth-first labeling.
    1. Scan cells in row-major order.
    2. Every unlabeled foreground cell seeds a new label and is flood-filled
       breadth-first; each cell enters the queue at most once.
    3. Labels are then gathered into components, indexed by discovery order.

Complexity: O(rows × cols × k) time with k the number of neighbors,
O(rows × cols) extra space for the LabelGrid.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Generic

import numpy as np

from constants import DEFAULT_CONNECTIVITY, LABEL_START
from decomposition.connectivity import neighborhood_for, tower_neighbors
from decomposition.errors import InvalidSizeError, UnsupportedValueTypeError
from decomposition.labels import LabelGrid
from decomposition.pixels import accessor_for, classifier_for, nested_access
from localtypes import (
    Accessor,
    Classifier,
    Components,
    Connectivity,
    Coord,
    G,
    NestedGrid,
    Neighborhood,
    V,
)
from utils.grid import grid_proportions, grid_value_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectedComponentFinder(Generic[G, V]):
    """
    Labels the connected foreground components of rows×cols grids.

    The finder holds no mutable state: every call owns its LabelGrid and
    queue, so a finder can be shared between threads.

    Example:
        >>> finder = ConnectedComponentFinder.for_value_type(bool)
        >>> grid = [[True, True, False], [False, False, False], [False, False, True]]
        >>> [sorted(component) for component in finder.find(grid, 3, 3)]
        [[Coord(row=0, col=0), Coord(row=0, col=1)], [Coord(row=2, col=2)]]
    """

    classifier: Classifier[V]
    accessor: Accessor[G, V] = nested_access
    neighborhood: Neighborhood = tower_neighbors

    def __post_init__(self) -> None:
        if not callable(self.classifier):
            raise UnsupportedValueTypeError(
                f"Classifier must be callable, got {self.classifier!r}"
            )
        if not callable(self.accessor):
            raise TypeError(f"Accessor must be callable, got {self.accessor!r}")
        if not callable(self.neighborhood):
            raise TypeError(
                f"Neighborhood must be callable, got {self.neighborhood!r}"
            )

    @classmethod
    def for_value_type(
        cls,
        value_type: type | np.dtype,
        connectivity: Connectivity = DEFAULT_CONNECTIVITY,
        accessor: Accessor[Any, Any] = nested_access,
    ) -> ConnectedComponentFinder[Any, Any]:
        """
        Compose a finder from registered strategies.

        Raises:
            UnsupportedValueTypeError: no classifier is registered for value_type.
            UnsupportedConnectivityError: connectivity is neither 4 nor 8.
        """
        classifier = classifier_for(value_type)
        neighborhood = neighborhood_for(connectivity)
        logger.debug(
            f"Finder for {value_type}: classifier={classifier.__name__}, "
            f"accessor={getattr(accessor, '__name__', accessor)}, connectivity={connectivity}"
        )
        return cls(classifier, accessor, neighborhood)

    def label(self, grid: G, rows: int, cols: int) -> tuple[LabelGrid, int]:
        """
        Label every foreground cell of the grid.

        Returns:
            The LabelGrid and the number of components found. Labels run
            from LABEL_START to LABEL_START + count - 1 in discovery order.

        Raises:
            InvalidSizeError: rows < 1 or cols < 1, before the grid is read.
        """
        if rows < 1 or cols < 1:
            raise InvalidSizeError(rows, cols)

        access = self.accessor
        is_foreground = self.classifier
        neighbors = self.neighborhood

        labels = LabelGrid(rows, cols)
        next_label = LABEL_START
        queue: deque[Coord] = deque()

        for i in range(rows):
            for j in range(cols):
                if not is_foreground(access(grid, i, j)):
                    continue

                seed = Coord(i, j)
                # Already absorbed by an earlier flood fill
                if labels.is_labeled(seed):
                    continue

                labels[seed] = next_label
                queue.append(seed)

                # Breadth-first flood fill, cells are labeled when enqueued
                while queue:
                    current = queue.popleft()
                    for neighbor in neighbors(current):
                        row, col = neighbor
                        if not (0 <= row < rows and 0 <= col < cols):
                            continue
                        if is_foreground(
                            access(grid, row, col)
                        ) and not labels.is_labeled(neighbor):
                            labels[neighbor] = next_label
                            queue.append(neighbor)

                next_label += 1

        return labels, next_label - LABEL_START

    def find(self, grid: G, rows: int, cols: int) -> Components:
        """
        Partition the foreground cells of the grid into connected components.

        Args:
            grid: Read-only grid, accessed only through the accessor.
            rows: Number of rows, at least 1.
            cols: Number of columns, at least 1.

        Returns:
            Components in discovery order: index 0 holds the component whose
            first cell comes first in row-major order.
        """
        labels, count = self.label(grid, rows, cols)
        return labels_to_components(labels, count)

    __call__ = find


def labels_to_components(labels: LabelGrid, count: int) -> Components:
    """Gather the cells of a LabelGrid into one component per label."""
    components: list[set[Coord]] = [set() for _ in range(count)]
    for coord, label in labels.labeled_cells():
        components[label - LABEL_START].add(coord)
    return tuple(frozenset(component) for component in components)


def extract_connected_components(
    grid: Any,
    rows: int,
    cols: int,
    classifier: Classifier[Any],
    accessor: Accessor[Any, Any] = nested_access,
    connectivity: Connectivity = DEFAULT_CONNECTIVITY,
) -> Components:
    """
    Extract connected components from a grid using given connectivity.

    Functional shorthand for ConnectedComponentFinder(...).find(grid, rows, cols).
    """
    finder = ConnectedComponentFinder(
        classifier, accessor, neighborhood_for(connectivity)
    )
    return finder.find(grid, rows, cols)


def grid_to_components(
    grid: np.ndarray | NestedGrid,
    connectivity: Connectivity = DEFAULT_CONNECTIVITY,
    classifier: Classifier[Any] | None = None,
) -> Components:
    """
    Extract connected components from a nested sequence or a 2D numpy array.

    Dimensions and accessor are inferred from the grid. Unless a classifier
    is given, it is resolved from the grid's value type.

    Raises:
        InvalidSizeError: the grid is empty.
        UnsupportedValueTypeError: no classifier is registered for the values.
    """
    rows, cols = grid_proportions(grid)
    if rows < 1 or cols < 1:
        raise InvalidSizeError(rows, cols)

    accessor = accessor_for(grid)
    if classifier is None:
        finder = ConnectedComponentFinder.for_value_type(
            grid_value_type(grid), connectivity, accessor
        )
    else:
        logger.debug(f"Custom classifier {classifier!r} on a {rows}x{cols} grid")
        finder = ConnectedComponentFinder(
            classifier, accessor, neighborhood_for(connectivity)
        )
    return finder.find(grid, rows, cols)
