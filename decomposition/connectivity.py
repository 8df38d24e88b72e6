"""
Connectivity definitions for decomposition.

A connectivity defines which cells are "neighbors" of each other,
enabling connected component extraction. Different connectivities
produce different decompositions of the same grid.

This module builds on freeman.py's direction definitions:
- KING: 8 directions (orthogonal + diagonal) → 8-connectivity
- TOWER: 4 orthogonal directions → 4-connectivity
- BISHOP: 4 diagonal directions → diagonal-only connectivity

Neighbors are candidates only: they are not filtered by grid bounds.
"""

from collections.abc import Sequence
from typing import Final

from decomposition.errors import UnsupportedConnectivityError
from freeman import BISHOP, DIRECTIONS_FREEMAN, KING, TOWER, King
from localtypes import Coord, Neighborhood


def make_coord_neighbors(directions: Sequence[King]) -> Neighborhood:
    """
    Create a neighbor function from a set of movement directions.

    The returned function computes which coordinates are reachable
    from a given coordinate by moving one step in any of the specified
    directions, in the order the directions are given.

    Args:
        directions: Movement directions (keys of DIRECTIONS_FREEMAN).
                   Use KING for 8-connectivity, TOWER for 4-connectivity.

    Returns:
        A function coord -> candidate neighbors.

    Example:
        >>> neighbors = make_coord_neighbors(TOWER)
        >>> neighbors(Coord(0, 0))
        (Coord(row=0, col=-1), Coord(row=-1, col=0), Coord(row=0, col=1), Coord(row=1, col=0))
    """
    deltas: tuple[Coord, ...] = tuple(DIRECTIONS_FREEMAN[d] for d in directions)

    def neighbors(coord: Coord) -> tuple[Coord, ...]:
        row, col = coord
        return tuple(Coord(row + delta.row, col + delta.col) for delta in deltas)

    return neighbors


# Standard connectivity functions for 2D grids
king_neighbors: Neighborhood = make_coord_neighbors(KING)
tower_neighbors: Neighborhood = make_coord_neighbors(TOWER)
bishop_neighbors: Neighborhood = make_coord_neighbors(BISHOP)

NEIGHBORHOODS: Final[dict[int, Neighborhood]] = {
    4: tower_neighbors,
    8: king_neighbors,
}


def neighborhood_for(connectivity: int) -> Neighborhood:
    """Return the neighbor function of a 4- or 8-connectivity."""
    try:
        return NEIGHBORHOODS[connectivity]
    except KeyError:
        raise UnsupportedConnectivityError(
            f"Unsupported connectivity: {connectivity}, expected one of {sorted(NEIGHBORHOODS)}"
        ) from None
