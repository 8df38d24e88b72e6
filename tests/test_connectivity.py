"""
Tests for decomposition/connectivity.py.
"""

import pytest

from decomposition import (
    UnsupportedConnectivityError,
    bishop_neighbors,
    king_neighbors,
    make_coord_neighbors,
    neighborhood_for,
    tower_neighbors,
)
from localtypes import Coord


class TestNeighborhoods:
    def test_tower_neighbors(self):
        result = tower_neighbors(Coord(1, 1))
        assert len(result) == 4
        assert set(result) == {(0, 1), (2, 1), (1, 0), (1, 2)}

    def test_king_neighbors(self):
        result = king_neighbors(Coord(1, 1))
        assert len(result) == 8
        expected = {(r, c) for r in range(3) for c in range(3)} - {(1, 1)}
        assert set(result) == expected

    def test_bishop_neighbors(self):
        result = bishop_neighbors(Coord(1, 1))
        assert set(result) == {(0, 0), (0, 2), (2, 0), (2, 2)}

    def test_not_filtered_by_bounds(self):
        """Candidates of a corner cell include negative coordinates."""
        result = tower_neighbors(Coord(0, 0))
        assert Coord(-1, 0) in result
        assert Coord(0, -1) in result

    def test_deterministic_order(self):
        assert king_neighbors(Coord(4, 2)) == king_neighbors(Coord(4, 2))

    @pytest.mark.parametrize("neighbors", [tower_neighbors, king_neighbors])
    def test_symmetric(self, neighbors):
        origin = Coord(5, 5)
        for neighbor in neighbors(origin):
            assert origin in neighbors(neighbor)

    def test_custom_directions(self):
        horizontal = make_coord_neighbors([0, 2])
        assert horizontal(Coord(2, 2)) == (Coord(2, 1), Coord(2, 3))


class TestNeighborhoodFor:
    def test_four(self):
        assert neighborhood_for(4) is tower_neighbors

    def test_eight(self):
        assert neighborhood_for(8) is king_neighbors

    @pytest.mark.parametrize("connectivity", [0, 6, 16])
    def test_unsupported(self, connectivity):
        with pytest.raises(UnsupportedConnectivityError, match="connectivity"):
            neighborhood_for(connectivity)

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError):
            neighborhood_for(3)
