"""
Freeman chain code directions on a (row, col) grid.

    4 1 5
    0 . 2
    7 3 6
"""

from typing import Final, Literal

from localtypes import Coord

# Directions

Tower = Literal[0, 1, 2, 3]
Bishop = Literal[4, 5, 6, 7]
King = Tower | Bishop

TOWER: Final[list[Tower]] = [0, 1, 2, 3]
BISHOP: Final[list[Bishop]] = [4, 5, 6, 7]
KING: Final[list[King]] = [0, 1, 2, 3, 4, 5, 6, 7]

# (row, col) deltas
DIRECTIONS_FREEMAN: Final[dict[King, Coord]] = {
    0: Coord(0, -1),
    1: Coord(-1, 0),
    2: Coord(0, 1),
    3: Coord(1, 0),
    4: Coord(-1, -1),
    5: Coord(-1, 1),
    6: Coord(1, 1),
    7: Coord(1, -1),
}
