"""
Grid decomposition primitives.

This package labels the connected components of 2D grids:

**Pixels** (pixels.py)
    How a cell is read and whether it is foreground.
    - classifier_for / register_classifier: per value type classifiers
    - call_access, nested_access, tuple_access: grid accessors

**Connectivity** (connectivity.py)
    Defines adjacency relations. Different connectivities produce different
    decompositions of the same grid.
    - king_neighbors: 8-connectivity (orthogonal + diagonal)
    - tower_neighbors: 4-connectivity (orthogonal only)
    - bishop_neighbors: diagonal-only connectivity

**Labels** (labels.py)
    LabelGrid: dense row-major label storage with a NOLABEL sentinel.

**Objects** (objects.py)
    Connected component extraction parameterized by the strategies above.
    - ConnectedComponentFinder(classifier, accessor, neighborhood).find(grid, rows, cols)
    - extract_connected_components(grid, rows, cols, classifier, ...)
    - grid_to_components(grid, connectivity)
"""

from .connectivity import (
    NEIGHBORHOODS,
    bishop_neighbors,
    king_neighbors,
    make_coord_neighbors,
    neighborhood_for,
    tower_neighbors,
)
from .errors import (
    DecompositionError,
    InvalidSizeError,
    UnsupportedConnectivityError,
    UnsupportedValueTypeError,
)
from .labels import LabelGrid
from .pixels import (
    CLASSIFIERS,
    accessor_for,
    call_access,
    classifier_for,
    is_nonzero_char,
    is_true,
    nested_access,
    register_classifier,
    tuple_access,
)
from .objects import (
    ConnectedComponentFinder,
    extract_connected_components,
    grid_to_components,
    labels_to_components,
)

__all__ = [
    # Connectivity
    "NEIGHBORHOODS",
    "make_coord_neighbors",
    "neighborhood_for",
    "king_neighbors",
    "tower_neighbors",
    "bishop_neighbors",
    # Errors
    "DecompositionError",
    "InvalidSizeError",
    "UnsupportedConnectivityError",
    "UnsupportedValueTypeError",
    # Labels
    "LabelGrid",
    # Pixels
    "CLASSIFIERS",
    "register_classifier",
    "classifier_for",
    "is_true",
    "is_nonzero_char",
    "call_access",
    "nested_access",
    "tuple_access",
    "accessor_for",
    # Objects
    "ConnectedComponentFinder",
    "extract_connected_components",
    "grid_to_components",
    "labels_to_components",
]
