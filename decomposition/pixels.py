"""
Pixel strategies: classification and access.

**Classifiers** decide whether a single cell value is foreground (True)
or background (False). They are looked up per value type in a registry;
a value type without a registered classifier is rejected, never treated
as "always background".

**Accessors** read a cell from a grid given (row, col). They perform no
bounds checking and never mutate the grid.
    - call_access: grid(row, col)
    - nested_access: grid[row][col]
    - tuple_access: grid[row, col] (numpy arrays)

accessor_for picks one of them from the grid representation.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from decomposition.errors import UnsupportedValueTypeError
from localtypes import Accessor, Classifier

CLASSIFIERS: dict[type, Classifier[Any]] = {}


def register_classifier(*value_types: type):
    """Register the decorated function as the classifier of value_types."""

    def _decor(f: Classifier[Any]) -> Classifier[Any]:
        for value_type in value_types:
            CLASSIFIERS[value_type] = f
        return f

    return _decor


# Classifiers


@register_classifier(bool, np.bool_)
def is_true(value: bool | np.bool_) -> bool:
    return bool(value)


@register_classifier(str, bytes, np.str_, np.bytes_, np.int8, np.uint8)
def is_nonzero_char(value: str | bytes | np.integer) -> bool:
    """A single byte or character is foreground unless it is zero."""
    # Numpy strips trailing NULs when reading S1/U1 elements
    if isinstance(value, (np.str_, np.bytes_)) and len(value) == 0:
        return False
    if isinstance(value, (str, bytes)):
        if len(value) != 1:
            raise UnsupportedValueTypeError(
                f"Expected a single character, got {value!r}"
            )
        return ord(value) != 0
    return bool(value != 0)


def classifier_for(value_type: type | np.dtype) -> Classifier[Any]:
    """
    Resolve the classifier of a value type.

    Numpy dtypes are resolved through their scalar type. Subclasses of a
    registered type inherit its classifier.

    Raises:
        UnsupportedValueTypeError: if no classifier is registered for the type.
    """
    if isinstance(value_type, np.dtype):
        value_type = value_type.type

    for base in value_type.__mro__:
        if base in CLASSIFIERS:
            return CLASSIFIERS[base]

    raise UnsupportedValueTypeError(
        f"No classifier defined for values of type {value_type.__name__}"
    )


# Accessors


def call_access(grid: Callable[[int, int], Any], row: int, col: int) -> Any:
    return grid(row, col)


def nested_access(grid: Any, row: int, col: int) -> Any:
    return grid[row][col]


def tuple_access(grid: Any, row: int, col: int) -> Any:
    return grid[row, col]


def accessor_for(grid: Any) -> Accessor[Any, Any]:
    """Pick the accessor matching the grid's indexing convention."""
    if isinstance(grid, np.ndarray):
        return tuple_access
    if callable(grid):
        return call_access
    return nested_access
