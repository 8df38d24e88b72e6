"""
Errors raised while composing or running a connected component scan.
"""


class DecompositionError(Exception):
    """Base class for labeling errors."""


class InvalidSizeError(DecompositionError, ValueError):
    """Raised when a grid has fewer than one row or one column."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"Invalid grid size: {rows}x{cols}, expected at least 1x1")
        self.rows = rows
        self.cols = cols


class UnsupportedValueTypeError(DecompositionError, TypeError):
    """Raised when no foreground/background rule exists for a value type."""


class UnsupportedConnectivityError(DecompositionError, ValueError):
    """Raised when a connectivity has no neighbor function."""
