"""
Exceptions raised by the minefield package.

Only caller mistakes are errors. Acting on a cell that cannot change
right now (already revealed, marked, or the game is over) is a no-op,
not an exception.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Field dimensions or mine count are out of range."""


class OutOfRange(MinefieldError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Cell ({row}, {column}) is outside a {rows}x{columns} field"
        )
        self.row = row
        self.column = column
