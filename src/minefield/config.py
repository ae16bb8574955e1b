"""
Field configuration.

Holds the three parameters of a game and validates them up front so a
Minefield can never be built around an impossible layout.
"""
import numbers
from dataclasses import dataclass

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class FieldConfig:
    """
    Configuration for a minefield.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    columns: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("rows", "columns", "mine_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfiguration(
                    f"{name} must be an integer, got {value!r}"
                )
            # numpy integers are stored as plain ints
            object.__setattr__(self, name, int(value))
        if self.rows < 1 or self.columns < 1:
            raise InvalidConfiguration("Field dimensions must be positive")
        if self.mine_count < 1:
            raise InvalidConfiguration("Mine count must be positive")
        max_mines = self.total_cells - 1
        if self.mine_count > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.columns

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.mine_count
