"""
Minefield game module.

Provides the headless game core (grid, deferred mine placement, flood
fill, marks, win/lose detection) and a Gymnasium wrapper around it.
"""
from .cell import Cell, Visibility
from .config import FieldConfig
from .errors import MinefieldError, InvalidConfiguration, OutOfRange
from .field import (
    Minefield,
    Phase,
    OutcomeKind,
    RevealOutcome,
    RevealedCell,
    FieldStatus,
)
from .environment import MinefieldEnv

__all__ = [
    "Cell",
    "Visibility",
    "FieldConfig",
    "MinefieldError",
    "InvalidConfiguration",
    "OutOfRange",
    "Minefield",
    "Phase",
    "OutcomeKind",
    "RevealOutcome",
    "RevealedCell",
    "FieldStatus",
    "MinefieldEnv",
]
