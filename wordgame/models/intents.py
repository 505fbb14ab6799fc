"""
Display Intents

Discrete messages the display layer emits and a game session consumes
through its single dispatch entry point.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class CellChanged:
    """The player typed into (or cleared) one cell."""
    row: int
    col: int
    value: str


@dataclass(frozen=True)
class NavigateRequested:
    """The player asked to move focus from a cell."""
    row: int
    col: int
    direction: Direction


@dataclass(frozen=True)
class SubmitRequested:
    """The player asked to check the active row."""


@dataclass(frozen=True)
class HintRequested:
    """The player asked for a hint."""


@dataclass(frozen=True)
class RestartRequested:
    """The player asked for a new game."""
