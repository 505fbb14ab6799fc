"""
Display Collaborator

``Display`` is the narrow interface a game session uses to drive whatever
front end renders the board. ``BoardDisplay`` keeps the board in memory and
serializes it for HTTP and WebSocket clients.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.game import LetterState, LetterVerdict


class Display(ABC):
    """Operations a game session needs from the presentation layer."""

    @abstractmethod
    def get_row_values(self, row: int) -> List[str]:
        """Current letter of every cell in the row ('' when blank)."""

    @abstractmethod
    def set_cell(self, row: int, col: int, value: str) -> None:
        pass

    @abstractmethod
    def enable_row(self, row: int) -> None:
        pass

    @abstractmethod
    def disable_row(self, row: int) -> None:
        pass

    @abstractmethod
    def apply_verdict(self, row: int, verdict: LetterVerdict) -> None:
        pass

    @abstractmethod
    def prefill_cell(self, row: int, col: int, letter: str) -> None:
        """Fill a cell with a confirmed letter and lock it."""

    @abstractmethod
    def is_cell_locked(self, row: int, col: int) -> bool:
        pass

    @abstractmethod
    def focus_cell(self, row: int, col: int) -> None:
        pass

    @abstractmethod
    def show_message(self, text: str, timeout_ms: Optional[int] = None) -> None:
        pass

    @abstractmethod
    def clear_message(self) -> None:
        pass

    @abstractmethod
    def set_submit_enabled(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def set_hint_enabled(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass


class BoardDisplay(Display):
    """In-memory board of ``rows`` x ``cols`` cells."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.reset()

    def _new_cell(self) -> Dict[str, Any]:
        return {'value': '', 'state': None, 'locked': False}

    def reset(self) -> None:
        self.cells: List[List[Dict[str, Any]]] = [
            [self._new_cell() for _ in range(self.cols)] for _ in range(self.rows)
        ]
        self.enabled_rows = set()
        self.focus: Optional[List[int]] = None
        self.message: Optional[str] = None
        self.message_timeout_ms: Optional[int] = None
        self.submit_enabled = False
        self.hint_enabled = True

    def get_row_values(self, row: int) -> List[str]:
        return [cell['value'] for cell in self.cells[row]]

    def set_cell(self, row: int, col: int, value: str) -> None:
        self.cells[row][col]['value'] = value

    def enable_row(self, row: int) -> None:
        self.enabled_rows.add(row)

    def disable_row(self, row: int) -> None:
        self.enabled_rows.discard(row)

    def is_row_enabled(self, row: int) -> bool:
        return row in self.enabled_rows

    def apply_verdict(self, row: int, verdict: LetterVerdict) -> None:
        self.cells[row][verdict.position]['state'] = verdict.state.value

    def prefill_cell(self, row: int, col: int, letter: str) -> None:
        cell = self.cells[row][col]
        cell['value'] = letter
        cell['state'] = LetterState.IN_PLACE.value
        cell['locked'] = True

    def is_cell_locked(self, row: int, col: int) -> bool:
        return self.cells[row][col]['locked']

    def focus_cell(self, row: int, col: int) -> None:
        self.focus = [row, col]

    def show_message(self, text: str, timeout_ms: Optional[int] = None) -> None:
        self.message = text
        self.message_timeout_ms = timeout_ms

    def clear_message(self) -> None:
        self.message = None
        self.message_timeout_ms = None

    def set_submit_enabled(self, enabled: bool) -> None:
        self.submit_enabled = enabled

    def set_hint_enabled(self, enabled: bool) -> None:
        self.hint_enabled = enabled

    def snapshot(self) -> Dict[str, Any]:
        """JSON-ready copy of the board."""
        return {
            'rows': [
                {
                    'enabled': index in self.enabled_rows,
                    'cells': [dict(cell) for cell in row]
                }
                for index, row in enumerate(self.cells)
            ],
            'focus': list(self.focus) if self.focus else None,
            'message': self.message,
            'message_timeout_ms': self.message_timeout_ms,
            'submit_enabled': self.submit_enabled,
            'hint_enabled': self.hint_enabled
        }
