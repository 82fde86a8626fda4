"""Minimal signals and clickable grid cells."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class Signal:
    """Calls every connected slot, in connection order, when emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Call ``slot`` on every later emission."""
        self._slots.append(slot)

    def emit(self, *args: Any) -> None:
        """Pass ``args`` to every connected slot."""
        for slot in list(self._slots):
            slot(*args)


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class ClickableCell:
    """A grid cell that reports its coordinates when clicked with the left button."""

    def __init__(self, row: int = 0, col: int = 0) -> None:
        self.row = row
        self.col = col
        self.style = ""
        self.clicked = Signal()

    def press(self, button: MouseButton) -> bool:
        """Handle a mouse press; return whether it counted as a click."""
        if button is not MouseButton.LEFT:
            return False
        self.clicked.emit(self.row, self.col)
        return True