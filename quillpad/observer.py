"""A minimal signal/slot mechanism and an observable string."""

from __future__ import annotations

from typing import Any, Callable

Slot = Callable[..., Any]


class Signal:
    """A list of callables that are invoked, in connection order, on emit."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Call ``slot`` on every later emit."""
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Stop calling ``slot``; raises ValueError if it was never connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with the given arguments."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class StringObserver:
    """Holds a string and announces every assignment through ``text_changed``."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self.text_changed = Signal()

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self.text_changed.emit(self._text)