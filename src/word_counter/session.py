from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from .analyzer import analyze
from .models import Statistics

LOGGER = logging.getLogger(__name__)

Listener = Callable[[Statistics], None]


class TextSession:
    """
    Editable text buffer that re-runs the analyzer after every mutation.

    Listeners are called synchronously, in subscription order, with the fresh
    Statistics. The buffer is updated before listeners run, so a failing
    listener never leaves text and statistics out of sync.
    """

    def __init__(self, text: str = "", listeners: Iterable[Listener] | None = None) -> None:
        self._text = text
        self._listeners: List[Listener] = list(listeners or [])
        self._statistics = analyze(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def statistics(self) -> Statistics:
        """Result for the current text; every mutation supersedes it."""
        return self._statistics

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def insert(self, offset: int, value: str) -> Statistics:
        """Insert value at offset (0 <= offset <= len(text))."""
        if not 0 <= offset <= len(self._text):
            raise IndexError(f"Insert offset {offset} outside [0, {len(self._text)}].")
        return self._update(self._text[:offset] + value + self._text[offset:])

    def remove(self, offset: int, length: int) -> Statistics:
        """Remove length characters starting at offset."""
        if length < 0:
            raise ValueError("Removal length must be non-negative.")
        if not 0 <= offset <= len(self._text) or offset + length > len(self._text):
            raise IndexError(
                f"Removal [{offset}, {offset + length}) outside text of length "
                f"{len(self._text)}."
            )
        return self._update(self._text[:offset] + self._text[offset + length :])

    def append(self, value: str) -> Statistics:
        return self.insert(len(self._text), value)

    def replace(self, text: str) -> Statistics:
        """Swap the whole buffer for new text."""
        return self._update(text)

    def clear(self) -> Statistics:
        return self._update("")

    def _update(self, text: str) -> Statistics:
        self._text = text
        self._statistics = analyze(text)
        LOGGER.debug(
            "Text changed (%d chars); notifying %d listener(s)",
            len(text),
            len(self._listeners),
        )
        for listener in list(self._listeners):
            listener(self._statistics)
        return self._statistics
