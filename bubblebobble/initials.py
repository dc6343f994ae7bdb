"""Three-letter initials entry for the high-score table."""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, Optional

MAX_CHARS = 3
PLACEHOLDER = "."
_UNSET = "\0"


class InitialsEntry:
    """Lets the player cycle each character through ``.``, ``A``-``Z``.

    Once all characters are confirmed, the next :meth:`update` calls the
    confirmation callbacks with this entry.
    """

    def __init__(self, on_confirmed: Optional[Callable[["InitialsEntry"], object]] = None) -> None:
        self._characters = [PLACEHOLDER] + [_UNSET] * (MAX_CHARS - 1)
        self._active = 0
        self._notify_pending = False
        self._observers: list[Callable[[InitialsEntry], object]] = []
        if on_confirmed is not None:
            self._observers.append(on_confirmed)

    def add_observer(self, callback: Callable[["InitialsEntry"], object]) -> None:
        self._observers.append(callback)

    @property
    def active_index(self) -> int:
        return self._active

    def confirm_character(self) -> None:
        """Fix the current character and move on to the next one."""
        self._active += 1
        if self._active == MAX_CHARS:
            self._notify_pending = True
        elif self._active < MAX_CHARS:
            self._characters[self._active] = PLACEHOLDER

    def advance_character(self, forward: bool) -> None:
        """Step the current character forwards or backwards, wrapping through ``.``."""
        if self._active >= MAX_CHARS:
            return
        current = self._characters[self._active]
        if forward:
            if current == "Z":
                new = PLACEHOLDER
            elif current == PLACEHOLDER:
                new = "A"
            else:
                new = chr(ord(current) + 1)
        else:
            if current == "A":
                new = PLACEHOLDER
            elif current == PLACEHOLDER:
                new = "Z"
            else:
                new = chr(ord(current) - 1)
        self._characters[self._active] = new

    def update(self) -> None:
        if self._notify_pending:
            for callback in list(self._observers):
                callback(self)
            self._notify_pending = False

    def text(self) -> str:
        """Return the characters entered so far, including the one being edited."""
        return "".join(takewhile(lambda char: char != _UNSET, self._characters))