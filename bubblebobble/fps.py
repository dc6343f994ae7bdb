"""Frames-per-second counter that refreshes its text twice a second."""

from __future__ import annotations

from typing import Callable, Optional

UPDATE_INTERVAL = 0.5


class FpsCounter:
    """Counts frames and produces a text such as ``59.8 FPS``."""

    def __init__(self, on_text: Optional[Callable[[str], object]] = None) -> None:
        self.fps = 0.0
        self.text = ""
        self._elapsed = 0.0
        self._count = 0
        self._on_text = on_text

    def tick(self, delta_time: float) -> Optional[str]:
        """Register one frame; return the new text when it was refreshed."""
        self._elapsed += delta_time
        self._count += 1
        if self._elapsed < UPDATE_INTERVAL:
            return None
        self.fps = self._count / self._elapsed
        self.text = f"{self.fps:.1f} FPS"
        self._elapsed = 0.0
        self._count = 0
        if self._on_text is not None:
            self._on_text(self.text)
        return self.text