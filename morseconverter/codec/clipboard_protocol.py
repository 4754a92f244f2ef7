from __future__ import annotations

from typing import Protocol


class ClipboardUnavailableError(RuntimeError):
    """Raised by a clipboard writer when the host clipboard cannot be reached."""


class ClipboardWriter(Protocol):
    def write_text(self, text: str) -> None:
        ...
