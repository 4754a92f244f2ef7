from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ConversionMode(str, Enum):
    TEXT_TO_MORSE = "text-to-morse"
    MORSE_TO_TEXT = "morse-to-text"

    def toggled(self) -> "ConversionMode":
        if self is ConversionMode.TEXT_TO_MORSE:
            return ConversionMode.MORSE_TO_TEXT
        return ConversionMode.TEXT_TO_MORSE

    @property
    def short_label(self) -> str:
        return "T→M" if self is ConversionMode.TEXT_TO_MORSE else "M→T"

    @classmethod
    def from_command(cls, value) -> "ConversionMode":
        """Strict lookup for convert/swap; raises ``ValueError`` on unknown modes."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        mode = _MODE_ALIASES.get(text)
        if mode is None:
            raise ValueError(f"unknown conversion mode: {value!r}")
        return cls(mode)

    @classmethod
    def parse(cls, value, default: "ConversionMode | None" = None) -> "ConversionMode":
        # Lenient: used for stored settings, falls back instead of raising.
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for mode in cls:
            if mode.value == text:
                return mode
        return default if default is not None else cls.TEXT_TO_MORSE


_MODE_ALIASES = {
    "text-to-morse": "text-to-morse",
    "text→morse": "text-to-morse",
    "morse-to-text": "morse-to-text",
    "morse→text": "morse-to-text",
}


@dataclass(frozen=True)
class ConversionRecord:
    mode: ConversionMode
    input_text: str
    output_text: str
    created_at: datetime


@dataclass(frozen=True)
class ConversionResult:
    output: str
    history_entry: ConversionRecord | None = None


@dataclass(frozen=True)
class SwapResult:
    mode: ConversionMode
    input_text: str
    output_text: str
