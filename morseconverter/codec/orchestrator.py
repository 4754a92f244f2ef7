from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from .clipboard_protocol import ClipboardUnavailableError, ClipboardWriter
from .codec import Codec
from .history import ConversionHistory
from .models import ConversionMode, ConversionRecord, ConversionResult, SwapResult


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ConversionOrchestrator:
    """Command surface used by the presentation layer: convert, swap, copy."""

    def __init__(
        self,
        codec: Codec,
        history: ConversionHistory,
        clipboard: ClipboardWriter | None = None,
        clock: Clock = datetime.now,
    ) -> None:
        self.codec = codec
        self._history = history
        self.clipboard = clipboard
        self._clock = clock

    @property
    def history(self) -> ConversionHistory:
        return self._history

    def convert(self, mode, input_text: str) -> ConversionResult:
        mode = ConversionMode.from_command(mode)
        text = str(input_text or "")
        if not text.strip():
            return ConversionResult(output="")

        if mode is ConversionMode.TEXT_TO_MORSE:
            output = self.codec.encode(text)
        else:
            output = self.codec.decode(text)
        logger.debug("convert mode=%s in_len=%d out_len=%d", mode.value, len(text), len(output))

        if not output.strip():
            return ConversionResult(output=output)

        record = ConversionRecord(
            mode=mode,
            input_text=text,
            output_text=output,
            created_at=self._clock(),
        )
        self._history.add(record)
        return ConversionResult(output=output, history_entry=record)

    @staticmethod
    def swap(mode, input_text: str, output_text: str) -> SwapResult:
        return SwapResult(
            mode=ConversionMode.from_command(mode).toggled(),
            input_text=output_text,
            output_text=input_text,
        )

    def copy(self, output_text: str) -> bool:
        """Hand the trimmed output to the clipboard.

        Returns ``False`` when there is nothing to copy or the write failed;
        failures are logged and never propagated.
        """
        text = str(output_text or "").strip()
        if not text:
            return False
        if self.clipboard is None:
            logger.warning("No clipboard writer configured, copy skipped")
            return False
        try:
            self.clipboard.write_text(text)
        except ClipboardUnavailableError as e:
            logger.warning("Clipboard unavailable: %s", e)
            return False
        except Exception:
            logger.exception("Clipboard write failed")
            return False
        return True
