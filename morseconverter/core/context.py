"""Shared application context and dependency factories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from morseconverter.codec import (
    ClipboardWriter,
    Codec,
    ConversionHistory,
    ConversionOrchestrator,
)
from service.clipboard import QtClipboardWriter
from utils.config_manager import ConfigManager
from .metadata import APP_NAME, APP_VERSION


ClipboardFactory = Callable[[], ClipboardWriter]


@dataclass
class AppContext:
    """Holds the codec, session history and config for explicit DI."""

    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    config_manager: ConfigManager = field(default_factory=ConfigManager)
    codec: Codec = field(default_factory=Codec)
    history: ConversionHistory = field(default_factory=ConversionHistory)
    clipboard_factory: ClipboardFactory = field(default=QtClipboardWriter)
    _orchestrator: ConversionOrchestrator | None = field(default=None, init=False, repr=False)

    def create_orchestrator(self) -> ConversionOrchestrator:
        if self._orchestrator is None:
            self._orchestrator = ConversionOrchestrator(
                codec=self.codec,
                history=self.history,
                clipboard=self.clipboard_factory(),
            )
        return self._orchestrator
