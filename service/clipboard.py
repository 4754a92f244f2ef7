import logging

from PySide6.QtGui import QGuiApplication

from morseconverter.codec.clipboard_protocol import ClipboardUnavailableError

logger = logging.getLogger(__name__)


class QtClipboardWriter:
    """Writes text to the system clipboard through the running Qt application."""

    def write_text(self, text):
        if QGuiApplication.instance() is None:
            raise ClipboardUnavailableError("no running Qt application")
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardUnavailableError("Qt clipboard is not available")
        clipboard.setText(str(text))
        logger.debug("Copied %d chars to clipboard", len(str(text)))
