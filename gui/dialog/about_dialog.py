import html
import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
)

from morseconverter.codec.clipboard_protocol import ClipboardUnavailableError
from morseconverter.codec.symbol_table import WORD_SEPARATOR, build_symbol_table
from morseconverter.core.metadata import APP_NAME
from service.clipboard import QtClipboardWriter
from utils.config_manager import ConfigManager


logger = logging.getLogger(__name__)


class AboutDialog(QDialog):
    """About dialog with version info and the supported symbol set."""

    def __init__(self, parent=None, config_manager=None, symbol_table=None, clipboard=None):
        super().__init__(parent)
        context = getattr(parent, "context", None)
        if config_manager is None and parent is not None and hasattr(parent, "config_manager"):
            config_manager = parent.config_manager
        if symbol_table is None:
            symbol_table = context.codec.table if context is not None else build_symbol_table()
        self.configer = config_manager or ConfigManager()
        self.symbol_table = symbol_table
        self.clipboard = clipboard if clipboard is not None else QtClipboardWriter()
        self.current_version = str(self.configer.get_current_version() or "0.0.0")

        self.setWindowTitle(self.tr("About {0}").format(APP_NAME))
        self.setMinimumSize(460, 300)
        self.resize(520, 340)
        self._init_ui()

    def punctuation_text(self):
        return " ".join(
            char for char in self.symbol_table
            if not char.isalnum() and not char.isspace()
        )

    def _init_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 14, 16, 14)
        root.setSpacing(10)

        title = QLabel(f"{APP_NAME} v{self.current_version}")
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)

        subtitle = QLabel(self.tr("Convert plain text to Morse code and back."))
        subtitle.setWordWrap(True)

        punctuation = html.escape(self.punctuation_text(), quote=False)
        self.browser = QTextBrowser()
        self.browser.setStyleSheet("background: transparent; border: 1px solid rgba(0,0,0,0.12); border-radius: 8px;")
        self.browser.setHtml(
            f"""
            <p><b>{self.tr("Supported symbols")}</b></p>
            <ul>
              <li>{self.tr("Letters A-Z and digits 0-9")}</li>
              <li>{self.tr("Punctuation")}: {punctuation}</li>
              <li>{self.tr("Words are separated by")} <code>{WORD_SEPARATOR}</code></li>
            </ul>
            <p>{self.tr("Characters without a Morse code are skipped.")}</p>
            <p><b>{self.tr("Current version")}</b>: v{self.current_version}</p>
            """
        )

        actions = QHBoxLayout()
        actions.setSpacing(8)

        btn_copy_ver = QPushButton(self.tr("Copy version"))
        btn_copy_ver.clicked.connect(self._copy_version)

        btn_close = QPushButton(self.tr("Close"))
        btn_close.clicked.connect(self.accept)
        btn_close.setDefault(True)

        actions.addWidget(btn_copy_ver)
        actions.addStretch(1)
        actions.addWidget(btn_close)

        root.addWidget(title)
        root.addWidget(subtitle)
        root.addWidget(self.browser, 1)
        root.addLayout(actions)

    def _copy_version(self):
        try:
            self.clipboard.write_text(self.current_version)
        except ClipboardUnavailableError as e:
            logger.warning("Clipboard unavailable: %s", e)
            return
        except Exception:
            logger.exception("Clipboard write failed")
            return
        QMessageBox.information(self, self.tr("Info"), self.tr("Version copied"))
