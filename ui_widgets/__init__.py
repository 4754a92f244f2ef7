"""Local, PySide6-only UI components used by the converter window.

Thin subclasses of native Qt widgets, kept in one place so the pages share
one look without a third-party widget kit.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from PySide6.QtGui import QIcon, QPixmap
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QLabel,
    QLineEdit,
    QListWidget,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSpinBox,
    QStyle,
    QTableWidget,
    QToolTip,
)


class _FluentIconValue(str):
    """Token type used to represent pseudo fluent icons."""


class _FluentIcon:
    """Dynamic icon token namespace, e.g. FluentIcon.COPY."""

    def __getattr__(self, name: str) -> _FluentIconValue:
        return _FluentIconValue(name)


FluentIcon = _FluentIcon()


_ICON_MAP = {
    "SEND": QStyle.StandardPixmap.SP_ArrowForward,
    "COPY": QStyle.StandardPixmap.SP_FileDialogDetailedView,
}


def _to_qicon(icon: Any) -> QIcon:
    if isinstance(icon, QIcon):
        return icon
    if isinstance(icon, _FluentIconValue):
        app = QApplication.instance()
        if app is None:
            return QIcon()
        pix = _ICON_MAP.get(str(icon))
        if pix is None:
            return QIcon()
        return app.style().standardIcon(pix)
    return QIcon()


class PushButton(QPushButton):
    """Button accepting ``(icon, text, parent)`` or ``(text, parent)``."""

    def __init__(self, *args: Any) -> None:
        icon = None
        text = ""
        parent = None

        if len(args) >= 2 and isinstance(args[0], (_FluentIconValue, QIcon)) and isinstance(args[1], str):
            icon = args[0]
            text = args[1]
            if len(args) >= 3:
                parent = args[2]
        elif len(args) >= 1 and isinstance(args[0], str):
            text = args[0]
            if len(args) >= 2:
                parent = args[1]
        elif len(args) >= 1:
            parent = args[0]

        super().__init__(text, parent)
        if icon is not None:
            self.setIcon(icon)

    def setIcon(self, icon: Any) -> None:  # type: ignore[override]
        super().setIcon(_to_qicon(icon))


class PrimaryPushButton(PushButton):
    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.setDefault(True)
        self.setStyleSheet(
            """
            QPushButton {
                background: #2f6fed;
                color: white;
                border: none;
                border-radius: 6px;
                padding: 6px 16px;
            }
            QPushButton:hover {
                background: #255ed1;
            }
            QPushButton:disabled {
                background: rgba(47, 111, 237, 0.35);
            }
            """
        )


class TransparentPushButton(PushButton):
    """Simple flat style button."""

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.setFlat(True)
        self.setStyleSheet(
            """
            QPushButton {
                background: transparent;
                border: 1px solid rgba(0, 0, 0, 0.15);
                border-radius: 6px;
                padding: 4px 8px;
            }
            QPushButton:hover {
                background: rgba(0, 0, 0, 0.06);
            }
            """
        )


class PlainTextEdit(QPlainTextEdit):
    pass


class ListWidget(QListWidget):
    pass


class ComboBox(QComboBox):
    pass


class LineEdit(QLineEdit):
    pass


class SpinBox(QSpinBox):
    pass


class TableWidget(QTableWidget):
    pass


class InfoBarPosition(Enum):
    TOP = "top"
    BOTTOM = "bottom"


class InfoBarIcon(Enum):
    INFORMATION = "information"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


_INFO_BAR_PIXMAPS = {
    InfoBarIcon.INFORMATION: QStyle.StandardPixmap.SP_MessageBoxInformation,
    InfoBarIcon.SUCCESS: QStyle.StandardPixmap.SP_DialogApplyButton,
    InfoBarIcon.WARNING: QStyle.StandardPixmap.SP_MessageBoxWarning,
    InfoBarIcon.ERROR: QStyle.StandardPixmap.SP_MessageBoxCritical,
}

INFO_BAR_ICON_NAME = "infoBarIcon"


class InfoBar:
    """Lightweight transient prompt shown in the status bar or as a tooltip.

    With a status bar, the icon sits in a permanent label next to the message
    and is cleared when the message times out.
    """

    def __init__(
        self,
        *,
        icon: InfoBarIcon | None = None,
        title: str = "",
        content: str = "",
        position: InfoBarPosition = InfoBarPosition.BOTTOM,
        duration: int = 2000,
        parent=None,
    ) -> None:
        self.icon = icon
        self.title = title
        self.content = content
        self.position = position
        self.duration = duration
        self.parent = parent

    def _icon_pixmap(self, size: int = 16) -> QPixmap:
        app = QApplication.instance()
        pix = _INFO_BAR_PIXMAPS.get(self.icon)
        if app is None or pix is None:
            return QPixmap()
        return app.style().standardIcon(pix).pixmap(size, size)

    @staticmethod
    def _status_icon_label(status_bar) -> QLabel:
        label = status_bar.findChild(QLabel, INFO_BAR_ICON_NAME)
        if label is None:
            label = QLabel(status_bar)
            label.setObjectName(INFO_BAR_ICON_NAME)
            status_bar.addPermanentWidget(label)
            status_bar.messageChanged.connect(lambda text: text or label.clear())
        return label

    def show(self) -> None:
        message = f"{self.title}: {self.content}" if self.title else self.content
        if self.parent is not None and hasattr(self.parent, "statusBar"):
            status_bar = self.parent.statusBar()
            label = self._status_icon_label(status_bar)
            label.setPixmap(self._icon_pixmap())
            status_bar.showMessage(message, self.duration)
            return

        if self.parent is not None:
            rect = self.parent.rect()
            point = rect.topLeft() if self.position == InfoBarPosition.TOP else rect.bottomLeft()
            QToolTip.showText(self.parent.mapToGlobal(point), message, self.parent, rect, self.duration)
            return

        QMessageBox.information(None, "Info", message)


__all__ = [
    "ComboBox",
    "FluentIcon",
    "INFO_BAR_ICON_NAME",
    "InfoBar",
    "InfoBarIcon",
    "InfoBarPosition",
    "LineEdit",
    "ListWidget",
    "PlainTextEdit",
    "PrimaryPushButton",
    "PushButton",
    "SpinBox",
    "TableWidget",
    "TransparentPushButton",
]
