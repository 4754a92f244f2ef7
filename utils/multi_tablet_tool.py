import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QSizePolicy,
    QTableWidgetItem,
    QVBoxLayout,
)
from ui_widgets import LineEdit, TableWidget

from morseconverter.codec.clipboard_protocol import ClipboardUnavailableError
from morseconverter.codec.symbol_table import WORD_SEPARATOR, build_symbol_table
from service.clipboard import QtClipboardWriter


logger = logging.getLogger(__name__)


class MultiTableTool(QDialog):
    """Searchable reference table of the character <-> Morse mapping."""

    def __init__(self, symbol_table=None, parent=None, clipboard=None):
        super().__init__(parent)
        self.symbol_table = symbol_table if symbol_table is not None else build_symbol_table()
        self.clipboard = clipboard if clipboard is not None else QtClipboardWriter()
        self.setWindowFlags(Qt.WindowCloseButtonHint)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.resize(520, 560)
        self.center()

        self._init_ui()
        self._load_table()

    def _init_ui(self):
        self.setWindowTitle(self.tr("Morse Code Reference"))

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 10, 12, 10)
        root.setSpacing(8)

        top = QHBoxLayout()
        top.setSpacing(8)

        self.search_edit = LineEdit()
        self.search_edit.setPlaceholderText(self.tr("Filter by character or code…"))
        self.search_edit.textChanged.connect(self._apply_filter)

        self.count_label = QLabel("")
        self.count_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        top.addWidget(self.search_edit, 1)
        top.addWidget(self.count_label)

        self.table = TableWidget()
        self.table.setSortingEnabled(False)
        self.table.setAlternatingRowColors(True)
        self.table.setEditTriggers(TableWidget.NoEditTriggers)
        self.table.itemDoubleClicked.connect(self._copy_cell)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.horizontalHeader().setStretchLastSection(True)

        root.addLayout(top)
        root.addWidget(self.table, 1)

    def _display_char(self, char):
        return self.tr("(space)") if char == " " else char

    def rows(self):
        return [[self._display_char(char), token] for char, token in self.symbol_table.items()]

    def _load_table(self):
        data = self.rows()
        headers = [self.tr("Character"), self.tr("Morse Code")]

        self.table.setColumnCount(len(headers))
        self.table.setHorizontalHeaderLabels(headers)
        self.table.setRowCount(len(data))

        for row, values in enumerate(data):
            for col, value in enumerate(values):
                item = QTableWidgetItem(str(value))
                if value == WORD_SEPARATOR and col == 1:
                    item.setToolTip(self.tr("Word separator"))
                self.table.setItem(row, col, item)

        self._update_count_label()

    def _apply_filter(self):
        keyword = self.search_edit.text().strip().lower()
        for row in range(self.table.rowCount()):
            row_text = []
            for col in range(self.table.columnCount()):
                item = self.table.item(row, col)
                row_text.append(item.text().lower() if item else "")
            hidden = bool(keyword) and not any(keyword in cell for cell in row_text)
            self.table.setRowHidden(row, hidden)
        self._update_count_label()

    def visible_row_count(self):
        return sum(1 for row in range(self.table.rowCount()) if not self.table.isRowHidden(row))

    def _update_count_label(self):
        visible = self.visible_row_count()
        total = self.table.rowCount()
        self.count_label.setText(self.tr("Showing {0}/{1}").format(visible, total))

    def _copy_cell(self, item):
        if not item:
            return False
        try:
            self.clipboard.write_text(item.text())
        except ClipboardUnavailableError as e:
            logger.warning("Clipboard unavailable: %s", e)
            return False
        except Exception:
            logger.exception("Clipboard write failed")
            return False
        return True

    def center(self):
        screen = QApplication.primaryScreen().availableGeometry()
        size = self.geometry()
        center_point_x = int((screen.width() - size.width()) / 2)
        center_point_y = int((screen.height() - size.height()) / 2)
        self.move(center_point_x, center_point_y)
