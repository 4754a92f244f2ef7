from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QAbstractItemView, QListWidgetItem

from ui_widgets import ListWidget


class HistoryListWidget(ListWidget):
    """Most-recent-first list of conversion records."""

    TIME_FORMAT = "%H:%M:%S"

    record_activated = Signal(object)  # ConversionRecord

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setWordWrap(True)
        self.setAlternatingRowColors(True)
        self.itemDoubleClicked.connect(self._on_item_double_clicked)
        self._records = ()
        self.set_records(())

    @classmethod
    def format_record(cls, record):
        return "{mode}   {src}   →   {dst}   {time}".format(
            mode=record.mode.short_label,
            src=record.input_text,
            dst=record.output_text,
            time=record.created_at.strftime(cls.TIME_FORMAT),
        )

    def placeholder_text(self):
        return self.tr("No history yet.")

    def set_records(self, records):
        self._records = tuple(records)
        self.clear()
        if not self._records:
            item = QListWidgetItem(self.placeholder_text())
            item.setFlags(Qt.NoItemFlags)
            item.setTextAlignment(Qt.AlignCenter)
            self.addItem(item)
            return

        for record in self._records:
            item = QListWidgetItem(self.format_record(record))
            item.setData(Qt.UserRole, record)
            item.setToolTip(f"{record.input_text}\n→\n{record.output_text}")
            self.addItem(item)

    def record_count(self):
        return len(self._records)

    def _on_item_double_clicked(self, item):
        record = item.data(Qt.UserRole) if item else None
        if record is not None:
            self.record_activated.emit(record)
