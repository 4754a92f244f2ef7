from PySide6.QtCore import Signal, QObject


# Converter page notifications
class ConverterSignal(QObject):
    history_changed = Signal()  # a record was added or the history was cleared

    output_copied = Signal(str)  # text handed to the clipboard
