import logging

from PySide6.QtCore import QEvent, Qt, QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from gui.widget.history_list import HistoryListWidget
from morseconverter.codec.models import ConversionMode
from morseconverter.core.context import AppContext
from service.signal.qt_signal import ConverterSignal
from ui_widgets import FluentIcon, PlainTextEdit, PrimaryPushButton, PushButton, TransparentPushButton

logger = logging.getLogger(__name__)


class ConverterPage(QWidget):
    """Text <-> Morse conversion card with history."""

    def __init__(self, parent=None, context=None):
        super().__init__(parent)
        self.context = context if context is not None else AppContext()
        self.config_manager = self.context.config_manager
        self.orchestrator = self.context.create_orchestrator()
        self.signals = ConverterSignal()

        self.mode = self.config_manager.get_last_mode()
        self._loading = False

        self._copy_timer = QTimer(self)
        self._copy_timer.setSingleShot(True)
        self._copy_timer.timeout.connect(self._reset_copy_caption)

        self.init_ui()
        self.set_font_size(self.config_manager.get_font_size())
        self._refresh_mode_texts()
        self._refresh_buttons()
        self.refresh_history()

    def init_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(12)

        card = QFrame(self)
        card.setObjectName("converterCard")
        card.setStyleSheet(
            "#converterCard { border: 1px solid rgba(0,0,0,0.12); border-radius: 10px; }"
        )
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 14, 16, 14)
        card_layout.setSpacing(8)

        # Input
        self.label_input = QLabel("")
        self.edit_input = PlainTextEdit(self)
        self.edit_input.setTabChangesFocus(True)
        self.edit_input.textChanged.connect(self._on_input_changed)
        self.edit_input.installEventFilter(self)
        card_layout.addWidget(self.label_input)
        card_layout.addWidget(self.edit_input, 1)

        # Swap
        swap_row = QHBoxLayout()
        swap_row.addStretch(1)
        self.btn_swap = TransparentPushButton("⇄", self)
        self.btn_swap.setToolTip(self.tr("Swap conversion direction"))
        self.btn_swap.setAccessibleName(self.tr("Switch conversion direction"))
        self.btn_swap.clicked.connect(self.swap)
        swap_row.addWidget(self.btn_swap)
        swap_row.addStretch(1)
        card_layout.addLayout(swap_row)

        # Output
        self.label_output = QLabel("")
        self.edit_output = PlainTextEdit(self)
        self.edit_output.setReadOnly(True)
        card_layout.addWidget(self.label_output)
        card_layout.addWidget(self.edit_output, 1)

        # Actions
        button_row = QHBoxLayout()
        button_row.setSpacing(8)
        self.btn_convert = PrimaryPushButton(FluentIcon.SEND, self.tr("Convert"), self)
        self.btn_convert.setAccessibleName(self.tr("Convert"))
        self.btn_convert.setToolTip(self.tr("Convert (Ctrl+Enter)"))
        self.btn_convert.clicked.connect(self.convert)
        self.btn_copy = PushButton(FluentIcon.COPY, self.copy_caption(), self)
        self.btn_copy.setAccessibleName(self.tr("Copy output"))
        self.btn_copy.setToolTip(self.tr("Copy result to clipboard"))
        self.btn_copy.clicked.connect(self.copy_output)
        button_row.addWidget(self.btn_convert)
        button_row.addWidget(self.btn_copy)
        button_row.addStretch(1)
        card_layout.addLayout(button_row)

        root.addWidget(card, 3)

        # History
        self.label_history_title = QLabel(self.tr("Conversion History"))
        title_font = QFont(self.label_history_title.font())
        title_font.setBold(True)
        self.label_history_title.setFont(title_font)
        self.history_list = HistoryListWidget(self)
        self.history_list.record_activated.connect(self.restore_record)
        root.addWidget(self.label_history_title)
        root.addWidget(self.history_list, 2)

    # ---- mode dependent texts ----
    def input_label(self):
        if self.mode is ConversionMode.TEXT_TO_MORSE:
            return self.tr("Text Input")
        return self.tr("Morse Input")

    def input_placeholder(self):
        if self.mode is ConversionMode.TEXT_TO_MORSE:
            return self.tr("Type your message here")
        return self.tr("Type your Morse code here (use . and -)")

    def output_label(self):
        if self.mode is ConversionMode.TEXT_TO_MORSE:
            return self.tr("Morse Code")
        return self.tr("Text Output")

    def output_placeholder(self):
        if self.mode is ConversionMode.TEXT_TO_MORSE:
            return self.tr("Translated message in Morse code")
        return self.tr("Translated message in Text")

    def copy_caption(self):
        return self.tr("Copy")

    def copied_caption(self):
        return self.tr("Copied!")

    def _refresh_mode_texts(self):
        self.label_input.setText(self.input_label())
        self.edit_input.setPlaceholderText(self.input_placeholder())
        self.label_output.setText(self.output_label())
        self.edit_output.setPlaceholderText(self.output_placeholder())

    def _refresh_buttons(self):
        self.btn_convert.setEnabled(bool(self.input_text().strip()))
        self.btn_copy.setEnabled(bool(self.output_text()))

    # ---- buffers ----
    def input_text(self):
        return self.edit_input.toPlainText()

    def output_text(self):
        return self.edit_output.toPlainText()

    def _set_buffers(self, input_text, output_text):
        self._loading = True
        try:
            self.edit_input.setPlainText(input_text)
            self.edit_output.setPlainText(output_text)
        finally:
            self._loading = False
        self._refresh_buttons()

    def set_mode(self, mode):
        self.mode = ConversionMode.parse(mode, self.mode)
        self._refresh_mode_texts()

    def _on_input_changed(self):
        if self._loading:
            return
        self.edit_output.setPlainText("")
        self._refresh_buttons()

    # ---- commands ----
    def convert(self):
        result = self.orchestrator.convert(self.mode, self.input_text())
        self.edit_output.setPlainText(result.output)
        self._refresh_buttons()
        if result.history_entry is not None:
            self.refresh_history()
            self.signals.history_changed.emit()
        return result

    def swap(self):
        swapped = self.orchestrator.swap(self.mode, self.input_text(), self.output_text())
        self.set_mode(swapped.mode)
        self._set_buffers(swapped.input_text, swapped.output_text)
        return swapped

    def copy_output(self):
        text = self.output_text()
        if not text:
            return False
        if not self.orchestrator.copy(text):
            return False
        self.btn_copy.setText(self.copied_caption())
        self._copy_timer.start(self.config_manager.get_copy_feedback_ms())
        self.signals.output_copied.emit(text.strip())
        return True

    def _reset_copy_caption(self):
        self.btn_copy.setText(self.copy_caption())

    def restore_record(self, record):
        self.set_mode(record.mode)
        self._set_buffers(record.input_text, record.output_text)

    def refresh_history(self):
        self.history_list.set_records(self.orchestrator.history.entries)

    def clear_history(self):
        self.orchestrator.history.clear()
        self.refresh_history()
        self.signals.history_changed.emit()

    def set_font_size(self, size):
        font = QFont(self.edit_input.font())
        font.setPointSize(int(size))
        self.edit_input.setFont(font)
        self.edit_output.setFont(font)

    def eventFilter(self, watched, event):
        if watched is self.edit_input and event.type() == QEvent.KeyPress:
            is_enter = event.key() in (Qt.Key_Return, Qt.Key_Enter)
            with_modifier = bool(event.modifiers() & (Qt.ControlModifier | Qt.MetaModifier))
            if is_enter and with_modifier:
                logger.debug("Convert shortcut triggered")
                self.convert()
                return True
        return super().eventFilter(watched, event)
