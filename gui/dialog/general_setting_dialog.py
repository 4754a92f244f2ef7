# -*- coding: utf-8 -*-

from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QSizePolicy,
    QSpacerItem,
    QVBoxLayout,
)
from ui_widgets import ComboBox, PushButton, SpinBox

from morseconverter.core.i18n import SOURCE_LANGUAGE, language_name, normalize_language
from utils.config_manager import ConfigManager


class GeneralSettingDialog(QDialog):
    FACTORY_DEFAULTS = {
        "language": SOURCE_LANGUAGE,
        "font_size": ConfigManager.DEFAULT_FONT_SIZE,
        "copy_feedback_ms": ConfigManager.DEFAULT_COPY_FEEDBACK_MS,
    }

    def __init__(self, parent=None, config_manager=None):
        super().__init__(parent)
        self.setWindowTitle(self.tr("General Settings"))
        self.resize(420, 220)

        if config_manager is not None:
            self.config_manager = config_manager
        elif parent is not None and hasattr(parent, "config_manager"):
            self.config_manager = parent.config_manager
        else:
            self.config_manager = ConfigManager()

        self._loading = False
        self.confirm = QMessageBox.question

        self._init_draft()
        self._init_ui()
        self._apply_draft_to_ui()

    def _init_draft(self):
        self.initial = {
            "language": normalize_language(self.config_manager.get_language()),
            "font_size": int(self.config_manager.get_font_size()),
            "copy_feedback_ms": int(self.config_manager.get_copy_feedback_ms()),
        }
        self.draft = dict(self.initial)

    def _init_ui(self):
        self.main_vbox = QVBoxLayout(self)
        self.main_vbox.setSpacing(10)

        language_row = QHBoxLayout()
        self.label_language = QLabel(self.tr("Language:"))
        self.combo_language = ComboBox(self)
        # Only languages with a shipped catalog are selectable.
        self.language_options = [
            (lang, language_name(lang)) for lang in self.config_manager.available_languages()
        ]
        for _, text in self.language_options:
            self.combo_language.addItem(text)
        language_row.addWidget(self.label_language)
        language_row.addWidget(self.combo_language)
        self.main_vbox.addLayout(language_row)

        font_row = QHBoxLayout()
        self.label_font = QLabel(self.tr("Font size:"))
        self.spin_font = SpinBox(self)
        self.spin_font.setRange(8, 36)
        font_row.addWidget(self.label_font)
        font_row.addWidget(self.spin_font)
        self.main_vbox.addLayout(font_row)

        feedback_row = QHBoxLayout()
        self.label_feedback = QLabel(self.tr("Copy confirmation (ms):"))
        self.spin_feedback = SpinBox(self)
        self.spin_feedback.setRange(200, 10000)
        self.spin_feedback.setSingleStep(100)
        feedback_row.addWidget(self.label_feedback)
        feedback_row.addWidget(self.spin_feedback)
        self.main_vbox.addLayout(feedback_row)

        bottom = QHBoxLayout()
        self.btn_restore = PushButton(self.tr("Restore defaults"))
        bottom.addWidget(self.btn_restore)
        spacer = QSpacerItem(40, 20, QSizePolicy.Expanding, QSizePolicy.Minimum)
        bottom.addItem(spacer)
        self.btn_cancel = PushButton(self.tr("Cancel"))
        self.btn_save = PushButton(self.tr("Save"))
        bottom.addWidget(self.btn_cancel)
        bottom.addWidget(self.btn_save)
        self.main_vbox.addLayout(bottom)

        self.spin_font.valueChanged.connect(lambda v: self._set_draft("font_size", int(v)))
        self.spin_feedback.valueChanged.connect(lambda v: self._set_draft("copy_feedback_ms", int(v)))
        self.combo_language.currentIndexChanged.connect(self._on_language_changed)

        self.btn_restore.clicked.connect(self._restore_factory_defaults)
        self.btn_cancel.clicked.connect(self.cancel)
        self.btn_save.clicked.connect(self.save)

    def _set_draft(self, key, value):
        if self._loading:
            return
        self.draft[key] = value

    def _apply_draft_to_ui(self):
        self._loading = True
        try:
            self.spin_font.setValue(int(self.draft["font_size"]))
            self.spin_feedback.setValue(int(self.draft["copy_feedback_ms"]))

            lang_idx = 0
            for idx, (lang_key, _) in enumerate(self.language_options):
                if lang_key == str(self.draft["language"]):
                    lang_idx = idx
                    break
            self.combo_language.setCurrentIndex(lang_idx)
        finally:
            self._loading = False

    def _on_language_changed(self):
        if self._loading:
            return
        lang_key, _ = self.language_options[self.combo_language.currentIndex()]
        self.draft["language"] = lang_key

    def _restore_factory_defaults(self):
        self.draft = dict(self.FACTORY_DEFAULTS)
        self._apply_draft_to_ui()

    def _snapshot(self):
        snap = dict(self.draft)
        lang_key, _ = self.language_options[self.combo_language.currentIndex()]
        snap["language"] = lang_key
        snap["font_size"] = int(self.spin_font.value())
        snap["copy_feedback_ms"] = int(self.spin_feedback.value())
        return snap

    def is_dirty(self):
        return self._snapshot() != self.initial

    def _confirm_discard_if_dirty(self):
        if not self.is_dirty():
            return True
        result = self.confirm(
            self,
            self.tr("Discard changes"),
            self.tr("There are unsaved changes. Discard them?"),
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return result == QMessageBox.Yes

    def save(self):
        snapshot = self._snapshot()
        language_before = normalize_language(self.initial.get("language"))
        language_after = normalize_language(snapshot.get("language"))
        self.config_manager.set_language(language_after)
        self.config_manager.set_font_size(snapshot["font_size"])
        self.config_manager.set_copy_feedback_ms(snapshot["copy_feedback_ms"])
        self.config_manager.sync()
        self.initial = dict(snapshot)
        if language_after != language_before:
            QMessageBox.information(
                self,
                self.tr("Language"),
                self.tr("The language change takes effect after restarting the application."),
            )
        self.accept()

    def cancel(self):
        if self._confirm_discard_if_dirty():
            self.reject()

    def closeEvent(self, event):
        if self._confirm_discard_if_dirty():
            event.accept()
            return
        event.ignore()
