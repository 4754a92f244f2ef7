from PySide6.QtWidgets import QApplication, QDialog, QMainWindow, QMessageBox
from PySide6.QtGui import QAction
from ui_widgets import InfoBarPosition, InfoBar, InfoBarIcon

from gui.dialog.about_dialog import AboutDialog
from gui.dialog.general_setting_dialog import GeneralSettingDialog
from gui.windows.converter_page import ConverterPage
from morseconverter.core.context import AppContext
from utils.multi_tablet_tool import MultiTableTool


class MainUI(QMainWindow):
    """Main window: menu bar plus the converter page."""

    DEFAULT_WIDTH = 760
    DEFAULT_HEIGHT = 720

    def __init__(self, context=None):
        super().__init__()
        self.context = context if context is not None else AppContext()
        self.config_manager = self.context.config_manager

        self.resize(self.DEFAULT_WIDTH, self.DEFAULT_HEIGHT)
        self.setMinimumSize(520, 520)
        self.center()
        self.setWindowTitle(f"{self.context.app_name} {self.config_manager.get_current_version()}")

        self.init_ui()

    def center(self):
        """Move the window to the middle of the primary screen."""
        screen = QApplication.primaryScreen().availableGeometry()
        size = self.geometry()

        self.center_point_x = int((screen.width() - size.width()) / 2)
        self.center_point_y = int((screen.height() - size.height()) / 2)
        self.move(self.center_point_x, self.center_point_y)

    def init_ui(self):
        self.create_menu_bar()

        self.page_converter = ConverterPage(self, context=self.context)
        self.page_converter.signals.output_copied.connect(self._on_output_copied)
        self.page_converter.signals.history_changed.connect(self._refresh_history_actions)
        self.setCentralWidget(self.page_converter)
        self._refresh_history_actions()

        self.table_tool_morse_code = MultiTableTool(
            self.context.codec.table, clipboard=self.context.create_orchestrator().clipboard
        )

    def create_menu_bar(self):
        menu_bar = self.menuBar()

        # Settings
        menu_setting = menu_bar.addMenu(self.tr("Settings"))
        general_setting_action = QAction(self.tr("General settings"), self)
        general_setting_action.triggered.connect(self.general_setting)
        menu_setting.addAction(general_setting_action)

        # History
        menu_history = menu_bar.addMenu(self.tr("History"))
        self.clear_history_action = QAction(self.tr("Clear history"), self)
        self.clear_history_action.triggered.connect(self.clear_history)
        menu_history.addAction(self.clear_history_action)

        # Help
        help_menu = menu_bar.addMenu(self.tr("Help"))
        reference_table_action = QAction(self.tr("Reference table"), self)
        reference_table_action.triggered.connect(self.show_reference_table_action)
        help_menu.addAction(reference_table_action)

        about_action = QAction(self.tr("About"), self)
        about_action.triggered.connect(self.about)
        menu_bar.addAction(about_action)

    def about(self):
        dialog = AboutDialog(self, clipboard=self.context.create_orchestrator().clipboard)
        dialog.move(self.center_point_x, self.center_point_y)
        dialog.exec()

    def general_setting(self):
        dialog = GeneralSettingDialog(self)
        dialog.move(self.center_point_x, self.center_point_y)
        if dialog.exec() == QDialog.Accepted:
            self.page_converter.set_font_size(self.config_manager.get_font_size())

    def clear_history(self, confirm=True):
        if not len(self.context.history):
            return
        if confirm:
            result = QMessageBox.question(
                self,
                self.tr("Clear history"),
                self.tr("Remove all entries from the conversion history?"),
                QMessageBox.Yes | QMessageBox.No,
                QMessageBox.No,
            )
            if result != QMessageBox.Yes:
                return
        self.page_converter.clear_history()

    def show_reference_table_action(self):
        self.table_tool_morse_code.show()

    def _refresh_history_actions(self):
        self.clear_history_action.setEnabled(bool(len(self.context.history)))

    def _on_output_copied(self, _text):
        self.create_info_bar(self.tr("Copied"), self.tr("Output copied to clipboard"))

    def closeEvent(self, event):
        self.config_manager.set_last_mode(self.page_converter.mode)
        self.config_manager.sync()
        self.table_tool_morse_code.close()
        super().closeEvent(event)

    def create_info_bar(self, title, content, position=InfoBarPosition.BOTTOM):
        InfoBar(
            icon=InfoBarIcon.SUCCESS,
            title=title,
            content=content,
            position=position,
            duration=self.config_manager.get_copy_feedback_ms(),
            parent=self
        ).show()
