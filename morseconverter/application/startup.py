"""Application layer startup assembly."""

from morseconverter.core.context import AppContext
from morseconverter.presentation.main_window import MainWindow


def build_main_window(context: AppContext) -> MainWindow:
    return MainWindow(context)
