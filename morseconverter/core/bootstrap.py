"""Process bootstrap for desktop app startup."""

from __future__ import annotations

import logging
import os
import sys
from typing import Sequence

from PySide6.QtWidgets import QApplication

from morseconverter.application.startup import build_main_window
from morseconverter.core.context import AppContext
from morseconverter.core.i18n import build_translator
from morseconverter.core.metadata import APP_NAME, ORGANIZATION_NAME


LOG_LEVEL_ENV = "MORSECONVERTER_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = str(os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _set_app_version(context: AppContext) -> None:
    context.config_manager.set_current_version(context.app_version)


def _install_language(app: QApplication, context: AppContext):
    translator = build_translator(context.config_manager.get_language())
    if translator is None:
        return None
    app.installTranslator(translator)
    return translator


def run(argv: Sequence[str] | None = None) -> int:
    _configure_logging()
    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)

    context = AppContext()
    _set_app_version(context)
    app._mc_translator = _install_language(app, context)  # keep a strong reference

    window = build_main_window(context)
    window.show()
    try:
        return app.exec()
    finally:
        context.config_manager.sync()


def main() -> None:
    sys.exit(run())
