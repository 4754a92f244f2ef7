import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from morseconverter.codec import Codec, ConversionHistory, ConversionOrchestrator
from morseconverter.core.context import AppContext
from utils.config_manager import ConfigManager

from helpers import FakeClipboard, StepClock


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def config_manager(qapp, tmp_path):
    return ConfigManager(db_dir=str(tmp_path / "config"))


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def orchestrator(clipboard):
    return ConversionOrchestrator(
        codec=Codec(),
        history=ConversionHistory(),
        clipboard=clipboard,
        clock=StepClock(),
    )


@pytest.fixture
def context(config_manager, clipboard):
    return AppContext(config_manager=config_manager, clipboard_factory=lambda: clipboard)
