from PySide6.QtGui import QGuiApplication

from morseconverter.codec import Codec, ConversionHistory, ConversionOrchestrator
from service.clipboard import QtClipboardWriter


def test_qt_clipboard_writer_sets_text(qapp):
    QtClipboardWriter().write_text("... --- ...")
    assert QGuiApplication.clipboard().text() == "... --- ..."


def test_orchestrator_copy_through_qt_clipboard(qapp):
    orchestrator = ConversionOrchestrator(Codec(), ConversionHistory(), QtClipboardWriter())
    assert orchestrator.copy(" .- ") is True
    assert QGuiApplication.clipboard().text() == ".-"
