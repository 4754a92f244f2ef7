import dataclasses
import logging

import pytest

from morseconverter.codec import (
    ClipboardUnavailableError,
    Codec,
    ConversionHistory,
    ConversionMode,
    ConversionOrchestrator,
)

from helpers import FakeClipboard, StepClock


class CountingCodec(Codec):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def encode(self, text):
        self.calls += 1
        return super().encode(text)

    def decode(self, morse):
        self.calls += 1
        return super().decode(morse)


def test_convert_text_to_morse_records_history(orchestrator):
    result = orchestrator.convert(ConversionMode.TEXT_TO_MORSE, "SOS")
    assert result.output == "... --- ..."
    assert result.history_entry is not None
    assert result.history_entry.mode is ConversionMode.TEXT_TO_MORSE
    assert result.history_entry.input_text == "SOS"
    assert result.history_entry.output_text == "... --- ..."
    assert orchestrator.history.entries == (result.history_entry,)


def test_convert_accepts_mode_string(orchestrator):
    result = orchestrator.convert("morse-to-text", "... --- ... / ... --- ...")
    assert result.output == "SOS SOS"
    assert result.history_entry.mode is ConversionMode.MORSE_TO_TEXT


@pytest.mark.parametrize("blank", ["", "   ", "\n\t "])
def test_blank_input_short_circuits(blank):
    codec = CountingCodec()
    orchestrator = ConversionOrchestrator(codec, ConversionHistory())
    result = orchestrator.convert(ConversionMode.TEXT_TO_MORSE, blank)
    assert result.output == ""
    assert result.history_entry is None
    assert codec.calls == 0
    assert len(orchestrator.history) == 0


def test_empty_result_is_not_recorded(orchestrator):
    result = orchestrator.convert(ConversionMode.TEXT_TO_MORSE, "#€")
    assert result.output == ""
    assert result.history_entry is None
    assert len(orchestrator.history) == 0

    result = orchestrator.convert(ConversionMode.MORSE_TO_TEXT, "??? ***")
    assert result.output == ""
    assert len(orchestrator.history) == 0


def test_history_cap_after_eleven_conversions(orchestrator):
    inputs = [f"MSG {n}" for n in range(11)]
    for text in inputs:
        orchestrator.convert(ConversionMode.TEXT_TO_MORSE, text)
    history = orchestrator.history
    assert len(history) == 10
    assert [r.input_text for r in history] == list(reversed(inputs[1:]))
    assert all(r.input_text != inputs[0] for r in history)


def test_records_use_clock_and_are_immutable(orchestrator):
    first = orchestrator.convert(ConversionMode.TEXT_TO_MORSE, "A").history_entry
    second = orchestrator.convert(ConversionMode.TEXT_TO_MORSE, "B").history_entry
    assert second.created_at > first.created_at
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.output_text = "x"


def test_swap_exchanges_buffers_and_direction():
    swapped = ConversionOrchestrator.swap(ConversionMode.TEXT_TO_MORSE, "HI", "....")
    assert swapped.mode is ConversionMode.MORSE_TO_TEXT
    assert swapped.input_text == "...."
    assert swapped.output_text == "HI"


def test_swap_does_not_convert(orchestrator):
    orchestrator.swap("morse-to-text", ".-", "")
    assert len(orchestrator.history) == 0
    swapped = orchestrator.swap("morse-to-text", ".-", "")
    assert swapped.mode is ConversionMode.TEXT_TO_MORSE
    assert swapped.input_text == ""
    assert swapped.output_text == ".-"


def test_copy_writes_trimmed_output(orchestrator, clipboard):
    assert orchestrator.copy("  ... --- ...\n") is True
    assert clipboard.texts == ["... --- ..."]


def test_copy_empty_is_noop(orchestrator, clipboard):
    assert orchestrator.copy("") is False
    assert orchestrator.copy("   ") is False
    assert clipboard.texts == []


def test_copy_failure_is_swallowed(caplog):
    clipboard = FakeClipboard(error=ClipboardUnavailableError("denied"))
    orchestrator = ConversionOrchestrator(Codec(), ConversionHistory(), clipboard, StepClock())
    with caplog.at_level(logging.WARNING):
        assert orchestrator.copy("SOS") is False
    assert "denied" in caplog.text


def test_unexpected_clipboard_error_is_logged_and_swallowed(caplog):
    clipboard = FakeClipboard(error=OSError("boom"))
    orchestrator = ConversionOrchestrator(Codec(), ConversionHistory(), clipboard, StepClock())
    with caplog.at_level(logging.ERROR):
        assert orchestrator.copy("SOS") is False
    assert "Clipboard write failed" in caplog.text


def test_copy_without_clipboard_writer():
    orchestrator = ConversionOrchestrator(Codec(), ConversionHistory())
    assert orchestrator.copy("SOS") is False


@pytest.mark.parametrize(
    "mode, text, expected, label",
    [
        ("morse→text", "... --- ...", "SOS", "M→T"),
        ("text→morse", "SOS", "... --- ...", "T→M"),
        ("Morse-To-Text", "... --- ...", "SOS", "M→T"),
    ],
)
def test_convert_accepts_arrow_mode_names(orchestrator, mode, text, expected, label):
    result = orchestrator.convert(mode, text)
    assert result.output == expected
    assert result.history_entry.mode.short_label == label


@pytest.mark.parametrize("mode", ["sideways", "", None, "morse", "text->morse"])
def test_unknown_mode_is_rejected(orchestrator, mode):
    with pytest.raises(ValueError):
        orchestrator.convert(mode, "... --- ...")
    with pytest.raises(ValueError):
        orchestrator.swap(mode, "HI", "....")
    assert len(orchestrator.history) == 0


def test_unknown_mode_is_rejected_even_for_blank_input(orchestrator):
    with pytest.raises(ValueError):
        orchestrator.convert("sideways", "   ")


def test_swap_accepts_arrow_mode_names():
    swapped = ConversionOrchestrator.swap("text→morse", "HI", "....")
    assert swapped.mode is ConversionMode.MORSE_TO_TEXT
