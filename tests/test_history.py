from datetime import datetime

from morseconverter.codec import ConversionHistory, ConversionMode, ConversionRecord


def _record(n):
    return ConversionRecord(
        mode=ConversionMode.TEXT_TO_MORSE,
        input_text=f"in{n}",
        output_text=f"out{n}",
        created_at=datetime(2024, 1, 1, 0, 0, n),
    )


def test_new_history_is_empty():
    history = ConversionHistory()
    assert len(history) == 0
    assert not history
    assert history.entries == ()


def test_add_prepends():
    history = ConversionHistory()
    history.add(_record(1))
    history.add(_record(2))
    assert [r.input_text for r in history] == ["in2", "in1"]
    assert history[0].input_text == "in2"


def test_cap_evicts_oldest():
    history = ConversionHistory()
    for n in range(11):
        history.add(_record(n))
    assert len(history) == ConversionHistory.MAX_ENTRIES == 10
    assert [r.input_text for r in history] == [f"in{n}" for n in range(10, 0, -1)]


def test_custom_cap():
    history = ConversionHistory(max_entries=2)
    for n in range(5):
        history.add(_record(n))
    assert [r.input_text for r in history] == ["in4", "in3"]


def test_entries_snapshot_is_not_live():
    history = ConversionHistory()
    history.add(_record(1))
    snapshot = history.entries
    history.add(_record(2))
    assert len(snapshot) == 1


def test_clear():
    history = ConversionHistory()
    history.add(_record(1))
    history.clear()
    assert len(history) == 0
