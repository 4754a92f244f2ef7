import pytest

from morseconverter import decode, encode
from morseconverter.codec import Codec, DEFAULT_FORWARD_TABLE, build_symbol_table


@pytest.fixture
def codec():
    return Codec()


def test_encode_sos(codec):
    assert codec.encode("SOS") == "... --- ..."


def test_encode_is_case_insensitive(codec):
    assert codec.encode("sos") == codec.encode("SOS")


def test_encode_drops_unmapped_characters(codec):
    assert codec.encode("Café") == "-.-. .- ..-. ."


def test_encode_folds_accents_to_base_letter(codec):
    assert codec.encode("Caf\u00e9") == codec.encode("Cafe\u0301") == "-.-. .- ..-. ."
    assert codec.encode("ñ~") == "-."
    assert codec.encode("Ünïcödé") == codec.encode("UNICODE")


def test_encode_word_gap(codec):
    assert codec.encode("HI YOU") == ".... .. / -.-- --- ..-"


@pytest.mark.parametrize("text", ["", "#%^", "~", "€£", "\u0301"])
def test_encode_empty_or_unmapped_yields_empty(codec, text):
    assert codec.encode(text) == ""


def test_decode_word_separated(codec):
    assert codec.decode("... --- ... / ... --- ...") == "SOS SOS"


def test_decode_slash_without_spaces(codec):
    assert codec.decode(".../---") == "S O"
    assert codec.decode("...---.../...") == "S"


def test_decode_drops_unknown_tokens(codec):
    assert codec.decode("... ???") == "S"


def test_decode_collapses_and_trims_spaces(codec):
    assert codec.decode("  / .... ..   /  /  .-  / ") == "HI A"


def test_decode_empty(codec):
    assert codec.decode("") == ""
    assert codec.decode("   ") == ""


def test_decode_punctuation(codec):
    assert codec.decode(".-.-.- -..-. .--.-.") == "./@"


def test_round_trip_full_alphabet(codec):
    text = "".join(ch for ch in DEFAULT_FORWARD_TABLE if ch != " ")
    assert codec.decode(codec.encode(text)) == text


@pytest.mark.parametrize(
    "text",
    ["hello world", "Call me at 555-0100!", "(yes); no = \"maybe\"", "a_b $5 @home"],
)
def test_round_trip_representable_text(codec, text):
    assert codec.decode(codec.encode(text)) == text.upper()


def test_module_level_helpers_use_default_table():
    assert encode("SOS") == "... --- ..."
    assert decode("... --- ...") == "SOS"


def test_codec_with_custom_table():
    codec = Codec(build_symbol_table({"A": "-", "B": ".", " ": "/"}))
    assert codec.encode("ab c") == "- . /"
    assert codec.decode("- . / -") == "AB A"
