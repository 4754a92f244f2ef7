import logging

from morseconverter.codec import ConversionMode
from morseconverter.core.metadata import APP_VERSION
from utils.config_manager import ConfigManager


def test_defaults_written_on_first_run(config_manager):
    assert config_manager.get_current_version() == APP_VERSION
    assert config_manager.get_language() == "en"
    assert config_manager.get_font_size() == ConfigManager.DEFAULT_FONT_SIZE
    assert config_manager.get_last_mode() is ConversionMode.TEXT_TO_MORSE
    assert config_manager.get_copy_feedback_ms() == 1200


def test_values_persist_across_instances(qapp, tmp_path):
    db_dir = str(tmp_path / "cfg")
    first = ConfigManager(db_dir=db_dir)
    first.set_last_mode(ConversionMode.MORSE_TO_TEXT)
    first.set_font_size(18)
    first.set_language("en_GB")
    first.sync()

    second = ConfigManager(db_dir=db_dir)
    assert second.get_last_mode() is ConversionMode.MORSE_TO_TEXT
    assert second.get_font_size() == 18
    assert second.get_language() == "en"


def test_unknown_language_falls_back_to_english(config_manager):
    config_manager.set_language("klingon")
    assert config_manager.get_language() == "en"


def test_bad_values_are_coerced_or_defaulted(config_manager, caplog):
    config_manager.set_value("Setting/font_size", "huge")
    with caplog.at_level(logging.WARNING):
        assert config_manager.get_font_size() == ConfigManager.DEFAULT_FONT_SIZE
    assert "Setting/font_size" in caplog.text

    config_manager.set_value("Converter/last_mode", "sideways")
    assert config_manager.get_last_mode() is ConversionMode.TEXT_TO_MORSE


def test_copy_feedback_is_clamped(config_manager):
    config_manager.set_copy_feedback_ms(5)
    assert config_manager.get_copy_feedback_ms() == 200
    config_manager.set_copy_feedback_ms(999999)
    assert config_manager.get_copy_feedback_ms() == 10000


def test_conversion_mode_helpers():
    assert ConversionMode.TEXT_TO_MORSE.toggled() is ConversionMode.MORSE_TO_TEXT
    assert ConversionMode.MORSE_TO_TEXT.toggled() is ConversionMode.TEXT_TO_MORSE
    assert ConversionMode.TEXT_TO_MORSE.short_label == "T→M"
    assert ConversionMode.MORSE_TO_TEXT.short_label == "M→T"
    assert ConversionMode.parse(" Morse-To-Text ") is ConversionMode.MORSE_TO_TEXT
    assert ConversionMode.parse(None, ConversionMode.MORSE_TO_TEXT) is ConversionMode.MORSE_TO_TEXT


def test_language_without_catalog_is_not_offered(qapp, tmp_path):
    manager = ConfigManager(db_dir=str(tmp_path / "cfg"), translations_dir=tmp_path / "i18n")
    assert manager.available_languages() == ["en"]

    manager.set_language("zh")
    assert manager.get_language() == "en"

    manager.set_value("Setting/language", "zh")
    assert manager.get_language() == "en"


def test_language_with_catalog_is_offered(qapp, tmp_path):
    i18n_dir = tmp_path / "i18n"
    i18n_dir.mkdir()
    (i18n_dir / "morseconverter_zh.qm").write_bytes(b"")

    manager = ConfigManager(db_dir=str(tmp_path / "cfg"), translations_dir=i18n_dir)
    assert manager.available_languages() == ["en", "zh"]

    manager.set_language("zh-CN")
    assert manager.get_language() == "zh"
