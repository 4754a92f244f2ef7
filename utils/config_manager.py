import logging
import os

from PySide6.QtCore import QLocale, QSettings

from morseconverter.codec.models import ConversionMode
from morseconverter.core.i18n import SOURCE_LANGUAGE, available_languages, normalize_language
from morseconverter.core.metadata import APP_VERSION


logger = logging.getLogger(__name__)


class ConfigManager:
    DEFAULT_FONT_SIZE = 13
    DEFAULT_COPY_FEEDBACK_MS = 1200

    def __init__(self, config_file="config.ini", db_dir="resources/config", translations_dir=None):
        self.config_file = os.path.join(db_dir, config_file)
        self.translations_dir = translations_dir
        os.makedirs(db_dir, exist_ok=True)
        self.settings = QSettings(self.config_file, QSettings.IniFormat)
        self.initialize_config()

    def initialize_config(self):
        """Ensure all required keys exist with sensible defaults."""
        default_values = {
            "Version/current_version": APP_VERSION,
            "Setting/language": self._detect_default_language(),
            "Setting/font_size": self.DEFAULT_FONT_SIZE,
            "Converter/last_mode": ConversionMode.TEXT_TO_MORSE.value,
            "Converter/copy_feedback_ms": self.DEFAULT_COPY_FEEDBACK_MS,
        }

        for key, value in default_values.items():
            if not self.settings.contains(key):
                self.set_value(key, value)
        self.settings.sync()

    def available_languages(self):
        return available_languages(self.translations_dir)

    def _detect_default_language(self) -> str:
        """Pick language for first run from system locale, if a catalog ships for it."""
        try:
            locale_name = str(QLocale.system().name() or "")
        except Exception:
            locale_name = ""

        lang = normalize_language(locale_name)
        if lang in self.available_languages():
            return lang
        return SOURCE_LANGUAGE

    @staticmethod
    def _as_bool(value, default=False):
        if isinstance(value, bool):
            return value
        if value is None:
            return default
        return str(value).strip().lower() in ("true", "1", "yes", "on")

    def get_value(self, key, default=None, value_type=str):
        """Read config value and safely coerce type."""
        try:
            self.settings.sync()
            value = self.settings.value(key, default)
            if value is None:
                return default
            if value_type == bool:
                return self._as_bool(value, default if isinstance(default, bool) else False)
            if value_type == int:
                return int(float(value))
            if value_type == float:
                return float(value)
            if value_type == str:
                return str(value).strip().strip('"').strip("'")
            return value_type(value)
        except Exception as e:
            logger.warning("Failed to read config key %s: %s", key, e)
            return default

    def set_value(self, key, value):
        if value is None:
            value = ""
        self.settings.setValue(key, value)

    def sync(self):
        self.settings.sync()

    # Version
    def get_current_version(self):
        return self.get_value("Version/current_version", APP_VERSION, str)

    def set_current_version(self, value):
        self.set_value("Version/current_version", value)

    # General settings
    def get_language(self):
        value = normalize_language(self.get_value("Setting/language", SOURCE_LANGUAGE, str))
        return value if value in self.available_languages() else SOURCE_LANGUAGE

    def set_language(self, value):
        value = normalize_language(value)
        if value not in self.available_languages():
            logger.info("No UI catalog for language %s, keeping %s", value, SOURCE_LANGUAGE)
            value = SOURCE_LANGUAGE
        self.set_value("Setting/language", value)

    def get_font_size(self):
        value = self.get_value("Setting/font_size", self.DEFAULT_FONT_SIZE, int)
        return max(8, min(36, value))

    def set_font_size(self, value):
        self.set_value("Setting/font_size", int(value))

    # Converter
    def get_last_mode(self):
        return ConversionMode.parse(self.get_value("Converter/last_mode", "", str))

    def set_last_mode(self, mode):
        self.set_value("Converter/last_mode", ConversionMode.parse(mode).value)

    def get_copy_feedback_ms(self):
        value = self.get_value("Converter/copy_feedback_ms", self.DEFAULT_COPY_FEEDBACK_MS, int)
        return max(200, min(10000, value))

    def set_copy_feedback_ms(self, value):
        self.set_value("Converter/copy_feedback_ms", int(value))
