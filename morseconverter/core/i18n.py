"""UI string catalogs for the window chrome.

Source strings are English. Other languages are offered only when a compiled
``morseconverter_<lang>.qm`` catalog is present in the translations directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QTranslator


logger = logging.getLogger(__name__)

SOURCE_LANGUAGE = "en"
CATALOG_PREFIX = "morseconverter_"
TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "resources" / "i18n"

LANGUAGE_NAMES = {
    "en": "English",
    "zh": "简体中文",
}


def normalize_language(value) -> str:
    text = str(value or "").strip().lower().replace("-", "_")
    if not text:
        return SOURCE_LANGUAGE
    return text.split("_", 1)[0]


def available_languages(directory: Path | None = None) -> list[str]:
    directory = Path(directory or TRANSLATIONS_DIR)
    languages = [SOURCE_LANGUAGE]
    if directory.is_dir():
        for path in sorted(directory.glob(f"{CATALOG_PREFIX}*.qm")):
            lang = normalize_language(path.stem[len(CATALOG_PREFIX):])
            if lang not in languages:
                languages.append(lang)
    return languages


def language_name(lang: str) -> str:
    return LANGUAGE_NAMES.get(lang, lang)


def build_translator(language, directory: Path | None = None) -> QTranslator | None:
    lang = normalize_language(language)
    if lang == SOURCE_LANGUAGE:
        return None

    directory = directory or TRANSLATIONS_DIR
    translator = QTranslator()
    if not translator.load(f"{CATALOG_PREFIX}{lang}", str(directory)):
        logger.info("No UI catalog for language %s in %s, using source strings", lang, directory)
        return None
    return translator
