from __future__ import annotations

import re
import unicodedata

from .symbol_table import WORD_SEPARATOR, SymbolTable, build_symbol_table


_MULTI_SPACE = re.compile(r" {2,}")


def fold_accents(text: str) -> str:
    # NFKD splits "é" into "e" + U+0301; the combining mark is dropped.
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


class Codec:
    """Text <-> Morse converter bound to one symbol table.

    Both directions are total: characters or tokens without a mapping are
    dropped instead of raising.
    """

    def __init__(self, table: SymbolTable | None = None) -> None:
        self.table = table if table is not None else build_symbol_table()

    def encode(self, text: str) -> str:
        tokens = []
        for char in fold_accents(str(text or "")).upper():
            token = self.table.token_for(char)
            if token:
                tokens.append(token)
        return " ".join(tokens)

    def decode(self, morse: str) -> str:
        expanded = str(morse or "").replace(WORD_SEPARATOR, f" {WORD_SEPARATOR} ")
        chars = []
        for token in expanded.split(" "):
            if token == WORD_SEPARATOR:
                chars.append(" ")
                continue
            char = self.table.char_for(token)
            if char:
                chars.append(char)
        return _MULTI_SPACE.sub(" ", "".join(chars)).strip()


_default_codec: Codec | None = None


def default_codec() -> Codec:
    global _default_codec
    if _default_codec is None:
        _default_codec = Codec()
    return _default_codec


def encode(text: str) -> str:
    return default_codec().encode(text)


def decode(morse: str) -> str:
    return default_codec().decode(morse)
