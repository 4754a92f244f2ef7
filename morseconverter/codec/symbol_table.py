"""Character <-> Morse token mapping shared by both conversion directions."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping


WORD_SEPARATOR = "/"

DEFAULT_FORWARD_TABLE: Mapping[str, str] = MappingProxyType({
    # Letters
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-",
    "L": ".-..", "M": "--", "N": "-.", "O": "---", "P": ".--.",
    "Q": "--.-", "R": ".-.", "S": "...", "T": "-", "U": "..-",
    "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--", "Z": "--..",

    # Digits
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",

    # Punctuation
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.", "!": "-.-.--",
    "/": "-..-.", "(": "-.--.", ")": "-.--.-", "&": ".-...", ":": "---...",
    ";": "-.-.-.", "=": "-...-", "+": ".-.-.", "-": "-....-", "_": "..--.-",
    '"': ".-..-.", "$": "...-..-", "@": ".--.-.",

    # Word gap
    " ": WORD_SEPARATOR,
})


@dataclass(frozen=True)
class SymbolTable:
    """Read-only forward/reverse lookup pair."""

    forward: Mapping[str, str]
    reverse: Mapping[str, str] = field(repr=False)

    def token_for(self, char: str) -> str | None:
        return self.forward.get(char)

    def char_for(self, token: str) -> str | None:
        return self.reverse.get(token)

    def items(self):
        return self.forward.items()

    def __contains__(self, char: object) -> bool:
        return char in self.forward

    def __iter__(self) -> Iterator[str]:
        return iter(self.forward)

    def __len__(self) -> int:
        return len(self.forward)


def invert_table(forward: Mapping[str, str]) -> dict[str, str]:
    # Duplicate tokens are last-write-wins; the default table has none.
    reverse: dict[str, str] = {}
    for char, token in forward.items():
        reverse[token] = char
    return reverse


def build_symbol_table(forward: Mapping[str, str] | None = None) -> SymbolTable:
    source = dict(DEFAULT_FORWARD_TABLE if forward is None else forward)
    return SymbolTable(
        forward=MappingProxyType(source),
        reverse=MappingProxyType(invert_table(source)),
    )
