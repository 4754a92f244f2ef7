from __future__ import annotations

from typing import Iterator

from .models import ConversionRecord


class ConversionHistory:
    """Most-recent-first log of conversions, capped at ``max_entries``."""

    MAX_ENTRIES = 10

    def __init__(self, max_entries: int = MAX_ENTRIES) -> None:
        self.max_entries = max(1, int(max_entries))
        self._entries: list[ConversionRecord] = []

    @property
    def entries(self) -> tuple[ConversionRecord, ...]:
        return tuple(self._entries)

    def add(self, record: ConversionRecord) -> None:
        self._entries = [record, *self._entries][: self.max_entries]

    def clear(self) -> None:
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConversionRecord]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> ConversionRecord:
        return self._entries[index]

    def __bool__(self) -> bool:
        return bool(self._entries)
