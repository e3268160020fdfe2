"""Bounded, newest-first scan history."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .constants import DEFAULT_HISTORY_SIZE
from .models import AnalysisResult


class ScanHistory:
    """The most recent analysis results, newest first.

    Adding beyond ``capacity`` evicts the oldest entry. The owner serializes
    access; no locking is done here.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise ValueError(f"History capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self._items: deque[AnalysisResult] = deque(maxlen=capacity)

    def add(self, result: AnalysisResult) -> None:
        self._items.appendleft(result)

    def latest(self) -> Optional[AnalysisResult]:
        return self._items[0] if self._items else None

    def items(self) -> list[AnalysisResult]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    def to_dicts(self) -> list[dict]:
        return [result.to_dict() for result in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[AnalysisResult]:
        return iter(list(self._items))
