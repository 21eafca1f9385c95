# buildwrap/utils/window.py
from __future__ import annotations

from collections import deque
from typing import Iterator, List


class BoundedLogWindow:
    """
    Fixed-capacity buffer of the most recent log lines.

    Appending to a full window evicts the oldest line first, so the length
    never exceeds the capacity.
    """

    def __init__(self, capacity: int = 2000):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._lines: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._lines.maxlen

    def append(self, line: str) -> None:
        self._lines.append(line)

    def slice(self, start: int, end: int) -> List[str]:
        return self.lines()[start:end]

    def lines(self) -> List[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, i: int) -> str:
        return self._lines[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"BoundedLogWindow(capacity={self.capacity}, size={len(self)})"
