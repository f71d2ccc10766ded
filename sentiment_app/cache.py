"""Raw-score memoization keyed by the literal input text."""
from __future__ import annotations

from collections import OrderedDict
from typing import Optional


class ScoreCache:
    """Least-recently-used map of text -> raw combined score.

    ``maxsize=None`` keeps every entry. The read-check-then-write sequence in
    the engine is not atomic; share an instance across threads only behind a
    lock.
    """

    def __init__(self, maxsize: Optional[int] = None):
        if maxsize is not None and maxsize < 0:
            raise ValueError("maxsize must be None or >= 0")
        self.maxsize = maxsize
        self._entries: "OrderedDict[str, float]" = OrderedDict()

    def get(self, text: str) -> Optional[float]:
        score = self._entries.get(text)
        if score is not None:
            self._entries.move_to_end(text)
        return score

    def put(self, text: str, score: float) -> None:
        if self.maxsize == 0:
            return
        self._entries[text] = score
        self._entries.move_to_end(text)
        if self.maxsize is not None:
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, text: object) -> bool:
        return text in self._entries

    def __len__(self) -> int:
        return len(self._entries)
