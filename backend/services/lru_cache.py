"""Bounded least-recently-used cache for embedding vectors."""

import threading
from collections import OrderedDict

import numpy as np


class EmbeddingCache:
    """Maps raw text to its embedding, evicting the least recently used entry.

    A hit moves the entry to the most-recent end; inserting into a full cache
    drops the entry at the oldest end first, so ``len(cache) <= max_size``
    always holds.
    """

    def __init__(self, max_size: int = 500) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: OrderedDict[str, np.ndarray] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, text: str) -> np.ndarray | None:
        with self._lock:
            vector = self._entries.get(text)
            if vector is not None:
                self._entries.move_to_end(text)
            return vector

    def put(self, text: str, vector: np.ndarray) -> None:
        with self._lock:
            if text in self._entries:
                self._entries.move_to_end(text)
                self._entries[text] = vector
                return
            if len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
            self._entries[text] = vector

    def keys(self) -> list[str]:
        """Keys ordered from least to most recently used."""
        with self._lock:
            return list(self._entries.keys())

    def __contains__(self, text: object) -> bool:
        with self._lock:
            return text in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
