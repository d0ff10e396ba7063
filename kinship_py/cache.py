"""Process-wide memoization of kinship responses.

Keys are ``(language, speaker_gender, chain_tuple)``; chain equality is exact
and ordered. The cache is unbounded unless `max_entries` is given, in which
case the least recently used entry is evicted first.
"""
from __future__ import annotations
from collections import OrderedDict
from typing import Callable, Dict, Hashable, Optional, Tuple
import logging
import threading

from .models import Gender, KinshipResponse, Language, RelationStep

CacheKey = Tuple[Language, Gender, Tuple[RelationStep, ...]]


def make_key(language: Language, speaker_gender: Gender, chain) -> CacheKey:
    return (language, speaker_gender, tuple(chain))


class ResponseCache:
    def __init__(self, max_entries: Optional[int] = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be a positive integer or None")
        self.max_entries = max_entries
        # guards _entries and the counters; values are inserted fully built
        self._lock = threading.RLock()
        self._entries: "OrderedDict[Hashable, KinshipResponse]" = OrderedDict()
        self._hits = 0
        self._misses = 0

    def get(self, key: Hashable) -> Optional[KinshipResponse]:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
                return None
            self._hits += 1
            if self.max_entries is not None:
                self._entries.move_to_end(key)
            return value

    def put(self, key: Hashable, value: KinshipResponse) -> None:
        with self._lock:
            # last writer wins; identical keys always carry identical values
            self._entries[key] = value
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    logging.debug("kinship cache evicted %s", evicted)

    def get_or_build(self, key: Hashable, factory: Callable[[], KinshipResponse]) -> KinshipResponse:
        """Return the cached value for key, building and inserting it on a miss.

        The factory runs outside the lock, so two threads missing on the same
        key may both build; both results are equal and the second insert wins.
        """
        cached = self.get(key)
        if cached is not None:
            logging.debug("kinship cache hit %s", key)
            return cached
        logging.debug("kinship cache miss %s", key)
        value = factory()
        self.put(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"hits": self._hits, "misses": self._misses, "size": len(self._entries)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries
