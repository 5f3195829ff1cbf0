"""Least-recently-used cache for extraction results.

The cache is an explicit object handed to whoever needs it, so separate
pipeline instances never share entries.  Access is serialised with a lock
because the async batch orchestrator runs items in worker threads.
"""

from __future__ import annotations

import hashlib
import json
import re
import threading
from collections import OrderedDict
from typing import Optional

from pydantic import BaseModel, Field

from aears.processor.models import ExtractionResult, ProcessingOptions


DEFAULT_MAX_SIZE = 100


class CacheStats(BaseModel):
    """Hit/miss counters and occupancy of a :class:`ResultCache`."""
    hits: int = Field(default=0, ge=0)
    misses: int = Field(default=0, ge=0)
    size: int = Field(default=0, ge=0)
    max_size: int = Field(default=DEFAULT_MAX_SIZE, ge=0)
    hit_rate: float = Field(default=0.0, ge=0.0, le=1.0)


def generate_cache_key(text: str, options: Optional[ProcessingOptions] = None) -> str:
    """Build a deterministic key from the input text and options.

    Format: ``"{len(text)}_{text[:50]}_{digest}_{options_json}"``.  The readable
    prefix has every run of whitespace collapsed to ``_``; ``digest`` is the
    SHA-256 of the full text, so documents sharing a prefix or differing only
    in whitespace get distinct keys.  ``options_json`` is compact JSON with
    sorted keys and unset options omitted.
    """
    options_str = ""
    if options is not None:
        options_str = json.dumps(
            options.model_dump(mode="json", exclude_none=True),
            sort_keys=True,
            separators=(",", ":"),
        )
    prefix = re.sub(r"\s+", "_", f"{len(text)}_{text[:50]}")
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return f"{prefix}_{digest}_{options_str}"


class ResultCache:
    """Thread-safe LRU cache of :class:`ExtractionResult` objects.

    The cache starts disabled; while disabled, lookups return ``None`` without
    counting a miss and stores are ignored.
    """

    def __init__(self) -> None:
        self._entries: OrderedDict[str, ExtractionResult] = OrderedDict()
        self._lock = threading.Lock()
        self._enabled = False
        self._max_size = DEFAULT_MAX_SIZE
        self._hits = 0
        self._misses = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        """Enable caching with room for *max_size* entries, starting empty."""
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        with self._lock:
            self._enabled = True
            self._max_size = max_size
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def disable(self) -> None:
        with self._lock:
            self._enabled = False
            self._entries.clear()

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def get(self, key: str) -> Optional[ExtractionResult]:
        """Return a copy of the cached result for *key*, marking it most recently used.

        Callers get their own copy, so mutating it never alters later hits.
        """
        with self._lock:
            if not self._enabled:
                return None
            result = self._entries.get(key)
            if result is None:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return result.model_copy(deep=True)

    def set(self, key: str, result: ExtractionResult) -> None:
        """Store *result*, evicting the least recently used entry when full."""
        with self._lock:
            if not self._enabled or self._max_size == 0:
                return
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self._max_size:
                self._entries.popitem(last=False)
            self._entries[key] = result.model_copy(deep=True)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> CacheStats:
        with self._lock:
            total = self._hits + self._misses
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._entries),
                max_size=self._max_size,
                hit_rate=self._hits / total if total else 0.0,
            )
