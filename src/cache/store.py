#!/usr/bin/env python3
"""
Gita Cache Layer
Time-expiring key/value cache over a pluggable storage substrate.

Implements:
- get(key) → payload | None
- set(key, payload) → bool
- clear(prefix) → entries removed
- get_stats() → {hits, misses, writes, evictions, errors}

Entries are JSON envelopes {"data": payload, "timestamp": epoch_ms} stored
under namespace + key. Caching is best-effort: every storage or parse
failure is logged, reported to the on_error observer, and treated as a miss.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .backends import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "bhagavad_gita_"
DEFAULT_TTL_SECONDS = 24 * 60 * 60


@dataclass(eq=False)
class CacheError(Exception):
    """A swallowed cache failure, handed to the on_error observer."""
    operation: str
    key: Optional[str]
    cause: BaseException

    def __str__(self) -> str:
        target = f" {self.key}" if self.key else ""
        return f"cache {self.operation}{target} failed: {self.cause}"


class CacheStore:
    """
    Expiring cache with no in-memory shadow state.

    Every call round-trips through the backend, so two stores over the same
    substrate always agree.
    """

    def __init__(
        self,
        backend: KeyValueStore,
        namespace: str = DEFAULT_NAMESPACE,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
        on_error: Optional[Callable[[CacheError], None]] = None,
    ):
        self.backend = backend
        self.namespace = namespace
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._on_error = on_error

        self.stats = {
            "hits": 0,
            "misses": 0,
            "writes": 0,
            "evictions": 0,
            "errors": 0,
        }

        logger.info(f"CacheStore initialized (namespace={namespace}, ttl={ttl_seconds}s)")

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    def _report(self, operation: str, key: Optional[str], cause: BaseException) -> None:
        error = CacheError(operation, key, cause)
        self.stats["errors"] += 1
        logger.error(f"Cache {operation} error: {error}")
        if self._on_error is not None:
            self._on_error(error)

    def get(self, key: str) -> Optional[Any]:
        """Return the cached payload, or None when absent, malformed or expired."""
        full_key = self._full_key(key)

        try:
            raw = self.backend.get(full_key)
            if raw is None:
                self.stats["misses"] += 1
                return None

            entry = json.loads(raw)
            if not isinstance(entry, dict) or "data" not in entry or "timestamp" not in entry:
                raise ValueError("entry is not a {data, timestamp} envelope")

            age_ms = self._now_ms() - int(entry["timestamp"])
            if age_ms > self.ttl_seconds * 1000:
                self.backend.remove(full_key)
                self.stats["evictions"] += 1
                self.stats["misses"] += 1
                logger.debug(f"Cache expired: {full_key} (age={age_ms // 1000}s)")
                return None

            self.stats["hits"] += 1
            logger.debug(f"Cache hit: {full_key}")
            return entry["data"]

        except Exception as e:  # noqa: BLE001
            self.stats["misses"] += 1
            self._report("get", full_key, e)
            return None

    def set(self, key: str, payload: Any) -> bool:
        """Store payload stamped with the current time. Returns False on failure."""
        full_key = self._full_key(key)

        try:
            entry = json.dumps({"data": payload, "timestamp": self._now_ms()})
            self.backend.set(full_key, entry)
            self.stats["writes"] += 1
            logger.debug(f"Cached {full_key} (ttl={self.ttl_seconds}s)")
            return True

        except Exception as e:  # noqa: BLE001
            self._report("set", full_key, e)
            return False

    def clear(self, prefix: str = "") -> int:
        """Remove every entry under namespace + prefix. Other keys are left alone."""
        match = self._full_key(prefix)
        cleared = 0

        try:
            for stored_key in self.backend.keys():
                if stored_key.startswith(match):
                    self.backend.remove(stored_key)
                    cleared += 1
        except Exception as e:  # noqa: BLE001
            self._report("clear", match, e)

        self.stats["evictions"] += cleared
        logger.info(f"Cleared {cleared} cache entries matching {match}")
        return cleared

    def get_stats(self) -> Dict[str, Any]:
        total_requests = self.stats["hits"] + self.stats["misses"]
        hit_rate = (self.stats["hits"] / total_requests * 100) if total_requests > 0 else 0

        return {
            **self.stats,
            "total_requests": total_requests,
            "hit_rate_percent": round(hit_rate, 1),
        }
