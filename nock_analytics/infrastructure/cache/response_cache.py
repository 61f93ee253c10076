"""
Infrastructure Cache - Single-flight TTL cache

Process-lifetime cache for upstream responses. Entries are keyed by a
request signature; concurrent misses for the same key share one load.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, TypeVar

from nock_analytics.domain.ports.cache import CacheResult, request_signature
from nock_analytics.shared import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class _CacheEntry:
    value: Any
    stored_at: float


class SingleFlightResponseCache:
    """TTL cache with a pending-request map for request coalescing."""

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, _CacheEntry] = {}
        self._pending: Dict[str, asyncio.Future] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    async def get_or_load(
        self, key: str, loader: Callable[[], Awaitable[T]]
    ) -> CacheResult[T]:
        now = self._clock()
        entry = self._entries.get(key)
        if entry is not None:
            age = now - entry.stored_at
            if age < self._ttl_seconds:
                logger.debug("cache.hit", key=key, age_seconds=round(age, 3))
                return CacheResult(value=entry.value, cached=True, age_seconds=age)

        pending = self._pending.get(key)
        if pending is not None:
            logger.debug("cache.coalesced", key=key)
            # shield: a cancelled follower must not cancel the shared load
            value = await asyncio.shield(pending)
            return CacheResult(value=value, cached=False, coalesced=True)

        logger.debug("cache.miss", key=key)
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._pending[key] = future
        try:
            value = await loader()
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as exc:
            future.set_exception(exc)
            # followers re-raise it; mark it retrieved for the no-follower case
            future.exception()
            raise
        else:
            self._entries[key] = _CacheEntry(value=value, stored_at=self._clock())
            future.set_result(value)
            return CacheResult(value=value, cached=False)
        finally:
            self._pending.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        logger.info("cache.cleared")
