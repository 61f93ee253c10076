"""Domain port for the response cache used by the dataset use cases."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    Mapping,
    Optional,
    Protocol,
    TypeVar,
)

T = TypeVar("T")


def request_signature(name: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Stable cache key: ``name`` plus the params as sorted, compact JSON."""
    encoded = json.dumps(params or {}, sort_keys=True, separators=(",", ":"))
    return f"{name}:{encoded}"


@dataclass(frozen=True, slots=True)
class CacheResult(Generic[T]):
    """Value returned by the cache together with how it was obtained."""

    value: T
    cached: bool
    age_seconds: float = 0.0
    coalesced: bool = False


class IResponseCache(Protocol):
    """TTL cache keyed by request signature with single-flight loading."""

    async def get_or_load(
        self, key: str, loader: Callable[[], Awaitable[T]]
    ) -> CacheResult[T]:
        """Return a fresh cached value or run ``loader`` once for all callers."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
