"""Reachability of the NockBlocks RPC endpoint, reported by /health and /info."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class ServiceStatus(str, Enum):
    UP = "up"
    # getTip answered after the check timeout
    DEGRADED = "degraded"
    DOWN = "down"
    # no RPC URL configured
    UNKNOWN = "unknown"


@dataclass(slots=True)
class SystemHealth:
    """Outcome of a single ``getTip`` check."""

    status: ServiceStatus
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tip_height: Optional[int] = None
    latency_ms: Optional[float] = None
    message: Optional[str] = None


@dataclass(slots=True)
class ApplicationInfo:
    name: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    rpc_url: str
    cache_ttl_seconds: float
    health: SystemHealth
