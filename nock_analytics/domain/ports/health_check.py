"""Domain port for health checks."""

from __future__ import annotations

from typing import Protocol

from nock_analytics.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Interface for probing the NockBlocks RPC endpoint."""

    async def evaluate(self) -> SystemHealth:
        """Run one check; upstream failures are reported, never raised."""
        ...
