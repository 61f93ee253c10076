"""Infrastructure implementation of the NockBlocks health check."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Any, Optional

from nock_analytics.domain.entities.errors import NockBlocksRPCError
from nock_analytics.domain.entities.health import ServiceStatus, SystemHealth
from nock_analytics.domain.gateways.nockblocks_gateway import INockBlocksGateway
from nock_analytics.domain.ports.health_check import IHealthCheckService
from nock_analytics.shared import get_logger

logger = get_logger(__name__)


def _height(tip: Any) -> Optional[int]:
    height = tip.get("height") if isinstance(tip, dict) else None
    return height if isinstance(height, int) and not isinstance(height, bool) else None


class HealthCheckService(IHealthCheckService):
    """Call ``getTip`` under a timeout; the outcome is the service status."""

    def __init__(
        self,
        nockblocks_gateway: INockBlocksGateway,
        rpc_url: str,
        *,
        timeout_seconds: float = 5.0,
    ) -> None:
        self._gateway = nockblocks_gateway
        self._rpc_url = rpc_url
        self._timeout_seconds = timeout_seconds

    async def evaluate(self) -> SystemHealth:
        if not self._rpc_url:
            return SystemHealth(
                status=ServiceStatus.UNKNOWN,
                message="NockBlocks RPC URL not configured.",
            )

        start = perf_counter()
        try:
            tip = await asyncio.wait_for(
                self._gateway.get_tip(), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning("health.nockblocks.timeout", url=self._rpc_url)
            return SystemHealth(
                status=ServiceStatus.DEGRADED,
                latency_ms=self._elapsed_ms(start),
                message=f"getTip timed out after {self._timeout_seconds}s",
            )
        except NockBlocksRPCError as exc:
            logger.warning(
                "health.nockblocks.failed", url=self._rpc_url, error=str(exc)
            )
            return SystemHealth(
                status=ServiceStatus.DOWN,
                latency_ms=self._elapsed_ms(start),
                message=f"getTip failed: {exc}",
            )

        return SystemHealth(
            status=ServiceStatus.UP,
            tip_height=_height(tip),
            latency_ms=self._elapsed_ms(start),
        )

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return (perf_counter() - start) * 1000
