"""Use cases for health and application info endpoints."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from nock_analytics.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from nock_analytics.application.models import SystemInfo
from nock_analytics.domain.entities.health import ApplicationInfo
from nock_analytics.domain.ports.health_check import IHealthCheckService


def redact_url(url: str) -> str:
    """Drop ``user:password@`` from ``url``."""
    parsed = urlsplit(url)
    if not (parsed.username or parsed.password):
        return url

    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = f"{netloc}:{parsed.port}"
    return urlunsplit(parsed._replace(netloc=netloc))


class GetHealthStatusUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(await self._health_check_service.evaluate())


class GetApplicationInfoUseCase:
    """Static build info plus uptime and a fresh upstream check."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now

        return ApplicationInfoDTO.from_domain(
            ApplicationInfo(
                name=self._info.title,
                version=self._info.version,
                environment=self._info.environment,
                git_commit=self._info.git_commit,
                build_time=self._info.build_time,
                started_at=started,
                uptime_seconds=max(0.0, (now - started).total_seconds()),
                rpc_url=redact_url(self._info.nockblocks_rpc_url),
                cache_ttl_seconds=self._info.cache_ttl_seconds,
                health=health,
            )
        )
