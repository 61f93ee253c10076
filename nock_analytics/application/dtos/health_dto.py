"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from nock_analytics.domain.entities.health import (
    ApplicationInfo,
    ServiceStatus,
    SystemHealth,
)


class SystemHealthDTO(BaseModel):
    """Result of the NockBlocks ``getTip`` check."""

    status: ServiceStatus = Field(description="Service status, taken from the check")
    checked_at: datetime = Field(description="When the check ran")
    tip_height: Optional[int] = Field(
        default=None, description="Chain height reported by getTip"
    )
    latency_ms: Optional[float] = Field(default=None, description="Check latency")
    message: Optional[str] = Field(
        default=None, description="Why the check did not succeed"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            checked_at=health.checked_at,
            tip_height=health.tip_height,
            latency_ms=health.latency_ms,
            message=health.message,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "checked_at": "2025-06-17T12:00:00Z",
                "tip_height": 21000,
                "latency_ms": 184.2,
                "message": None,
            }
        }
    }


class ApplicationInfoDTO(BaseModel):
    """Build metadata, uptime and upstream configuration."""

    name: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    rpc_url: str = Field(description="NockBlocks endpoint, credentials removed")
    cache_ttl_seconds: float = Field(description="Response cache time-to-live")
    health: SystemHealthDTO

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            rpc_url=info.rpc_url,
            cache_ttl_seconds=info.cache_ttl_seconds,
            health=SystemHealthDTO.from_domain(info.health),
        )
