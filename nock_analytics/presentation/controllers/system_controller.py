"""
System Router - Presentation Layer

/health answers 200 whatever the upstream state; the body carries the
``getTip`` check result so load balancers and dashboards can tell apart
"API down" from "NockBlocks down".
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request

from nock_analytics.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from nock_analytics.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from nock_analytics.domain.entities.health import ServiceStatus

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Check NockBlocks with ``getTip``."""
    result = await get_health_status_use_case.execute()
    if result.status is not ServiceStatus.UP:
        logger.warning(
            "NockBlocks check failed", status=result.status.value, reason=result.message
        )
    return result


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Build metadata, uptime and the current check result."""
    started_at = getattr(request.app.state, "started_at", None)
    return await get_application_info_use_case.execute(started_at)
