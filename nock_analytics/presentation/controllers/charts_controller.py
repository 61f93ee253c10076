"""
Charts Router - Presentation Layer

Chart-ready analytics: the windowed series, its power-law fit, the
forward projection, extrema and pre-formatted stat cards.
"""

from typing import NoReturn

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from nock_analytics.application.dtos.chart_dto import ChartAnalysisDTO
from nock_analytics.application.use_cases.chart_use_cases import (
    GetAddressChartUseCase,
    GetHashrateChartUseCase,
)
from nock_analytics.domain.entities.chart import (
    AxisScale,
    ChartOptions,
    ChartType,
    TimePeriod,
    Visibility,
)
from nock_analytics.domain.entities.errors import (
    DatasetUnavailableError,
    NockBlocksRPCError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/charts", tags=["Charts"])


def _raise_for(dataset: str, error: Exception) -> NoReturn:
    if isinstance(error, NockBlocksRPCError):
        logger.error(f"Failed to fetch {dataset} chart data", error=error.message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(error),
        )
    if isinstance(error, DatasetUnavailableError):
        logger.warning(f"No {dataset} chart data", details=error.details)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(error),
        )
    logger.error(f"Unexpected error building {dataset} chart", error=str(error))
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


@router.get("/hashrate", response_model=ChartAnalysisDTO)
@inject
async def get_hashrate_chart(
    time_period: TimePeriod = Query(TimePeriod.ALL, description="Trailing window"),
    value_scale: AxisScale = Query(AxisScale.LOG, description="Y axis scale"),
    time_scale: AxisScale = Query(AxisScale.LINEAR, description="X axis scale"),
    show_power_law: Visibility = Query(Visibility.SHOW, description="Fit the curve"),
    show_projection: Visibility = Query(
        Visibility.SHOW, description="Project 1000 days ahead"
    ),
    get_hashrate_chart_use_case: GetHashrateChartUseCase = Depends(
        Provide["get_hashrate_chart_use_case"]
    ),
) -> ChartAnalysisDTO:
    """
    Power-law analysis of the network proof rate.

    The fit and projection use the selected window only; the scales are
    echoed back for the renderer.
    """
    options = ChartOptions(
        time_period=time_period,
        value_scale=value_scale,
        time_scale=time_scale,
        show_power_law=show_power_law,
        show_projection=show_projection,
    )
    try:
        return await get_hashrate_chart_use_case.execute(options)
    except Exception as e:
        _raise_for("hashrate", e)


@router.get("/addresses", response_model=ChartAnalysisDTO)
@inject
async def get_address_chart(
    time_period: TimePeriod = Query(TimePeriod.ALL, description="Trailing window"),
    value_scale: AxisScale = Query(AxisScale.LOG, description="Y axis scale"),
    time_scale: AxisScale = Query(AxisScale.LINEAR, description="X axis scale"),
    show_power_law: Visibility = Query(Visibility.SHOW, description="Fit the curve"),
    show_projection: Visibility = Query(
        Visibility.SHOW, description="Project 1000 days ahead"
    ),
    chart_type: ChartType = Query(ChartType.TOTAL, description="Series to draw"),
    get_address_chart_use_case: GetAddressChartUseCase = Depends(
        Provide["get_address_chart_use_case"]
    ),
) -> ChartAnalysisDTO:
    """Power-law analysis of total unique addresses, with active projection."""
    options = ChartOptions(
        time_period=time_period,
        value_scale=value_scale,
        time_scale=time_scale,
        show_power_law=show_power_law,
        show_projection=show_projection,
        chart_type=chart_type,
    )
    try:
        return await get_address_chart_use_case.execute(options)
    except Exception as e:
        _raise_for("address", e)
