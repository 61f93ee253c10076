"""Use cases for the chart analysis endpoints."""

from typing import Callable, Optional

import structlog

from nock_analytics.application.dtos.chart_dto import (
    ChartAnalysisDTO,
    ChartSummaryDTO,
)
from nock_analytics.application.use_cases.dataset_use_cases import (
    GetAddressGrowthUseCase,
    GetHashrateUseCase,
)
from nock_analytics.domain.entities.analytics import SeriesAnalysis
from nock_analytics.domain.entities.chain import AddressSnapshot, HashrateSnapshot
from nock_analytics.domain.entities.chart import ChartOptions, DatasetProfile
from nock_analytics.domain.services.formatting import (
    format_count,
    format_growth_factor,
    format_hashrate,
    format_r2,
)
from nock_analytics.domain.services.series_analysis import analyze_series

logger = structlog.get_logger(__name__)


def _format_optional(point, formatter: Callable[[float], str]) -> Optional[str]:
    return formatter(point.value) if point is not None else None


def _log_analysis(profile: DatasetProfile, analysis: SeriesAnalysis) -> None:
    regression = analysis.regression
    logger.info(
        "chart.analysis.completed",
        dataset=profile.name,
        total_points=len(analysis.points),
        window_points=len(analysis.window),
        r2=regression.r2 if regression else None,
        projection_points=len(analysis.projection),
    )


class GetHashrateChartUseCase:
    """Power-law analysis of the proof-rate history."""

    def __init__(self, hashrate_use_case: GetHashrateUseCase, profile: DatasetProfile):
        self.hashrate_use_case = hashrate_use_case
        self.profile = profile

    def _summary(
        self, snapshot: HashrateSnapshot, analysis: SeriesAnalysis
    ) -> ChartSummaryDTO:
        return ChartSummaryDTO(
            current_value=format_hashrate(snapshot.current_hashrate),
            all_time_high=_format_optional(analysis.extrema.maximum, format_hashrate),
            all_time_low=_format_optional(analysis.extrema.minimum, format_hashrate),
            data_points=format_count(snapshot.total_points),
            growth_factor=format_growth_factor(snapshot.growth_factor),
            power_law_r2=(
                format_r2(analysis.regression.r2) if analysis.regression else None
            ),
        )

    async def execute(
        self, options: ChartOptions, now_ms: Optional[int] = None
    ) -> ChartAnalysisDTO:
        result = await self.hashrate_use_case.load()
        snapshot = result.value
        analysis = analyze_series(snapshot.points, self.profile, options, now_ms)
        _log_analysis(self.profile, analysis)

        return ChartAnalysisDTO.from_domain(
            analysis,
            self.profile,
            options,
            summary=self._summary(snapshot, analysis),
            cached=result.cached,
        )


class GetAddressChartUseCase:
    """Power-law analysis of total unique addresses, with active projection."""

    def __init__(
        self, address_use_case: GetAddressGrowthUseCase, profile: DatasetProfile
    ):
        self.address_use_case = address_use_case
        self.profile = profile

    def _summary(
        self, snapshot: AddressSnapshot, analysis: SeriesAnalysis
    ) -> ChartSummaryDTO:
        latest = snapshot.latest_window
        return ChartSummaryDTO(
            current_value=format_count(snapshot.current_addresses),
            all_time_high=_format_optional(analysis.extrema.maximum, format_count),
            data_points=format_count(snapshot.total_points),
            growth_factor=format_growth_factor(snapshot.growth_factor),
            power_law_r2=(
                format_r2(analysis.regression.r2) if analysis.regression else None
            ),
            new_addresses=format_count(latest.new_addresses) if latest else None,
            active_addresses=format_count(latest.active_addresses) if latest else None,
        )

    async def execute(
        self, options: ChartOptions, now_ms: Optional[int] = None
    ) -> ChartAnalysisDTO:
        result = await self.address_use_case.load()
        snapshot = result.value
        analysis = analyze_series(snapshot.points, self.profile, options, now_ms)
        _log_analysis(self.profile, analysis)

        return ChartAnalysisDTO.from_domain(
            analysis,
            self.profile,
            options,
            summary=self._summary(snapshot, analysis),
            cached=result.cached,
        )
