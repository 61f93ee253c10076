"""DTOs for the chart analysis endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from nock_analytics.domain.entities.analytics import (
    FitPoint,
    ProjectionPoint,
    RegressionResult,
    SeriesAnalysis,
)
from nock_analytics.domain.entities.chart import (
    AxisScale,
    ChartOptions,
    ChartType,
    DatasetProfile,
    TimePeriod,
    Visibility,
)
from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint
from nock_analytics.domain.services.regression import days_since_genesis


class ChartPointDTO(BaseModel):
    """Observed point positioned on both chart axes."""

    timestamp: int = Field(description="Epoch milliseconds")
    days_since_genesis: int = Field(description="Day index used on the log time axis")
    value: float = Field(description="Observed value")
    active_addresses: Optional[int] = Field(
        default=None, description="Active addresses in the window (addresses only)"
    )

    @classmethod
    def from_domain(cls, point: TimePoint, genesis_ms: int) -> "ChartPointDTO":
        active = point.active_addresses if isinstance(point, AddressPoint) else None
        return cls(
            timestamp=point.timestamp,
            days_since_genesis=days_since_genesis(point.timestamp, genesis_ms),
            value=point.value,
            active_addresses=active,
        )


class RegressionDTO(BaseModel):
    a: float = Field(description="Scale coefficient of y = a * x^b")
    b: float = Field(description="Exponent of y = a * x^b")
    r2: float = Field(description="Coefficient of determination in log-log space")

    @classmethod
    def from_domain(cls, regression: RegressionResult) -> "RegressionDTO":
        return cls(a=regression.a, b=regression.b, r2=regression.r2)


class FitPointDTO(BaseModel):
    timestamp: int
    days_since_genesis: int
    fitted_value: float

    @classmethod
    def from_domain(cls, point: FitPoint) -> "FitPointDTO":
        return cls(
            timestamp=point.timestamp,
            days_since_genesis=point.days_since_genesis,
            fitted_value=point.fitted_value,
        )


class ProjectionPointDTO(BaseModel):
    timestamp: int
    days_since_genesis: int
    projected_value: float
    projected_active: Optional[float] = None

    @classmethod
    def from_domain(cls, point: ProjectionPoint) -> "ProjectionPointDTO":
        return cls(
            timestamp=point.timestamp,
            days_since_genesis=point.days_since_genesis,
            projected_value=point.projected_value,
            projected_active=point.projected_active,
        )


class ExtremaDTO(BaseModel):
    all_time_high: Optional[ChartPointDTO] = Field(
        default=None, description="Highest value inside the window"
    )
    all_time_low: Optional[ChartPointDTO] = Field(
        default=None, description="Lowest value inside the window, when tracked"
    )


class ChartOptionsDTO(BaseModel):
    """Options echoed back so the client can render the axes."""

    time_period: TimePeriod
    value_scale: AxisScale
    time_scale: AxisScale
    show_power_law: Visibility
    show_projection: Visibility
    chart_type: Optional[ChartType] = None

    @classmethod
    def from_domain(cls, options: ChartOptions) -> "ChartOptionsDTO":
        return cls(
            time_period=options.time_period,
            value_scale=options.value_scale,
            time_scale=options.time_scale,
            show_power_law=options.show_power_law,
            show_projection=options.show_projection,
            chart_type=options.chart_type,
        )


class ChartSummaryDTO(BaseModel):
    """Pre-formatted stat cards shown above a chart."""

    current_value: Optional[str] = Field(default=None, description="Latest value")
    all_time_high: Optional[str] = Field(default=None, description="Series maximum")
    all_time_low: Optional[str] = Field(default=None, description="Series minimum")
    data_points: str = Field(description="Number of validated points")
    growth_factor: Optional[str] = Field(
        default=None, description="Latest value over first value"
    )
    power_law_r2: Optional[str] = Field(
        default=None, description="R² of the displayed fit"
    )
    new_addresses: Optional[str] = Field(default=None)
    active_addresses: Optional[str] = Field(default=None)


class ChartAnalysisDTO(BaseModel):
    """Full chart payload: window, fit, projection and stat cards."""

    dataset: str = Field(description="Dataset name")
    genesis: int = Field(description="Genesis timestamp (epoch ms) of the day axis")
    options: ChartOptionsDTO
    cached: bool = Field(description="Source data served from the response cache")
    total_points: int = Field(description="Validated points before windowing")
    window_points: int = Field(description="Points inside the selected period")
    points: List[ChartPointDTO] = Field(default_factory=list)
    regression: Optional[RegressionDTO] = None
    fit_line: List[FitPointDTO] = Field(default_factory=list)
    projection: List[ProjectionPointDTO] = Field(default_factory=list)
    extrema: ExtremaDTO = Field(default_factory=ExtremaDTO)
    summary: ChartSummaryDTO

    @classmethod
    def from_domain(
        cls,
        analysis: SeriesAnalysis,
        profile: DatasetProfile,
        options: ChartOptions,
        summary: ChartSummaryDTO,
        cached: bool,
    ) -> "ChartAnalysisDTO":
        genesis = profile.genesis_ms
        maximum = analysis.extrema.maximum
        minimum = analysis.extrema.minimum
        return cls(
            dataset=profile.name,
            genesis=genesis,
            options=ChartOptionsDTO.from_domain(options),
            cached=cached,
            total_points=len(analysis.points),
            window_points=len(analysis.window),
            points=[ChartPointDTO.from_domain(p, genesis) for p in analysis.window],
            regression=(
                RegressionDTO.from_domain(analysis.regression)
                if analysis.regression
                else None
            ),
            fit_line=[FitPointDTO.from_domain(p) for p in analysis.fit_line],
            projection=[ProjectionPointDTO.from_domain(p) for p in analysis.projection],
            extrema=ExtremaDTO(
                all_time_high=(
                    ChartPointDTO.from_domain(maximum, genesis) if maximum else None
                ),
                all_time_low=(
                    ChartPointDTO.from_domain(minimum, genesis) if minimum else None
                ),
            ),
            summary=summary,
        )
