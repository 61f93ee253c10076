"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .chart_dto import (
    ChartAnalysisDTO,
    ChartOptionsDTO,
    ChartPointDTO,
    ChartSummaryDTO,
    ExtremaDTO,
    FitPointDTO,
    ProjectionPointDTO,
    RegressionDTO,
)
from .dataset_dto import (
    AddressDataDTO,
    AddressMetadataDTO,
    AddressPointDTO,
    AddressResponseDTO,
    ChainTipDTO,
    DateRangeDTO,
    HashrateDataDTO,
    HashrateMetadataDTO,
    HashrateResponseDTO,
    TimePointDTO,
)
from .health_dto import ApplicationInfoDTO, SystemHealthDTO

__all__ = [
    "TimePointDTO",
    "AddressPointDTO",
    "ChainTipDTO",
    "DateRangeDTO",
    "HashrateMetadataDTO",
    "HashrateDataDTO",
    "HashrateResponseDTO",
    "AddressMetadataDTO",
    "AddressDataDTO",
    "AddressResponseDTO",
    "ChartPointDTO",
    "RegressionDTO",
    "FitPointDTO",
    "ProjectionPointDTO",
    "ExtremaDTO",
    "ChartOptionsDTO",
    "ChartSummaryDTO",
    "ChartAnalysisDTO",
    "SystemHealthDTO",
    "ApplicationInfoDTO",
]
