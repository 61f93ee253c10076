"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .chart_use_cases import GetAddressChartUseCase, GetHashrateChartUseCase
from .dataset_use_cases import GetAddressGrowthUseCase, GetHashrateUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "GetHashrateUseCase",
    "GetAddressGrowthUseCase",
    "GetHashrateChartUseCase",
    "GetAddressChartUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
