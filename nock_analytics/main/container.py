"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from datetime import datetime

from dependency_injector import containers, providers

from nock_analytics.application.models import SystemInfo
from nock_analytics.application.use_cases.chart_use_cases import (
    GetAddressChartUseCase,
    GetHashrateChartUseCase,
)
from nock_analytics.application.use_cases.dataset_use_cases import (
    GetAddressGrowthUseCase,
    GetHashrateUseCase,
)
from nock_analytics.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from nock_analytics.domain.entities.chart import DatasetProfile
from nock_analytics.infrastructure.cache import SingleFlightResponseCache
from nock_analytics.infrastructure.gateways import NockBlocksGateway
from nock_analytics.infrastructure.services import HealthCheckService
from nock_analytics.shared import MS_PER_SECOND, get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * MS_PER_SECOND)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    response_cache = providers.Singleton(
        SingleFlightResponseCache,
        ttl_seconds=config.nockblocks.cache_ttl_seconds,
    )

    # Gateways
    nockblocks_gateway = providers.Singleton(
        NockBlocksGateway,
        rpc_url=config.nockblocks.rpc_url,
        timeout=config.nockblocks.timeout,
        user_agent=config.nockblocks.user_agent,
    )

    # Analysis profiles
    hashrate_profile = providers.Singleton(
        DatasetProfile,
        name="hashrate",
        genesis_ms=providers.Callable(_epoch_ms, config.analytics.hashrate_genesis),
        track_minimum=True,
        min_fit_points=config.analytics.min_fit_points,
        projection_horizon_days=config.analytics.projection_horizon_days,
        projection_step_days=config.analytics.projection_step_days,
    )

    address_profile = providers.Singleton(
        DatasetProfile,
        name="addresses",
        genesis_ms=providers.Callable(_epoch_ms, config.analytics.address_genesis),
        project_active=True,
        min_fit_points=config.analytics.min_fit_points,
        projection_horizon_days=config.analytics.projection_horizon_days,
        projection_step_days=config.analytics.projection_step_days,
    )

    # Application (use cases)
    get_hashrate_use_case = providers.Factory(
        GetHashrateUseCase,
        nockblocks_gateway=nockblocks_gateway,
        response_cache=response_cache,
        max_samples=config.nockblocks.proof_rate_max_samples,
        smoothing_type=config.nockblocks.proof_rate_smoothing,
    )

    get_address_growth_use_case = providers.Factory(
        GetAddressGrowthUseCase,
        nockblocks_gateway=nockblocks_gateway,
        response_cache=response_cache,
        window_size=config.nockblocks.wallet_window_size,
        data_points=config.nockblocks.wallet_data_points,
    )

    get_hashrate_chart_use_case = providers.Factory(
        GetHashrateChartUseCase,
        hashrate_use_case=get_hashrate_use_case,
        profile=hashrate_profile,
    )

    get_address_chart_use_case = providers.Factory(
        GetAddressChartUseCase,
        address_use_case=get_address_growth_use_case,
        profile=address_profile,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        nockblocks_gateway=nockblocks_gateway,
        rpc_url=config.nockblocks.rpc_url,
        timeout_seconds=config.nockblocks.health_timeout_seconds,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.api.title,
        version=config.api.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.api.git_commit,
        build_time=config.api.build_time,
        nockblocks_rpc_url=config.nockblocks.rpc_url,
        cache_ttl_seconds=config.nockblocks.cache_ttl_seconds,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for process-lifetime resources.

    The response cache lives as long as the process; it is emptied on
    shutdown so a reused container never serves stale upstream data.
    """
    container = get_container()
    response_cache = container.response_cache()

    try:
        logger.info(
            "container.resources.initialized",
            rpc_url=container.config.nockblocks.rpc_url(),
            cache_ttl_seconds=response_cache.ttl_seconds,
        )
        yield container

    finally:
        response_cache.clear()
        logger.info("container.resources.shutdown")
