"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nock_analytics.shared import EnumEnvironment, EnumLogLevel

NOCKCHAIN_GENESIS = datetime(2025, 5, 21, tzinfo=timezone.utc)


class ApiSettings(BaseSettings):
    """HTTP API configuration settings."""

    title: str = Field(default="NockChain Analytics", description="API title")
    description: str = Field(
        default="Power-law analytics over NockChain hashrate and address growth",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("API_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("API_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"], description="Origins allowed by CORS"
    )

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class NockBlocksSettings(BaseSettings):
    """NockBlocks JSON-RPC configuration settings."""

    rpc_url: str = Field(
        default="https://nockblocks.com/rpc", description="JSON-RPC endpoint"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    user_agent: str = Field(
        default="NockChain-Analytics/1.0", description="User-Agent header"
    )
    cache_ttl_seconds: float = Field(
        default=300.0, gt=0, description="Response cache time-to-live"
    )
    health_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Timeout of the getTip health check"
    )
    proof_rate_max_samples: int = Field(
        default=5000, gt=0, description="maxSamples for getProofRateHistory"
    )
    proof_rate_smoothing: str = Field(
        default="smoothed_100", description="smoothingType for getProofRateHistory"
    )
    wallet_window_size: int = Field(
        default=1000, gt=0, description="windowSize for getWalletGrowthMetrics"
    )
    wallet_data_points: int = Field(
        default=100, gt=0, description="dataPoints for getWalletGrowthMetrics"
    )

    model_config = SettingsConfigDict(
        env_prefix="NOCKBLOCKS_", case_sensitive=False, extra="ignore"
    )


class AnalyticsSettings(BaseSettings):
    """Power-law analysis configuration settings."""

    hashrate_genesis: datetime = Field(
        default=NOCKCHAIN_GENESIS, description="Day-1 reference of the hashrate chart"
    )
    address_genesis: datetime = Field(
        default=NOCKCHAIN_GENESIS, description="Day-1 reference of the address chart"
    )
    min_fit_points: int = Field(
        default=10, ge=2, description="Minimum window size to fit and project"
    )
    projection_horizon_days: int = Field(
        default=1000, gt=0, description="Projection horizon in days"
    )
    projection_step_days: int = Field(
        default=10, gt=0, description="Spacing of projection points in days"
    )

    model_config = SettingsConfigDict(
        env_prefix="ANALYTICS_", case_sensitive=False, extra="ignore"
    )

    @field_validator("hashrate_genesis", "address_genesis")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    nockblocks: NockBlocksSettings = Field(default_factory=NockBlocksSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
