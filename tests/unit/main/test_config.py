from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from nock_analytics.main.config import AppSettings, LoggingSettings, get_settings
from nock_analytics.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("NOCKBLOCKS_RPC_URL", raising=False)
    settings = get_settings()
    assert settings.nockblocks.rpc_url == "https://nockblocks.com/rpc"
    assert settings.nockblocks.cache_ttl_seconds == 300.0
    assert settings.analytics.projection_horizon_days == 1000
    assert settings.analytics.projection_step_days == 10
    assert settings.analytics.hashrate_genesis == datetime(
        2025, 5, 21, tzinfo=timezone.utc
    )
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("NOCKBLOCKS_RPC_URL", "http://localhost:9000/rpc")
    monkeypatch.setenv("NOCKBLOCKS_CACHE_TTL_SECONDS", "60")
    monkeypatch.setenv("API_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ANALYTICS_ADDRESS_GENESIS", "2021-11-07T00:00:00")

    settings = AppSettings()

    assert settings.nockblocks.rpc_url == "http://localhost:9000/rpc"
    assert settings.nockblocks.cache_ttl_seconds == 60.0
    assert settings.api.title == "Testing"
    assert settings.logging.level.value == "DEBUG"
    assert settings.analytics.address_genesis == datetime(
        2021, 11, 7, tzinfo=timezone.utc
    )


def test_non_positive_projection_step_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ANALYTICS_PROJECTION_STEP_DAYS", "0")

    with pytest.raises(ValidationError):
        AppSettings()


def test_cors_origins_parse_from_json_list(monkeypatch) -> None:
    monkeypatch.setenv("API_CORS_ORIGINS", '["https://nock.example"]')

    assert AppSettings().api.cors_origins == ["https://nock.example"]


def test_logging_settings_only_expose_consumed_fields() -> None:
    assert set(LoggingSettings.model_fields) == {"level", "file_path"}
