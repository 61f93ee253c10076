from __future__ import annotations

import pytest

from nock_analytics.application.use_cases.dataset_use_cases import (
    GetAddressGrowthUseCase,
    GetHashrateUseCase,
    parse_tip,
    proof_rate_candidate,
    wallet_window_candidate,
)
from nock_analytics.domain.entities.errors import (
    DatasetUnavailableError,
    NockBlocksRPCError,
)
from nock_analytics.infrastructure.cache import SingleFlightResponseCache

from conftest import GENESIS_MS, GENESIS_SECONDS, FakeNockBlocksGateway


def test_parse_tip_defaults_missing_numbers() -> None:
    tip = parse_tip({"height": 120, "proofsPerSecond": "fast"})

    assert tip.height == 120
    assert tip.timestamp == 0
    assert tip.difficulty == 0.0
    assert tip.proofs_per_second == 0.0


def test_proof_rate_candidate_converts_seconds_and_falls_back() -> None:
    adjusted = proof_rate_candidate(
        {"timestamp": GENESIS_SECONDS, "adjusted_proofrate": 5.0, "proofrate": 9.0}
    )
    raw = proof_rate_candidate(
        {"timestamp": GENESIS_SECONDS, "adjusted_proofrate": 0, "proofrate": 9.0}
    )
    missing = proof_rate_candidate({"timestamp": GENESIS_SECONDS})

    assert adjusted == {"timestamp": GENESIS_MS, "value": 5.0}
    assert raw["value"] == 9.0
    assert missing["value"] is None
    assert proof_rate_candidate("garbage") is None


def test_candidates_treat_oversized_integers_as_missing() -> None:
    candidate = proof_rate_candidate({"timestamp": 10**400, "proofrate": 5.0})
    fallback = proof_rate_candidate(
        {"timestamp": GENESIS_SECONDS, "adjusted_proofrate": 10**400, "proofrate": 7}
    )

    assert candidate == {"timestamp": None, "value": 5.0}
    assert fallback["value"] == 7.0
    assert parse_tip({"height": 10**400}).height == 0


@pytest.mark.asyncio
async def test_hashrate_use_case_drops_oversized_samples(response_cache) -> None:
    gateway = FakeNockBlocksGateway(
        proof_rates=[
            {"timestamp": 10**400, "proofrate": 5.0},
            {"timestamp": GENESIS_SECONDS, "proofrate": 10**400},
            {"timestamp": GENESIS_SECONDS, "proofrate": 3.0},
        ]
    )
    use_case = GetHashrateUseCase(gateway, response_cache)

    response = await use_case.execute()

    assert [point.value for point in response.data.hashrate] == [3.0]


def test_wallet_window_candidate_maps_fields() -> None:
    candidate = wallet_window_candidate(
        {
            "timestamp": GENESIS_SECONDS,
            "cumulativeAddresses": 250,
            "endHeight": 1000,
            "newAddresses": 20,
            "activeAddresses": 75,
        }
    )

    assert candidate == {
        "timestamp": GENESIS_MS,
        "value": 250,
        "block_height": 1000,
        "new_addresses": 20,
        "active_addresses": 75,
    }


@pytest.mark.asyncio
async def test_hashrate_use_case_fetches_and_caches(fake_gateway, response_cache):
    use_case = GetHashrateUseCase(fake_gateway, response_cache)

    first = await use_case.execute()
    second = await use_case.execute()

    assert fake_gateway.calls == ["getTip", "getProofRateHistory"]
    assert fake_gateway.history_args == {
        "start_height": 0,
        "end_height": 21000,
        "max_samples": 5000,
        "smoothing_type": "smoothed_100",
    }
    assert first.success is True
    assert first.cached is False
    assert first.fetch_time_ms is not None
    assert first.cache_age_seconds is None
    assert second.cached is True
    assert second.fetch_time_ms is None
    assert second.cache_age_seconds == 0

    data = first.data
    assert data.metadata.total_points == 30
    assert data.hashrate[0].timestamp == GENESIS_MS
    assert data.hashrate[0].value == 1e12
    assert data.metadata.current_hashrate == 1e12 * 30**2
    assert data.tip.height == 21000


@pytest.mark.asyncio
async def test_hashrate_use_case_raises_when_nothing_valid(response_cache) -> None:
    gateway = FakeNockBlocksGateway(
        proof_rates=[{"timestamp": GENESIS_SECONDS, "proofrate": -1}]
    )
    use_case = GetHashrateUseCase(gateway, response_cache)

    with pytest.raises(DatasetUnavailableError):
        await use_case.execute()


@pytest.mark.asyncio
async def test_gateway_errors_propagate_and_are_not_cached(response_cache) -> None:
    gateway = FakeNockBlocksGateway(error=NockBlocksRPCError("RPC Error: down"))
    use_case = GetAddressGrowthUseCase(gateway, response_cache)

    with pytest.raises(NockBlocksRPCError):
        await use_case.execute()
    with pytest.raises(NockBlocksRPCError):
        await use_case.execute()

    assert gateway.calls == ["getTip", "getTip"]


@pytest.mark.asyncio
async def test_address_use_case_builds_metadata(fake_gateway) -> None:
    use_case = GetAddressGrowthUseCase(
        fake_gateway, SingleFlightResponseCache(), window_size=500, data_points=20
    )

    response = await use_case.execute()

    metadata = response.data.metadata
    assert metadata.total_points == 20
    assert metadata.current_addresses == 2000
    assert metadata.growth_factor == pytest.approx(20.0)
    assert metadata.latest_window.active_addresses == 1000
    assert metadata.latest_window.block_height == 20000
    assert use_case.cache_key == (
        'getWalletGrowthMetrics:{"dataPoints":20,"windowSize":500}'
    )
