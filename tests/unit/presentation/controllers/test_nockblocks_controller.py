from __future__ import annotations

import pytest
from fastapi import HTTPException

from nock_analytics.application.use_cases.dataset_use_cases import (
    GetAddressGrowthUseCase,
    GetHashrateUseCase,
)
from nock_analytics.domain.entities.errors import NockBlocksRPCError
from nock_analytics.presentation.controllers.nockblocks_controller import (
    get_addresses,
    get_hashrate,
)

from conftest import GENESIS_SECONDS, FakeNockBlocksGateway


class _ExplodingUseCase:
    async def execute(self):
        raise KeyError("unexpected")


@pytest.mark.asyncio
async def test_get_hashrate_returns_envelope(fake_gateway, response_cache) -> None:
    dto = await get_hashrate(
        get_hashrate_use_case=GetHashrateUseCase(fake_gateway, response_cache)
    )

    assert dto.success is True
    assert dto.data.metadata.total_points == 30


@pytest.mark.asyncio
async def test_get_addresses_returns_envelope(fake_gateway, response_cache) -> None:
    dto = await get_addresses(
        get_address_growth_use_case=GetAddressGrowthUseCase(
            fake_gateway, response_cache
        )
    )

    assert dto.data.metadata.latest_window is not None


@pytest.mark.asyncio
async def test_rpc_failure_maps_to_bad_gateway(response_cache) -> None:
    gateway = FakeNockBlocksGateway(error=NockBlocksRPCError("HTTP error! status: 500"))

    with pytest.raises(HTTPException) as exc_info:
        await get_hashrate(
            get_hashrate_use_case=GetHashrateUseCase(gateway, response_cache)
        )

    assert exc_info.value.status_code == 502
    assert exc_info.value.detail == "HTTP error! status: 500"


@pytest.mark.asyncio
async def test_empty_dataset_maps_to_service_unavailable(response_cache) -> None:
    gateway = FakeNockBlocksGateway(
        windows=[{"timestamp": GENESIS_SECONDS, "totalUniqueAddresses": 0}]
    )

    with pytest.raises(HTTPException) as exc_info:
        await get_addresses(
            get_address_growth_use_case=GetAddressGrowthUseCase(gateway, response_cache)
        )

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_unexpected_errors_map_to_internal_error() -> None:
    with pytest.raises(HTTPException) as exc_info:
        await get_hashrate(get_hashrate_use_case=_ExplodingUseCase())

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Internal server error"
