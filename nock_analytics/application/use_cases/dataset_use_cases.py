"""
Dataset Use Cases - Application Layer

Fetch the NockBlocks datasets, map the raw RPC payloads onto the validator
input shape and serve the resulting snapshots through the response cache.
"""

import math
from time import perf_counter
from typing import Any, Dict, Mapping, Optional

import structlog

from nock_analytics.application.dtos.dataset_dto import (
    AddressDataDTO,
    AddressResponseDTO,
    HashrateDataDTO,
    HashrateResponseDTO,
)
from nock_analytics.domain.entities.chain import (
    AddressSnapshot,
    ChainTip,
    HashrateSnapshot,
)
from nock_analytics.domain.entities.errors import DatasetUnavailableError
from nock_analytics.domain.gateways.nockblocks_gateway import INockBlocksGateway
from nock_analytics.domain.ports.cache import (
    CacheResult,
    IResponseCache,
    request_signature,
)
from nock_analytics.domain.services.validator import (
    validate_address_series,
    validate_series,
)
from nock_analytics.shared.consts import MS_PER_SECOND

logger = structlog.get_logger(__name__)


def _number(payload: Mapping[str, Any], key: str) -> Optional[float]:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        as_float = float(value)
    except OverflowError:
        return None
    return as_float if math.isfinite(as_float) else None


def _first_present(payload: Mapping[str, Any], *keys: str) -> Optional[float]:
    """First key holding a truthy number; ``0`` falls through like a missing key."""
    for key in keys:
        value = _number(payload, key)
        if value:
            return value
    return None


def _seconds_to_ms(payload: Mapping[str, Any]) -> Optional[float]:
    seconds = _number(payload, "timestamp")
    return None if seconds is None else seconds * MS_PER_SECOND


def parse_tip(payload: Mapping[str, Any]) -> ChainTip:
    """Build a :class:`ChainTip` from ``getTip``; absent numbers become 0."""
    return ChainTip(
        height=int(_number(payload, "height") or 0),
        timestamp=int(_number(payload, "timestamp") or 0),
        difficulty=float(_number(payload, "difficulty") or 0.0),
        proofs_per_second=float(_number(payload, "proofsPerSecond") or 0.0),
    )


def proof_rate_candidate(sample: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(sample, Mapping):
        return None
    return {
        "timestamp": _seconds_to_ms(sample),
        "value": _first_present(sample, "adjusted_proofrate", "proofrate"),
    }


def wallet_window_candidate(window: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(window, Mapping):
        return None
    return {
        "timestamp": _seconds_to_ms(window),
        "value": _first_present(window, "totalUniqueAddresses", "cumulativeAddresses"),
        "block_height": window.get("endHeight"),
        "new_addresses": window.get("newAddresses"),
        "active_addresses": window.get("activeAddresses"),
    }


class GetHashrateUseCase:
    """Use case for the proof-rate history served by the hashrate endpoint."""

    def __init__(
        self,
        nockblocks_gateway: INockBlocksGateway,
        response_cache: IResponseCache,
        max_samples: int = 5000,
        smoothing_type: str = "smoothed_100",
    ):
        self.nockblocks_gateway = nockblocks_gateway
        self.response_cache = response_cache
        self.max_samples = max_samples
        self.smoothing_type = smoothing_type

    @property
    def cache_key(self) -> str:
        return request_signature(
            "getProofRateHistory",
            {"maxSamples": self.max_samples, "smoothingType": self.smoothing_type},
        )

    async def _fetch(self) -> HashrateSnapshot:
        tip_payload = await self.nockblocks_gateway.get_tip()
        tip = parse_tip(tip_payload)
        history = await self.nockblocks_gateway.get_proof_rate_history(
            start_height=0,
            end_height=tip.height,
            max_samples=self.max_samples,
            smoothing_type=self.smoothing_type,
        )
        raw = history.get("data") or []
        points = validate_series(proof_rate_candidate(sample) for sample in raw)

        logger.info(
            "dataset.hashrate.fetched",
            tip_height=tip.height,
            raw_points=len(raw),
            valid_points=len(points),
        )
        if not points:
            raise DatasetUnavailableError(
                "hashrate", details={"raw_points": len(raw)}
            )
        return HashrateSnapshot(points=points, tip=tip)

    async def load(self) -> CacheResult[HashrateSnapshot]:
        return await self.response_cache.get_or_load(self.cache_key, self._fetch)

    async def execute(self) -> HashrateResponseDTO:
        start = perf_counter()
        result = await self.load()
        elapsed_ms = int((perf_counter() - start) * 1000)

        return HashrateResponseDTO(
            data=HashrateDataDTO.from_domain(result.value),
            cached=result.cached,
            cache_age_seconds=int(result.age_seconds) if result.cached else None,
            fetch_time_ms=None if result.cached else elapsed_ms,
        )


class GetAddressGrowthUseCase:
    """Use case for the wallet-growth windows served by the addresses endpoint."""

    def __init__(
        self,
        nockblocks_gateway: INockBlocksGateway,
        response_cache: IResponseCache,
        window_size: int = 1000,
        data_points: int = 100,
    ):
        self.nockblocks_gateway = nockblocks_gateway
        self.response_cache = response_cache
        self.window_size = window_size
        self.data_points = data_points

    @property
    def cache_key(self) -> str:
        return request_signature(
            "getWalletGrowthMetrics",
            {"windowSize": self.window_size, "dataPoints": self.data_points},
        )

    async def _fetch(self) -> AddressSnapshot:
        tip = parse_tip(await self.nockblocks_gateway.get_tip())
        metrics = await self.nockblocks_gateway.get_wallet_growth_metrics(
            window_size=self.window_size, data_points=self.data_points
        )
        raw = metrics.get("windows") or []
        points = validate_address_series(
            wallet_window_candidate(window) for window in raw
        )

        logger.info(
            "dataset.addresses.fetched",
            tip_height=tip.height,
            raw_windows=len(raw),
            valid_windows=len(points),
        )
        if not points:
            raise DatasetUnavailableError(
                "address", details={"raw_windows": len(raw)}
            )
        return AddressSnapshot(points=points, tip=tip)

    async def load(self) -> CacheResult[AddressSnapshot]:
        return await self.response_cache.get_or_load(self.cache_key, self._fetch)

    async def execute(self) -> AddressResponseDTO:
        start = perf_counter()
        result = await self.load()
        elapsed_ms = int((perf_counter() - start) * 1000)

        return AddressResponseDTO(
            data=AddressDataDTO.from_domain(result.value),
            cached=result.cached,
            cache_age_seconds=int(result.age_seconds) if result.cached else None,
            fetch_time_ms=None if result.cached else elapsed_ms,
        )
