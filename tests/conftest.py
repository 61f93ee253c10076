from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from nock_analytics.domain.entities.chart import DatasetProfile
from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint
from nock_analytics.domain.gateways.nockblocks_gateway import INockBlocksGateway
from nock_analytics.infrastructure.cache import SingleFlightResponseCache
from nock_analytics.shared.consts import MS_PER_DAY

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

GENESIS_MS = int(datetime(2025, 5, 21, tzinfo=timezone.utc).timestamp() * 1000)
GENESIS_SECONDS = GENESIS_MS // 1000
DAY_SECONDS = MS_PER_DAY // 1000


def day(n: int) -> int:
    """Epoch ms ``n`` whole days after genesis."""
    return GENESIS_MS + n * MS_PER_DAY


class FakeNockBlocksGateway(INockBlocksGateway):
    """In-memory gateway returning canned RPC results and counting calls."""

    def __init__(
        self,
        tip: Optional[Dict[str, Any]] = None,
        proof_rates: Optional[List[Dict[str, Any]]] = None,
        windows: Optional[List[Dict[str, Any]]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.tip = tip or {
            "height": 21000,
            "timestamp": GENESIS_SECONDS + 30 * DAY_SECONDS,
            "difficulty": 1.5e9,
            "proofsPerSecond": 1.2e15,
        }
        self.proof_rates = proof_rates or []
        self.windows = windows or []
        self.error = error
        self.calls: List[str] = []
        self.history_args: Dict[str, Any] = {}

    async def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        self.calls.append(method)
        if self.error is not None:
            raise self.error
        return None

    async def get_tip(self) -> Dict[str, Any]:
        await self.call("getTip")
        return self.tip

    async def get_proof_rate_history(
        self,
        start_height: int,
        end_height: int,
        max_samples: int,
        smoothing_type: str,
    ) -> Dict[str, Any]:
        await self.call("getProofRateHistory")
        self.history_args = {
            "start_height": start_height,
            "end_height": end_height,
            "max_samples": max_samples,
            "smoothing_type": smoothing_type,
        }
        return {"data": self.proof_rates}

    async def get_wallet_growth_metrics(
        self, window_size: int, data_points: int
    ) -> Dict[str, Any]:
        await self.call("getWalletGrowthMetrics")
        return {"windows": self.windows}


def proof_rate_samples(count: int) -> List[Dict[str, Any]]:
    """Noiseless ``rate = 1e12 * days^2`` history, one sample per day."""
    return [
        {
            "timestamp": GENESIS_SECONDS + n * DAY_SECONDS,
            "adjusted_proofrate": 1e12 * (n + 1) ** 2,
            "proofrate": 1.0,
        }
        for n in range(count)
    ]


def wallet_windows(count: int) -> List[Dict[str, Any]]:
    """Address windows growing linearly with the day index."""
    return [
        {
            "timestamp": GENESIS_SECONDS + n * DAY_SECONDS,
            "totalUniqueAddresses": 100 * (n + 1),
            "endHeight": 1000 * (n + 1),
            "newAddresses": 100,
            "activeAddresses": 50 * (n + 1),
        }
        for n in range(count)
    ]


@pytest.fixture()
def genesis_ms() -> int:
    return GENESIS_MS


@pytest.fixture()
def power_law_points() -> List[TimePoint]:
    return [TimePoint(timestamp=day(n), value=3.0 * (n + 1) ** 1.5) for n in range(30)]


@pytest.fixture()
def address_points() -> List[AddressPoint]:
    return [
        AddressPoint(
            timestamp=day(n),
            value=100.0 * (n + 1),
            block_height=1000 * (n + 1),
            new_addresses=100,
            active_addresses=50 * (n + 1),
        )
        for n in range(20)
    ]


@pytest.fixture()
def hashrate_profile() -> DatasetProfile:
    return DatasetProfile(name="hashrate", genesis_ms=GENESIS_MS, track_minimum=True)


@pytest.fixture()
def address_profile() -> DatasetProfile:
    return DatasetProfile(name="addresses", genesis_ms=GENESIS_MS, project_active=True)


@pytest.fixture()
def fake_gateway() -> FakeNockBlocksGateway:
    return FakeNockBlocksGateway(
        proof_rates=proof_rate_samples(30), windows=wallet_windows(20)
    )


@pytest.fixture()
def response_cache() -> SingleFlightResponseCache:
    return SingleFlightResponseCache(ttl_seconds=300.0)
