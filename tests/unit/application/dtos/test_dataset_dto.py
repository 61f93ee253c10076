from __future__ import annotations

from nock_analytics.application.dtos.dataset_dto import (
    AddressDataDTO,
    HashrateDataDTO,
    HashrateResponseDTO,
)
from nock_analytics.domain.entities.chain import (
    AddressSnapshot,
    ChainTip,
    HashrateSnapshot,
)
from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint


def test_hashrate_data_dto_from_domain() -> None:
    snapshot = HashrateSnapshot(
        points=[
            TimePoint(timestamp=1000, value=1.0),
            TimePoint(timestamp=2000, value=4.0),
        ],
        tip=ChainTip(height=9, timestamp=2, difficulty=3.0, proofs_per_second=4.0),
    )

    dto = HashrateDataDTO.from_domain(snapshot)

    assert [point.value for point in dto.hashrate] == [1.0, 4.0]
    assert dto.tip.proofs_per_second == 4.0
    assert dto.metadata.date_range.start == 1000
    assert dto.metadata.date_range.end == 2000
    assert dto.metadata.current_hashrate == 4.0


def test_response_envelope_serializes_cache_fields() -> None:
    snapshot = HashrateSnapshot(
        points=[TimePoint(timestamp=1000, value=1.0)], tip=ChainTip()
    )

    body = HashrateResponseDTO(
        data=HashrateDataDTO.from_domain(snapshot), cached=True, cache_age_seconds=12
    ).model_dump()

    assert body["success"] is True
    assert body["cached"] is True
    assert body["cache_age_seconds"] == 12
    assert body["fetch_time_ms"] is None


def test_address_data_dto_exposes_latest_window() -> None:
    snapshot = AddressSnapshot(
        points=[
            AddressPoint(timestamp=1000, value=10.0),
            AddressPoint(timestamp=2000, value=40.0, new_addresses=30),
        ],
        tip=ChainTip(height=5),
    )

    dto = AddressDataDTO.from_domain(snapshot)

    assert len(dto.addresses) == 2
    assert dto.metadata.growth_factor == 4.0
    assert dto.metadata.latest_window.new_addresses == 30
