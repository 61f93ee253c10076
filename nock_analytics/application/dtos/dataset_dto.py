"""
Dataset DTOs - Application Layer

Response payloads of the NockBlocks proxy endpoints: the validated
series, the chain tip and derived metadata, wrapped in a cache-aware
envelope.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from nock_analytics.domain.entities.chain import (
    AddressSnapshot,
    ChainTip,
    DateRange,
    HashrateSnapshot,
)
from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint


class TimePointDTO(BaseModel):
    """Single validated observation."""

    timestamp: int = Field(description="Epoch milliseconds")
    value: float = Field(description="Observed value")

    @classmethod
    def from_domain(cls, point: TimePoint) -> "TimePointDTO":
        return cls(timestamp=point.timestamp, value=point.value)


class AddressPointDTO(BaseModel):
    """Address-growth window."""

    timestamp: int = Field(description="Epoch milliseconds")
    value: float = Field(description="Total unique addresses")
    block_height: int = Field(default=0, description="Window end height")
    new_addresses: int = Field(default=0, description="Addresses first seen")
    active_addresses: int = Field(default=0, description="Addresses that transacted")

    @classmethod
    def from_domain(cls, point: AddressPoint) -> "AddressPointDTO":
        return cls(
            timestamp=point.timestamp,
            value=point.value,
            block_height=point.block_height,
            new_addresses=point.new_addresses,
            active_addresses=point.active_addresses,
        )


class ChainTipDTO(BaseModel):
    height: int = Field(default=0, description="Tip block height")
    timestamp: int = Field(default=0, description="Tip timestamp as reported")
    difficulty: float = Field(default=0.0, description="Current difficulty")
    proofs_per_second: float = Field(default=0.0, description="Network proof rate")

    @classmethod
    def from_domain(cls, tip: ChainTip) -> "ChainTipDTO":
        return cls(
            height=tip.height,
            timestamp=tip.timestamp,
            difficulty=tip.difficulty,
            proofs_per_second=tip.proofs_per_second,
        )


class DateRangeDTO(BaseModel):
    start: int = Field(description="First timestamp (epoch ms)")
    end: int = Field(description="Last timestamp (epoch ms)")

    @classmethod
    def from_domain(cls, date_range: DateRange) -> "DateRangeDTO":
        return cls(start=date_range.start, end=date_range.end)


class HashrateMetadataDTO(BaseModel):
    total_points: int = Field(description="Number of validated points")
    date_range: DateRangeDTO = Field(description="Covered time range")
    current_hashrate: float = Field(description="Most recent proof rate")


class HashrateDataDTO(BaseModel):
    hashrate: List[TimePointDTO] = Field(description="Validated proof-rate series")
    tip: ChainTipDTO = Field(description="Chain tip at fetch time")
    metadata: HashrateMetadataDTO

    @classmethod
    def from_domain(cls, snapshot: HashrateSnapshot) -> "HashrateDataDTO":
        return cls(
            hashrate=[TimePointDTO.from_domain(point) for point in snapshot.points],
            tip=ChainTipDTO.from_domain(snapshot.tip),
            metadata=HashrateMetadataDTO(
                total_points=snapshot.total_points,
                date_range=DateRangeDTO.from_domain(snapshot.date_range),
                current_hashrate=snapshot.current_hashrate,
            ),
        )


class AddressMetadataDTO(BaseModel):
    total_points: int = Field(description="Number of validated windows")
    date_range: DateRangeDTO = Field(description="Covered time range")
    current_addresses: float = Field(description="Latest total address count")
    growth_factor: float = Field(description="Latest count over first count")
    latest_window: Optional[AddressPointDTO] = Field(
        default=None, description="Most recent window"
    )


class AddressDataDTO(BaseModel):
    addresses: List[AddressPointDTO] = Field(description="Validated address windows")
    tip: ChainTipDTO = Field(description="Chain tip at fetch time")
    metadata: AddressMetadataDTO

    @classmethod
    def from_domain(cls, snapshot: AddressSnapshot) -> "AddressDataDTO":
        latest = snapshot.latest_window
        return cls(
            addresses=[AddressPointDTO.from_domain(point) for point in snapshot.points],
            tip=ChainTipDTO.from_domain(snapshot.tip),
            metadata=AddressMetadataDTO(
                total_points=snapshot.total_points,
                date_range=DateRangeDTO.from_domain(snapshot.date_range),
                current_addresses=snapshot.current_addresses,
                growth_factor=snapshot.growth_factor,
                latest_window=AddressPointDTO.from_domain(latest) if latest else None,
            ),
        )


class HashrateResponseDTO(BaseModel):
    """Envelope returned by the hashrate proxy endpoint."""

    success: bool = Field(default=True)
    data: HashrateDataDTO
    cached: bool = Field(description="Served from the response cache")
    cache_age_seconds: Optional[int] = Field(
        default=None, description="Age of the cached entry, when cached"
    )
    fetch_time_ms: Optional[int] = Field(
        default=None, description="Upstream fetch duration, when fetched"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "data": {
                    "hashrate": [{"timestamp": 1750118400000, "value": 1.2e15}],
                    "tip": {
                        "height": 21000,
                        "timestamp": 1750118400,
                        "difficulty": 1.5e9,
                        "proofs_per_second": 1.2e15,
                    },
                    "metadata": {
                        "total_points": 1,
                        "date_range": {
                            "start": 1750118400000,
                            "end": 1750118400000,
                        },
                        "current_hashrate": 1.2e15,
                    },
                },
                "cached": False,
                "cache_age_seconds": None,
                "fetch_time_ms": 412,
            }
        }
    }


class AddressResponseDTO(BaseModel):
    """Envelope returned by the address-growth proxy endpoint."""

    success: bool = Field(default=True)
    data: AddressDataDTO
    cached: bool = Field(description="Served from the response cache")
    cache_age_seconds: Optional[int] = Field(default=None)
    fetch_time_ms: Optional[int] = Field(default=None)
