"""
NockBlocks Router - Presentation Layer

Proxy endpoints returning the validated NockBlocks datasets inside the
``{success, data, cached, ...}`` envelope. Both GET and POST are accepted
so existing dashboard clients keep working.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from nock_analytics.application.dtos.dataset_dto import (
    AddressResponseDTO,
    HashrateResponseDTO,
)
from nock_analytics.application.use_cases.dataset_use_cases import (
    GetAddressGrowthUseCase,
    GetHashrateUseCase,
)
from nock_analytics.domain.entities.errors import (
    DatasetUnavailableError,
    NockBlocksRPCError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/nockblocks", tags=["NockBlocks"])


@router.api_route(
    "/hashrate", methods=["GET", "POST"], response_model=HashrateResponseDTO
)
@inject
async def get_hashrate(
    get_hashrate_use_case: GetHashrateUseCase = Depends(
        Provide["get_hashrate_use_case"]
    ),
) -> HashrateResponseDTO:
    """Proof-rate history since genesis, cached for the configured TTL."""
    try:
        return await get_hashrate_use_case.execute()
    except NockBlocksRPCError as e:
        logger.error("Failed to fetch hashrate", error=e.message, code=e.code)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    except DatasetUnavailableError as e:
        logger.warning("Hashrate dataset unavailable", details=e.details)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except Exception as e:
        logger.error("Unexpected error fetching hashrate", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.api_route(
    "/addresses", methods=["GET", "POST"], response_model=AddressResponseDTO
)
@inject
async def get_addresses(
    get_address_growth_use_case: GetAddressGrowthUseCase = Depends(
        Provide["get_address_growth_use_case"]
    ),
) -> AddressResponseDTO:
    """Wallet-growth windows with the latest window's counters."""
    try:
        return await get_address_growth_use_case.execute()
    except NockBlocksRPCError as e:
        logger.error("Failed to fetch address growth", error=e.message, code=e.code)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    except DatasetUnavailableError as e:
        logger.warning("Address dataset unavailable", details=e.details)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except Exception as e:
        logger.error("Unexpected error fetching address growth", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
