"""Occupancy API router — trigger a Hostaway sync and return the report."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from hostaway_occupancy.api.deps import get_hostaway_client, get_settings
from hostaway_occupancy.config import Settings
from hostaway_occupancy.hostaway.client import HostawayAuthError, HostawayClient, HostawayFetchError
from hostaway_occupancy.schemas.occupancy import OccupancySyncResponse
from hostaway_occupancy.services.sync import run_occupancy_sync

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/occupancy", tags=["occupancy"])


@router.post("/sync", response_model=OccupancySyncResponse)
async def sync_occupancy(
    settings: Settings = Depends(get_settings),
    client: HostawayClient = Depends(get_hostaway_client),
) -> OccupancySyncResponse:
    """Pull reservations from Hostaway and return monthly occupancy per listing.

    The reporting window starts at the current month and covers
    ``MONTHS_TO_REPORT`` further months.
    """
    try:
        result = await run_occupancy_sync(settings, client)
    except HostawayAuthError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=exc.message,
        ) from exc
    except HostawayFetchError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="HOSTAWAY_LISTING_IDS is not configured",
        )

    return OccupancySyncResponse(
        generated_on=result.generated_on,
        period_start=result.period_start,
        period_end=result.period_end,
        months=[month.label for month in result.months],
        listings=result.listings,
    )
