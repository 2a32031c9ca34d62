"""Pydantic v2 schemas for occupancy reports."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ListingOccupancy(BaseModel):
    """Monthly occupancy ratios for a single listing.

    ``occupancy`` maps each month label (``"Occupancy: Mar 2025"``) to the
    ratio of booked nights to days in that month, rounded to 4 decimals.
    """

    listing_id: str = Field(alias="listingId")
    occupancy: dict[str, float]

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class OccupancySyncResponse(BaseModel):
    """Response body of a triggered occupancy sync."""

    generated_on: date
    period_start: date
    period_end: date
    months: list[str]
    listings: list[ListingOccupancy]
