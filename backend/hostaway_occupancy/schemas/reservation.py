"""Pydantic v2 schema for reservations returned by the Hostaway API."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hostaway_occupancy.schemas.listing import normalize_listing_id


def _parse_calendar_date(value: Any) -> date | None:
    """Lenient date parsing: anything unparseable becomes None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


class Reservation(BaseModel):
    """A single reservation as seen by the occupancy calculator.

    Only the fields needed for occupancy are kept; everything else in the
    Hostaway payload is ignored. Malformed ids or dates are stored as None
    instead of failing validation, so one bad record never aborts a run.
    """

    listing_id: str | None = Field(None, alias="listingMapId")
    status: str | None = None
    arrival_date: date | None = Field(None, alias="arrivalDate")
    departure_date: date | None = Field(None, alias="departureDate")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("listing_id", mode="before")
    @classmethod
    def _canonical_listing_id(cls, value: Any) -> str | None:
        return normalize_listing_id(value)

    @field_validator("status", mode="before")
    @classmethod
    def _status_text(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("arrival_date", "departure_date", mode="before")
    @classmethod
    def _lenient_date(cls, value: Any) -> date | None:
        return _parse_calendar_date(value)

    @classmethod
    def from_payload(cls, payload: Any) -> "Reservation":
        """Build a reservation from one raw ``result`` item."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)
