"""Occupancy calculation — booked nights per listing per calendar month."""

import logging
from collections.abc import Sequence
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from hostaway_occupancy.schemas.listing import Listing
from hostaway_occupancy.schemas.occupancy import ListingOccupancy
from hostaway_occupancy.schemas.reservation import Reservation
from hostaway_occupancy.services.months import ReportMonth, month_end

logger = logging.getLogger(__name__)

RATIO_QUANTUM = Decimal("0.0001")


def round_ratio(booked_nights: int, days_in_month: int) -> float:
    """Return booked_nights / days_in_month rounded half-up to 4 decimals.

    Zero nights or a zero-length month yield 0. The ratio is not capped, so
    double-booked listings can exceed 1.0.
    """
    if days_in_month <= 0 or booked_nights == 0:
        return 0.0
    ratio = Decimal(booked_nights) / Decimal(days_in_month)
    return float(ratio.quantize(RATIO_QUANTUM, rounding=ROUND_HALF_UP))


def booked_nights_in_month(reservation: Reservation, month: ReportMonth) -> int:
    """Nights of ``reservation`` that fall inside ``month``.

    The stay is clipped to [month start, day after month end); a departure on
    the first of the next month therefore adds nothing beyond the month.
    Reservations with missing dates contribute 0.
    """
    check_in = reservation.arrival_date
    check_out = reservation.departure_date
    if check_in is None or check_out is None:
        return 0

    month_start = month.anchor
    last_day = month_end(month_start)
    if check_out <= month_start or check_in > last_day:
        return 0

    stay_start = max(check_in, month_start)
    stay_end = min(check_out, last_day + timedelta(days=1))
    if stay_start >= stay_end:
        return 0
    return (stay_end - stay_start).days


def calculate_monthly_occupancy(
    listing: Listing,
    active_reservations: Sequence[Reservation],
    months: Sequence[ReportMonth],
) -> dict[str, float]:
    """Map each month label to the listing's occupancy ratio for that month."""
    listing_reservations = [r for r in active_reservations if r.listing_id == listing.id]

    if not listing_reservations:
        return {month.label: 0.0 for month in months}

    monthly_occupancy: dict[str, float] = {}
    for month in months:
        days_in_month = month_end(month.anchor).day
        booked_nights = sum(booked_nights_in_month(r, month) for r in listing_reservations)
        monthly_occupancy[month.label] = round_ratio(booked_nights, days_in_month)
    return monthly_occupancy


def build_occupancy_report(
    listings: Sequence[Listing],
    active_reservations: Sequence[Reservation],
    months: Sequence[ReportMonth],
) -> list[ListingOccupancy]:
    """Compute monthly occupancy for every listing, preserving listing order."""
    report = [
        ListingOccupancy(
            listing_id=listing.id,
            occupancy=calculate_monthly_occupancy(listing, active_reservations, months),
        )
        for listing in listings
    ]
    logger.info("Calculated occupancy for %d listings over %d months", len(report), len(months))
    return report
