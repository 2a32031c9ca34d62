"""Occupancy sync — pull reservations from Hostaway and build the report."""

import json
import logging
from dataclasses import dataclass, field
from datetime import date

from hostaway_occupancy.config import Settings
from hostaway_occupancy.hostaway.client import HostawayClient
from hostaway_occupancy.schemas.listing import Listing
from hostaway_occupancy.schemas.occupancy import ListingOccupancy
from hostaway_occupancy.services.months import ReportMonth, build_report_months, reporting_window
from hostaway_occupancy.services.occupancy import build_occupancy_report
from hostaway_occupancy.services.reservations import filter_active_reservations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OccupancySyncResult:
    """Outcome of one sync run."""

    generated_on: date
    period_start: date
    period_end: date
    months: list[ReportMonth] = field(default_factory=list)
    listings: list[ListingOccupancy] = field(default_factory=list)


def current_date() -> date:
    """The run's reference date; read once per sync."""
    return date.today()


def load_listings(settings: Settings) -> list[Listing]:
    """Listings configured via HOSTAWAY_LISTING_IDS, in configured order."""
    return [Listing(id=listing_id) for listing_id in settings.listing_ids]


def log_report(listings: list[ListingOccupancy]) -> None:
    """Emit the final report; stands in for the publishing sink."""
    payload = [item.model_dump(by_alias=True) for item in listings]
    logger.info("--- Final Occupancy Results ---\n%s", json.dumps(payload, indent=2))


async def run_occupancy_sync(
    settings: Settings,
    client: HostawayClient,
    today: date | None = None,
) -> OccupancySyncResult | None:
    """Run one sync against an open ``HostawayClient``.

    Returns None without touching the network when no listing ids are
    configured. Hostaway auth and fetch failures propagate to the caller.
    """
    today = today or current_date()
    horizon = settings.months_to_report
    period_start, period_end = reporting_window(today, horizon)

    listings = load_listings(settings)
    if not listings:
        logger.error("HOSTAWAY_LISTING_IDS environment variable is missing. Cannot proceed")
        return None
    logger.info("Found %d listings to process.", len(listings))

    token = await client.get_access_token()
    reservations = await client.fetch_reservations(token, period_start, period_end)

    active_reservations = filter_active_reservations(reservations)
    months = build_report_months(today, horizon)
    report = build_occupancy_report(listings, active_reservations, months)
    log_report(report)

    return OccupancySyncResult(
        generated_on=today,
        period_start=period_start,
        period_end=period_end,
        months=months,
        listings=report,
    )
