"""Reservation filtering — keep only reservations that occupy a listing."""

import logging
from collections.abc import Iterable

from hostaway_occupancy.schemas.reservation import Reservation

logger = logging.getLogger(__name__)

ACTIVE_STATUSES: frozenset[str] = frozenset({"new", "modified"})


def filter_active_reservations(reservations: Iterable[Reservation]) -> list[Reservation]:
    """Return the reservations whose status is active, in their original order.

    Cancelled and any other provider statuses are dropped without error.
    """
    reservations = list(reservations)
    logger.info("Filtering %d reservations...", len(reservations))
    active = [r for r in reservations if r.status in ACTIVE_STATUSES]
    logger.info("Found %d active reservations.", len(active))
    return active
