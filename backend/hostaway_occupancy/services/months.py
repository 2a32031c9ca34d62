"""Reporting month window — month anchors, labels and the fetch date range."""

import calendar
import logging
from dataclasses import dataclass
from datetime import date

logger = logging.getLogger(__name__)

# Fixed English abbreviations; calendar.month_abbr follows the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

LABEL_PREFIX = "Occupancy:"


@dataclass(frozen=True)
class ReportMonth:
    """One calendar month of the reporting window."""

    label: str  # e.g. "Occupancy: Mar 2025"
    anchor: date  # first day of the month


def add_months(d: date, delta_months: int) -> date:
    """Return the first day of the month ``delta_months`` away from ``d``."""
    y = d.year + (d.month - 1 + delta_months) // 12
    m = (d.month - 1 + delta_months) % 12 + 1
    return date(y, m, 1)


def month_end(d: date) -> date:
    """Return the last calendar day of ``d``'s month."""
    _, last_day = calendar.monthrange(d.year, d.month)
    return date(d.year, d.month, last_day)


def month_label(anchor: date) -> str:
    return f"{LABEL_PREFIX} {MONTH_ABBREVIATIONS[anchor.month - 1]} {anchor.year:04d}"


def format_api_date(d: date) -> str:
    """Format a date for Hostaway query parameters (YYYY-MM-DD)."""
    return d.isoformat()


def reporting_window(today: date, horizon: int) -> tuple[date, date]:
    """Arrival-date range to request from Hostaway.

    Returns (first day of the current month, last day of the month
    ``horizon`` months ahead).
    """
    if horizon < 0:
        raise ValueError("horizon must be >= 0")
    start = today.replace(day=1)
    end = month_end(add_months(today, horizon))
    logger.info("Data window: %s to %s", format_api_date(start), format_api_date(end))
    return start, end


def build_report_months(today: date, horizon: int) -> list[ReportMonth]:
    """Build the current month plus ``horizon`` following months, in order."""
    if horizon < 0:
        raise ValueError("horizon must be >= 0")
    months = []
    for offset in range(horizon + 1):
        anchor = add_months(today, offset)
        months.append(ReportMonth(label=month_label(anchor), anchor=anchor))
    logger.debug("Reporting months: %s", [m.label for m in months])
    return months
