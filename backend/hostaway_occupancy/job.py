"""Run a single Hostaway occupancy sync from the command line.

    hostaway-occupancy
    python -m hostaway_occupancy.job

Behavior is driven entirely by environment variables (see ``config.py``).
"""

import asyncio
import logging
import sys

from hostaway_occupancy.config import Settings, settings
from hostaway_occupancy.hostaway.client import HostawayClient, HostawayError
from hostaway_occupancy.services.sync import run_occupancy_sync

logger = logging.getLogger(__name__)


async def run(job_settings: Settings) -> int:
    """Run one sync and return the process exit code."""
    logger.info("Starting Hostaway Reservation Sync...")
    try:
        async with HostawayClient(job_settings) as client:
            result = await run_occupancy_sync(job_settings, client)
    except HostawayError as exc:
        logger.error("Sync failed with a critical error: %s", exc)
        return 1
    if result is None:
        logger.warning("Sync skipped: no listings configured, nothing was calculated.")
        return 0
    logger.info("Sync finished successfully.")
    return 0


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
