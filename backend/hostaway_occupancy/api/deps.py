"""Shared API dependencies — single import point for all routers.

Routers import everything they need from here::

    from hostaway_occupancy.api.deps import get_hostaway_client, get_settings
"""

from collections.abc import AsyncGenerator

from fastapi import Depends

from hostaway_occupancy.config import Settings, get_settings
from hostaway_occupancy.hostaway.client import HostawayClient


async def get_hostaway_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[HostawayClient, None]:
    """Yield an open Hostaway client for the duration of the request."""
    async with HostawayClient(settings) as client:
        yield client


__all__ = [
    "get_settings",
    "get_hostaway_client",
]
