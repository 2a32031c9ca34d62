"""Shared test configuration and fixtures.

Hostaway is never contacted: every client is wired to an ``httpx.MockTransport``
backed by :class:`HostawayStub`, which records requests and serves canned
token and reservation responses.
"""

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hostaway_occupancy.api.deps import get_hostaway_client
from hostaway_occupancy.config import Settings, get_settings
from hostaway_occupancy.hostaway.client import HostawayClient
from hostaway_occupancy.main import app

BASE_URL = "https://api.hostaway.test/v1"


def make_settings(**overrides: Any) -> Settings:
    """Build settings isolated from the process environment and any .env file."""
    values: dict[str, Any] = {
        "hostaway_account_id": "12345",
        "hostaway_api_secret": "test-secret",
        "hostaway_base_url": BASE_URL,
        "hostaway_listing_ids": "42,77",
        "hostaway_reservations_limit": 300,
        "hostaway_timeout_seconds": 5,
        "months_to_report": 6,
        "notion_api_key": "",
        "notion_database_id": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


# ---------------------------------------------------------------------------
# Hostaway stub
# ---------------------------------------------------------------------------


class HostawayStub:
    """In-memory stand-in for the two Hostaway endpoints the client calls."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_status = 200
        self.token_body: Any = {"token_type": "Bearer", "expires_in": 3600, "access_token": "test-token"}
        self.token_error: type[httpx.RequestError] | None = None
        self.reservations_status = 200
        self.reservations_body: Any = {"status": "success", "result": []}
        self.reservations_error: type[httpx.RequestError] | None = None

    def with_reservations(self, *reservations: dict) -> "HostawayStub":
        self.reservations_body = {"status": "success", "result": list(reservations)}
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/accessTokens"):
            if self.token_error is not None:
                raise self.token_error("connection refused", request=request)
            return httpx.Response(self.token_status, json=self.token_body)
        if request.url.path.endswith("/reservations/"):
            if self.reservations_error is not None:
                raise self.reservations_error("read timed out", request=request)
            return httpx.Response(self.reservations_status, json=self.reservations_body)
        return httpx.Response(404, json={"status": "fail", "message": "not found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


def reservation(listing_id: Any, arrival: str, departure: str, status: str = "new", **extra: Any) -> dict:
    """Raw Hostaway reservation payload with the fields the sync reads."""
    return {
        "id": extra.pop("id", 1000),
        "listingMapId": listing_id,
        "channelName": "airbnbOfficial",
        "arrivalDate": arrival,
        "departureDate": departure,
        "status": status,
        **extra,
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings_factory():
    """Return the ``make_settings`` builder for tests that need variants."""
    return make_settings


@pytest.fixture
def make_reservation():
    """Return the raw reservation payload builder."""
    return reservation


@pytest.fixture
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture
def hostaway_stub() -> HostawayStub:
    return HostawayStub()


@pytest_asyncio.fixture
async def hostaway_client(
    test_settings: Settings, hostaway_stub: HostawayStub
) -> AsyncGenerator[HostawayClient, None]:
    """An open HostawayClient talking to the stub."""
    async with HostawayClient(test_settings, transport=hostaway_stub.transport) as client:
        yield client


@pytest_asyncio.fixture
async def client(
    test_settings: Settings, hostaway_stub: HostawayStub
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient for the app, wired to the Hostaway stub."""

    async def override_get_hostaway_client() -> AsyncGenerator[HostawayClient, None]:
        async with HostawayClient(test_settings, transport=hostaway_stub.transport) as hostaway:
            yield hostaway

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_hostaway_client] = override_get_hostaway_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()
