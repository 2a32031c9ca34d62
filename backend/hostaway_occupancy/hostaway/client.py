"""Async Hostaway API client — access token exchange and reservation listing."""

import json
import logging
from datetime import date
from typing import Any

import httpx

from hostaway_occupancy.config import Settings
from hostaway_occupancy.schemas.reservation import Reservation
from hostaway_occupancy.services.months import format_api_date

logger = logging.getLogger(__name__)


class HostawayError(Exception):
    """Base class for Hostaway API failures."""


class HostawayAuthError(HostawayError):
    """Raised when the client-credentials token exchange fails."""

    def __init__(self, message: str, status_code: int | None = None, response_data: Any = None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(message)


class HostawayFetchError(HostawayError):
    """Raised when the reservation listing call fails."""


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HostawayClient:
    """Thin async wrapper around the Hostaway REST API.

    Usage::

        async with HostawayClient(settings) as client:
            token = await client.get_access_token()
            reservations = await client.fetch_reservations(token, start, end)

    ``transport`` lets tests substitute an ``httpx.MockTransport``.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HostawayClient":
        self._client = httpx.AsyncClient(
            base_url=self._settings.hostaway_base_url,
            timeout=httpx.Timeout(self._settings.hostaway_timeout_seconds),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("HostawayClient must be used as an async context manager")
        return self._client

    async def get_access_token(self) -> str:
        """Exchange the account id and API secret for a bearer token."""
        data = {
            "grant_type": "client_credentials",
            "client_id": self._settings.hostaway_account_id,
            "client_secret": self._settings.hostaway_api_secret,
            "scope": "general",
        }
        logger.info("Attempting to get Access Token...")

        try:
            response = await self.http.post("/accessTokens", data=data)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            body = _response_body(exc.response)
            logger.error("API Request Failed with Status: %s", status_code)
            raise HostawayAuthError(
                f"Hostaway API Auth Error: {status_code} - {json.dumps(body)}",
                status_code=status_code,
                response_data=body,
            ) from exc
        except httpx.RequestError as exc:
            logger.error("Authentication Error: %s", exc)
            raise HostawayAuthError(f"Authentication Failed: {exc}") from exc

        payload = _response_body(response)
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise HostawayAuthError(
                "Authentication Failed: response did not include an access_token",
                status_code=response.status_code,
                response_data=payload,
            )
        logger.info("Token received successfully.")
        return token

    async def fetch_reservations(self, token: str, start_date: date, end_date: date) -> list[Reservation]:
        """List reservations whose arrival date falls within [start_date, end_date]."""
        params = {
            "limit": self._settings.hostaway_reservations_limit,
            "arrivalStartDate": format_api_date(start_date),
            "arrivalEndDate": format_api_date(end_date),
        }
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        logger.info("Fetching reservations from Hostaway (%s)...", params)

        try:
            response = await self.http.get("/reservations/", params=params, headers=headers)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching Hostaway reservations: %s", exc)
            raise HostawayFetchError("Failed to fetch reservation data from Hostaway.") from exc

        items = (payload.get("result") if isinstance(payload, dict) else None) or []
        if not isinstance(items, list):
            logger.error("Unexpected reservations result type: %s", type(items).__name__)
            raise HostawayFetchError("Failed to fetch reservation data from Hostaway.")
        reservations = [Reservation.from_payload(item) for item in items]
        logger.info("Successfully fetched %d reservations.", len(reservations))
        return reservations
