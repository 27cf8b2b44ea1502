"""HTTP client for resolving postal addresses to coordinates."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ...config import Settings, settings
from ...models.domain import GeoCoordinate

DEFAULT_GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    def resolve(self, address: str) -> GeoCoordinate | None: ...


class GoogleGeocoder:
    """Google Maps Geocoding API client.

    Without an API key every address resolves to a fixed approximate
    coordinate flagged with ``approximate=True``. Quotes computed this way
    are estimates, and each one is logged at WARNING level.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        fallback: GeoCoordinate | None = None,
        transport: httpx.BaseTransport | None = None,
        config: Settings | None = None,
    ) -> None:
        # unset arguments come from `config`, else the process-wide settings
        config = config or settings
        self.api_key = api_key if api_key is not None else config.google_maps_api_key
        self.base_url = base_url or config.geocoding_url or DEFAULT_GEOCODING_URL
        self.timeout = timeout if timeout is not None else config.geocoding_timeout_seconds
        self.fallback = fallback or GeoCoordinate(
            config.geocoding_fallback_lat,
            config.geocoding_fallback_lng,
            approximate=True,
        )
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 3.0)),
            transport=self._transport,
        )

    def resolve(self, address: str) -> GeoCoordinate | None:
        if not self.api_key:
            logger.warning(
                "Geocoding API key not set; using approximate coordinates "
                f"({self.fallback.latitude:.4f}, {self.fallback.longitude:.4f}) for '{address}'"
            )
            return GeoCoordinate(self.fallback.latitude, self.fallback.longitude, approximate=True)

        try:
            with self._get_client() as client:
                response = client.get(self.base_url, params={"address": address, "key": self.api_key})
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as exc:
            logger.error(f"Geocoding request timed out after {self.timeout:.1f}s: {exc}")
            return None
        except httpx.HTTPStatusError as exc:
            logger.error(f"Geocoding service returned HTTP {exc.response.status_code}")
            return None
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"Geocoding error: {exc}")
            return None

        results = payload.get("results") if isinstance(payload, dict) else None
        if not results:
            status_code = payload.get("status") if isinstance(payload, dict) else None
            logger.info(f"Geocoding returned no results for '{address}' (status={status_code})")
            return None

        try:
            location = results[0]["geometry"]["location"]
            return GeoCoordinate(float(location["lat"]), float(location["lng"]))
        except (KeyError, TypeError, ValueError) as exc:
            logger.error(f"Malformed geocoding result for '{address}': {exc}")
            return None
