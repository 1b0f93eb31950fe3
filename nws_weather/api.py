"""Async client for the National Weather Service API.

All three lookups share one retry loop: transport failures and 5xx/429
responses are retried after a fixed delay, other statuses fail at once.
Every failure leaves this module as a ``WeatherServiceError``.
"""

import asyncio
import logging
from typing import Any

import httpx

from .config import DEFAULT_SETTINGS, Settings
from .errors import ErrorCode, WeatherServiceError
from .models import AlertsPayload, Coordinates, ForecastPayload, GridPointResult

logger = logging.getLogger(__name__)


def is_retryable_status(status_code: int) -> bool:
    return status_code >= 500 or status_code == 429


class NWSAPIClient:
    def __init__(self, settings: Settings = DEFAULT_SETTINGS):
        self.settings = settings

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.settings.user_agent, "Accept": "application/geo+json"}

    async def _backoff(self, attempt: int) -> None:
        logger.warning(f"Attempt {attempt} failed, retrying in {self.settings.retry_delay}s...")
        await asyncio.sleep(self.settings.retry_delay)

    async def request_json(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body, retrying per settings."""
        max_retries = self.settings.max_retries
        async with httpx.AsyncClient(follow_redirects=True, timeout=self.settings.request_timeout) as client:
            for attempt in range(1, max_retries + 1):
                try:
                    response = await client.get(url, headers=self.headers)
                    if not response.is_success:
                        message = f"HTTP {response.status_code}: {response.reason_phrase}"
                        retryable = is_retryable_status(response.status_code)
                        if attempt == max_retries or not retryable:
                            raise WeatherServiceError(
                                message, ErrorCode.API_REQUEST_FAILED, response.status_code, retryable
                            )
                        logger.debug(f"[NWS API] {url} returned {response.status_code}")
                        await self._backoff(attempt)
                        continue
                    return response.json()
                except (httpx.RequestError, ValueError) as e:
                    # ValueError covers a 2xx body that is not valid JSON
                    if attempt == max_retries:
                        raise WeatherServiceError(
                            f"Network error: {e}", ErrorCode.NETWORK_ERROR, None, True
                        ) from e
                    logger.debug(f"[NWS API] {url} request error: {e}")
                    await self._backoff(attempt)

        raise WeatherServiceError("Max retries exceeded", ErrorCode.MAX_RETRIES_EXCEEDED)

    async def fetch_alerts(self, state_code: str) -> AlertsPayload:
        url = f"{self.settings.api_base}/alerts?area={state_code}"
        return AlertsPayload.from_json(await self.request_json(url))

    async def fetch_grid_point(self, latitude: float, longitude: float) -> GridPointResult:
        coordinates = Coordinates(latitude, longitude).format(self.settings.coordinate_precision)
        url = f"{self.settings.api_base}/points/{coordinates}"
        return GridPointResult.from_json(await self.request_json(url))

    async def fetch_forecast(self, forecast_url: str) -> ForecastPayload:
        return ForecastPayload.from_json(await self.request_json(forecast_url))
