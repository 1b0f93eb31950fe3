"""Entry points for the two weather lookups.

Each call validates its input, makes one or two upstream requests and
formats the result. Failures are raised as ``WeatherServiceError``: typed
errors pass through untouched, anything else is wrapped in the
capability's ``*_RETRIEVAL_FAILED`` kind.
"""

import logging
from typing import Optional

from .api import NWSAPIClient
from .errors import ErrorCode, WeatherServiceError
from .formatting import format_alerts, format_forecast
from .validation import validate_coordinates, validate_state_code

logger = logging.getLogger(__name__)


class WeatherService:
    def __init__(self, client: Optional[NWSAPIClient] = None):
        self.client = client or NWSAPIClient()

    async def get_alerts(self, state: str) -> str:
        try:
            state_code = validate_state_code(state)
            logger.info(f"[Alerts] Fetching active alerts for {state_code}")
            payload = await self.client.fetch_alerts(state_code)
            return format_alerts(payload.features, state_code)
        except WeatherServiceError:
            raise
        except Exception as e:
            raise WeatherServiceError(
                f"Failed to retrieve alerts: {e}", ErrorCode.ALERTS_RETRIEVAL_FAILED
            ) from e

    async def get_forecast(self, latitude: float, longitude: float) -> str:
        try:
            validate_coordinates(latitude, longitude)
            logger.info(f"[Forecast] Resolving grid point for {latitude}, {longitude}")
            grid_point = await self.client.fetch_grid_point(latitude, longitude)
            if not grid_point.forecast_url:
                raise WeatherServiceError(
                    "Failed to get forecast URL from grid point data", ErrorCode.FORECAST_URL_MISSING
                )

            forecast = await self.client.fetch_forecast(grid_point.forecast_url)
            return format_forecast(forecast.periods, latitude, longitude)
        except WeatherServiceError:
            raise
        except Exception as e:
            raise WeatherServiceError(
                f"Failed to retrieve forecast: {e}", ErrorCode.FORECAST_RETRIEVAL_FAILED
            ) from e
