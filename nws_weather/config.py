"""Process-wide configuration for the weather bridge.

Values are fixed at import time and never mutated; pass a different
``Settings`` instance to the client when a test or embedding host needs
other values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    api_base: str = "https://api.weather.gov"
    user_agent: str = "weather-app/1.0"
    server_name: str = "weather"
    server_version: str = "1.0.0"
    coordinate_precision: int = 4
    max_retries: int = 3
    # seconds between attempts
    retry_delay: float = 1.0
    request_timeout: float = 30.0


DEFAULT_SETTINGS = Settings()
