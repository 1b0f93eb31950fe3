from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    INVALID_STATE_CODE = "INVALID_STATE_CODE"
    INVALID_LATITUDE = "INVALID_LATITUDE"
    INVALID_LONGITUDE = "INVALID_LONGITUDE"
    NETWORK_ERROR = "NETWORK_ERROR"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"
    MAX_RETRIES_EXCEEDED = "MAX_RETRIES_EXCEEDED"
    FORECAST_URL_MISSING = "FORECAST_URL_MISSING"
    ALERTS_RETRIEVAL_FAILED = "ALERTS_RETRIEVAL_FAILED"
    FORECAST_RETRIEVAL_FAILED = "FORECAST_RETRIEVAL_FAILED"


class WeatherServiceError(Exception):
    """The only error type that leaves the client or the service."""

    def __init__(self, message: str, code: ErrorCode, status_code: Optional[int] = None, retryable: bool = False):
        super().__init__(message)
        self.message = message
        self.code = ErrorCode(code)
        self.status_code = status_code
        self.retryable = retryable

    def describe(self) -> str:
        return f"{self.code.value}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"WeatherServiceError(code={self.code.value}, message={self.message!r}, "
            f"status_code={self.status_code}, retryable={self.retryable})"
        )
