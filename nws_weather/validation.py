import re
from decimal import ROUND_HALF_UP, Context, Decimal

from .errors import ErrorCode, WeatherServiceError

# matched against the raw input, so "ß" (upper-cased to "SS") is not accepted
_STATE_CODE = re.compile(r"[A-Za-z]{2}")
_WIDE = Context(prec=400)


def validate_state_code(state: str) -> str:
    """Normalize a state code to upper case and check it is two ASCII letters."""
    if not _STATE_CODE.fullmatch(state):
        raise WeatherServiceError(
            f"Invalid state code: {state}. Must be a two-letter state code (e.g., CA, NY)",
            ErrorCode.INVALID_STATE_CODE,
        )
    return state.upper()


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Check coordinate ranges; latitude is reported first when both are bad."""
    # written as inclusive ranges so NaN is rejected too
    if not -90 <= latitude <= 90:
        raise WeatherServiceError(
            f"Invalid latitude: {latitude}. Must be between -90 and 90",
            ErrorCode.INVALID_LATITUDE,
        )
    if not -180 <= longitude <= 180:
        raise WeatherServiceError(
            f"Invalid longitude: {longitude}. Must be between -180 and 180",
            ErrorCode.INVALID_LONGITUDE,
        )


def _fixed(value: float, precision: int) -> str:
    # exact binary value, ties rounded away from zero; wide context fits any finite double
    exponent = Decimal(1).scaleb(-precision)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP, context=_WIDE))


def format_coordinates(latitude: float, longitude: float, precision: int = 4) -> str:
    return f"{_fixed(latitude, precision)},{_fixed(longitude, precision)}"
