"""Typed shapes for the NWS payloads the bridge consumes.

Records keep upstream absence as ``None``; placeholders such as "Unknown"
are applied by the formatter, never here. The ``from_json`` constructors
raise ``ValueError`` when the payload does not have the documented shape.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from .validation import format_coordinates

Number = Union[int, float]


def _object(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Expected {what} to be an object, got {type(value).__name__}")
    return value


def _list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Expected {what} to be a list, got {type(value).__name__}")
    return value


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def format(self, precision: int = 4) -> str:
        return format_coordinates(self.latitude, self.longitude, precision)


@dataclass(frozen=True)
class AlertRecord:
    event: Optional[str] = None
    area_desc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None

    @classmethod
    def from_feature(cls, feature: Any) -> "AlertRecord":
        props = _object(_object(feature, "alert feature").get("properties"), "alert properties")
        return cls(
            event=_text(props.get("event")),
            area_desc=_text(props.get("areaDesc")),
            severity=_text(props.get("severity")),
            status=_text(props.get("status")),
            headline=_text(props.get("headline")),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    name: Optional[str] = None
    temperature: Optional[Number] = None
    temperature_unit: Optional[str] = None
    wind_speed: Optional[str] = None
    wind_direction: Optional[str] = None
    short_forecast: Optional[str] = None

    @classmethod
    def from_json(cls, data: Any) -> "ForecastPeriod":
        period = _object(data, "forecast period")
        temperature = period.get("temperature")
        if temperature is not None and (isinstance(temperature, bool) or not isinstance(temperature, (int, float))):
            raise ValueError(f"Expected temperature to be a number, got {temperature!r}")
        return cls(
            name=_text(period.get("name")),
            temperature=temperature,
            temperature_unit=_text(period.get("temperatureUnit")),
            wind_speed=_text(period.get("windSpeed")),
            wind_direction=_text(period.get("windDirection")),
            short_forecast=_text(period.get("shortForecast")),
        )


@dataclass(frozen=True)
class AlertsPayload:
    features: tuple = ()

    @classmethod
    def from_json(cls, data: Any) -> "AlertsPayload":
        features = _list(_object(data, "alerts response").get("features"), "features")
        return cls(features=tuple(AlertRecord.from_feature(f) for f in features))


@dataclass(frozen=True)
class GridPointResult:
    forecast_url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Any) -> "GridPointResult":
        props = _object(_object(data, "points response").get("properties"), "points properties")
        forecast = props.get("forecast")
        return cls(forecast_url=str(forecast) if forecast else None)


@dataclass(frozen=True)
class ForecastPayload:
    periods: tuple = ()

    @classmethod
    def from_json(cls, data: Any) -> "ForecastPayload":
        props = _object(_object(data, "forecast response").get("properties"), "forecast properties")
        periods = _list(props.get("periods"), "periods")
        return cls(periods=tuple(ForecastPeriod.from_json(p) for p in periods))
