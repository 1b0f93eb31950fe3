from typing import Iterable

from .models import AlertRecord, ForecastPeriod


def format_alert(alert: AlertRecord) -> str:
    """Format an alert record into a readable block."""
    return "\n".join([
        f"Event: {alert.event or 'Unknown'}",
        f"Area: {alert.area_desc or 'Unknown'}",
        f"Severity: {alert.severity or 'Unknown'}",
        f"Status: {alert.status or 'Unknown'}",
        f"Headline: {alert.headline or 'No headline'}",
        "---",
    ])


def format_forecast_period(period: ForecastPeriod) -> str:
    """Format a single forecast period into a readable block."""
    temperature = "Unknown" if period.temperature is None else period.temperature
    return "\n".join([
        f"{period.name or 'Unknown'}:",
        f"Temperature: {temperature}°{period.temperature_unit or 'F'}",
        f"Wind: {period.wind_speed or 'Unknown'} {period.wind_direction or ''}",
        f"{period.short_forecast or 'No forecast available'}",
        "---",
    ])


def format_alerts(alerts: Iterable[AlertRecord], state_code: str) -> str:
    blocks = [format_alert(alert) for alert in alerts]
    if not blocks:
        return f"No active alerts for {state_code}"
    return f"Active alerts for {state_code}:\n\n" + "\n".join(blocks)


def format_forecast(periods: Iterable[ForecastPeriod], latitude: float, longitude: float) -> str:
    blocks = [format_forecast_period(period) for period in periods]
    if not blocks:
        return "No forecast periods available"
    return f"Forecast for {latitude}, {longitude}:\n\n" + "\n".join(blocks)
