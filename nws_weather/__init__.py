"""NWS weather lookups exposed as MCP tools.

The MCP server module is imported lazily so that `python -m nws_weather.server`
does not trigger a `RuntimeWarning` and so the client and service can be used
without the MCP SDK loaded.
"""

from importlib import import_module

from .api import NWSAPIClient
from .config import DEFAULT_SETTINGS, Settings
from .errors import ErrorCode, WeatherServiceError
from .service import WeatherService
from .validation import validate_coordinates, validate_state_code

__all__ = [
    "DEFAULT_SETTINGS",
    "ErrorCode",
    "NWSAPIClient",
    "Settings",
    "WeatherService",
    "WeatherServiceError",
    "validate_coordinates",
    "validate_state_code",
    "get_mcp",
    "get_tool_specs",
    "run_server",
]

# Attributes provided by the server module, imported on first access.
_server_attrs = {
    "get_mcp",
    "get_tool_specs",
    "run_server",
}


def _load_server():
    return import_module(".server", __package__)


def __getattr__(name: str):
    if name in _server_attrs:
        return getattr(_load_server(), name)
    raise AttributeError(f"module {__name__} has no attribute {name}")


def __dir__():
    return sorted(list(globals().keys()) + list(_server_attrs))
