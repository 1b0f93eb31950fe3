import logging
import signal
import sys
from typing import Annotated

from pydantic import Field

from .config import DEFAULT_SETTINGS
from .errors import WeatherServiceError
from .logs import configure_logging
from .service import WeatherService

logger = logging.getLogger(__name__)

# Functions (and kwargs for mcp.tool) waiting for the MCP server to be created.
# This avoids importing the MCP SDK at module import time.
_REGISTERED_FUNCS: list[tuple] = []
_tools_registered = False

# The MCP instance is created lazily via `get_mcp()` / `register_tools_with_mcp()`.
mcp = None
_service: WeatherService | None = None


def get_mcp():
    """Lazily initialize and return the FastMCP server instance."""
    global mcp
    if mcp is not None:
        return mcp
    from mcp.server.fastmcp import FastMCP
    mcp = FastMCP(DEFAULT_SETTINGS.server_name)
    return mcp


def get_service() -> WeatherService:
    global _service
    if _service is None:
        _service = WeatherService()
    return _service


def register_tools_with_mcp():
    """Register all previously-decorated functions with the MCP instance."""
    global _tools_registered
    if _tools_registered:
        return
    m = get_mcp()
    for fn, kwargs in _REGISTERED_FUNCS:
        m.tool(**kwargs)(fn)
    _tools_registered = True


def tool(*, name: str, description: str):
    """Record a tool; MCP registration happens in `run_server`.

    The input schema is derived by FastMCP from the function's annotated parameters.
    """
    def decorator(fn):
        _REGISTERED_FUNCS.append((fn, {"name": name, "description": description}))
        return fn
    return decorator


async def get_tool_specs() -> list[dict]:
    """Return the tools as the MCP server advertises them."""
    register_tools_with_mcp()
    tools = await get_mcp().list_tools()
    return [
        {"name": t.name, "description": t.description, "input_schema": dict(t.inputSchema)}
        for t in tools
    ]


def error_text(error: Exception) -> str:
    if isinstance(error, WeatherServiceError):
        return f"Error: {error.describe()}"
    return "Error: Unknown error occurred"


StateCode = Annotated[str, Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)")]
Latitude = Annotated[float, Field(ge=-90, le=90, description="Latitude of the location")]
Longitude = Annotated[float, Field(ge=-180, le=180, description="Longitude of the location")]


@tool(name="get-alerts", description="Get weather alerts for a state")
async def get_alerts(state: StateCode) -> str:
    """Get weather alerts for a US state.

    Args:
        state: Two-letter US state code (e.g. CA, NY)
    """
    try:
        return await get_service().get_alerts(state)
    except WeatherServiceError as e:
        logger.warning(f"[get-alerts] {e.describe()}")
        return error_text(e)
    except Exception as e:
        logger.exception(f"[get-alerts] Unexpected error: {e}")
        return error_text(e)


@tool(name="get-forecast", description="Get weather forecast for a location")
async def get_forecast(latitude: Latitude, longitude: Longitude) -> str:
    """Get weather forecast for a location.

    Args:
        latitude: Latitude of the location
        longitude: Longitude of the location
    """
    try:
        return await get_service().get_forecast(latitude, longitude)
    except WeatherServiceError as e:
        logger.warning(f"[get-forecast] {e.describe()}")
        return error_text(e)
    except Exception as e:
        logger.exception(f"[get-forecast] Unexpected error: {e}")
        return error_text(e)


def _terminate(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    raise KeyboardInterrupt


def run_server(transport: str = "stdio") -> None:
    """Run the MCP server (convenience wrapper)."""
    # Ensure MCP instance is initialized and tools are registered prior to run.
    register_tools_with_mcp()
    m = get_mcp()
    logger.info(f"Weather MCP server {DEFAULT_SETTINGS.server_version} running on {transport}")
    m.run(transport=transport)


def main() -> None:
    configure_logging()
    # SIGTERM takes the same clean exit path as Ctrl-C
    signal.signal(signal.SIGTERM, _terminate)
    try:
        run_server()
    except KeyboardInterrupt:
        logger.info("Received interrupt, shutting down gracefully...")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
