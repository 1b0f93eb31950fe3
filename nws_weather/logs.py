import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_FILE_NAME = "weather_server.log"


def configure_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> str:
    """Send the package's logs to a file inside ``log_dir`` (default ``$LOG_DIR`` or 'logs').

    The MCP stdio transport owns stdout, so the server never logs to the console.
    Calling this again with the same directory does not add a second handler.
    Returns the absolute path of the log file.
    """
    log_dir = log_dir or os.environ.get("LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.abspath(os.path.join(log_dir, LOG_FILE_NAME))

    logger = logging.getLogger("nws_weather")
    handler_exists = any(
        isinstance(h, logging.FileHandler) and os.path.abspath(h.baseFilename) == log_file
        for h in logger.handlers
    )
    if not handler_exists:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return log_file
