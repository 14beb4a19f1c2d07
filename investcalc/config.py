"""Default settings and logging setup for the API."""

import logging
from typing import Any, Dict

DEFAULTS: Dict[str, Any] = {
    "CORS_ORIGINS": [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    "MAX_YEARS": 1000,
    "LOG_LEVEL": "INFO",
}

ENV_PREFIX = "INVESTCALC"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send investcalc log records to stderr at the given level."""
    package_logger = logging.getLogger("investcalc")
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
