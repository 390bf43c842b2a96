"""
Logging setup for the cart service.

Usage:
    from shopcart.logging import get_logger, sanitize_id_for_logging
    logger = get_logger(__name__)

    logger.info(f"Cleared cart {sanitize_id_for_logging(session_id)}")
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_PRODUCTION = "%(levelname)s - %(name)s - %(message)s"

# Session tokens are bearer credentials: only this many characters reach the log
TOKEN_PREFIX_LENGTH = 8


def _configure_root_logger() -> None:
    """Attach a stdout handler unless the host (pytest, uvicorn) already did."""
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    is_production = os.environ.get("SHOPCART_ENV", "development").lower() == "production"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_PRODUCTION if is_production else LOG_FORMAT))
    root.addHandler(handler)

    # TestClient requests are logged by httpx at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Get a logger (typically for __name__)."""
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | int | None) -> str:
    """
    Shorten a session token or id for logging.

    Control characters are escaped so a crafted token cannot forge log
    lines (CWE-117), then the value is cut to TOKEN_PREFIX_LENGTH.

    Returns:
        Sanitized prefix, or "N/A" for a missing value
    """
    if id_value is None or id_value == "":
        return "N/A"
    safe_value = (
        str(id_value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    return safe_value[:TOKEN_PREFIX_LENGTH]


__all__ = [
    "get_logger",
    "sanitize_id_for_logging",
]
