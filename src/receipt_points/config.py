"""Configuration via environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080
    log_level: str = "INFO"


def get_host() -> str:
    """Return the RECEIPT_POINTS_HOST, defaulting to 0.0.0.0."""
    return os.environ.get("RECEIPT_POINTS_HOST", "0.0.0.0")  # noqa: S104


def get_port() -> int:
    """Return the RECEIPT_POINTS_PORT, defaulting to 8080.

    Must be an integer between 1 and 65535.
    """
    port_str = os.environ.get("RECEIPT_POINTS_PORT", "8080")
    try:
        port = int(port_str)
    except ValueError:
        msg = f"RECEIPT_POINTS_PORT must be an integer, got {port_str!r}"
        raise ValueError(msg) from None

    if not 1 <= port <= 65535:
        msg = f"RECEIPT_POINTS_PORT must be between 1 and 65535, got {port}"
        raise ValueError(msg)
    return port


def get_log_level() -> str:
    """Return the RECEIPT_POINTS_LOG_LEVEL, defaulting to INFO."""
    level = os.environ.get("RECEIPT_POINTS_LOG_LEVEL", "INFO").upper()
    if level not in _LOG_LEVELS:
        msg = (
            f"RECEIPT_POINTS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
            f"got {level!r}"
        )
        raise ValueError(msg)
    return level


def get_server_config() -> ServerConfig:
    """Build server configuration from environment variables.

    Optional: RECEIPT_POINTS_HOST (default 0.0.0.0),
    RECEIPT_POINTS_PORT (default 8080),
    RECEIPT_POINTS_LOG_LEVEL (default INFO)
    """
    return ServerConfig(host=get_host(), port=get_port(), log_level=get_log_level())


def configure_logging(level: str) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
