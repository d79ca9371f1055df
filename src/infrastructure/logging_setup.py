"""
infrastructure.logging_setup - One-time logging configuration for entry points.

Library modules only ever call logging.getLogger(__name__); the REST app
and the CLI call configure_logging() once at startup.
"""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs every model request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
