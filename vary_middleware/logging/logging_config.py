"""
vary_middleware.logging.logging_config

Purpose:
    Central logging configuration for the example service.
    Routes app logs and uvicorn logs through one handler/formatter at the
    level taken from Settings.log_level.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    return handler


def configure_logging(level: str = "INFO") -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    handler = _make_handler(numeric_level)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)

    # Uvicorn attaches its own handlers; replace them so our formatter wins.
    for name in UVICORN_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False
