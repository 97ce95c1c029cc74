"""Structured logging for the resolver.

Every module logs JSON events through ``get_logger``; the level comes
from ``KINSHIP_LOG_LEVEL``.
"""
from __future__ import annotations

import logging

import structlog

from .config import SETTINGS

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def level_number(name: str) -> int:
    """Numeric level for ``name``; unknown names fall back to INFO."""
    return LEVELS.get(name.strip().upper(), logging.INFO)


def configure_logging(level: str = "INFO") -> None:
    threshold = level_number(level)
    logging.basicConfig(format="%(message)s", level=threshold)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "kinship"):
    # PrintLogger drops the factory name, so carry it as an event key
    return structlog.get_logger().bind(logger=name)


configure_logging(SETTINGS.log_level)
