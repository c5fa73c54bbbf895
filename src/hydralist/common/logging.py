"""Shared logging helpers for hydralist."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hydralist.domain.reconciliation import LogCallback, LogLevel

_LEVELS: dict[str, int] = {
    "info": logging.INFO,
    "note": logging.INFO,
    "warn": logging.WARNING,
}


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def logging_callback(logger: logging.Logger) -> LogCallback:
    """Route reconciliation log events into ``logger``."""

    def emit(level: LogLevel, message: str) -> None:
        logger.log(_LEVELS.get(level, logging.INFO), "%s: %s", level, message)

    return emit
