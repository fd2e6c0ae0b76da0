"""Logging setup for the ``mximss`` package logger."""

from __future__ import annotations

import logging

from mximss.core.config import Settings

PACKAGE_LOGGER = "mximss"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply level and format from settings to the package logger.

    A single stream handler is attached the first time; later calls only
    update its level and formatter.
    """
    if settings is None:
        settings = Settings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level.upper())

    handler = next(
        (h for h in logger.handlers if getattr(h, "_mximss_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._mximss_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(settings.log_format))
    return logger
