"""Logging setup for applications embedding innvalidator."""

from __future__ import annotations

import logging

from innvalidator.core.config import ValidatorSettings

PACKAGE_LOGGER = "innvalidator"


def configure_logging(settings: ValidatorSettings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Safe to call more than once: the handler installed by a previous call is
    replaced rather than duplicated.

    Returns:
        The configured ``innvalidator`` logger.
    """
    if settings is None:
        settings = ValidatorSettings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_innvalidator", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    handler._innvalidator = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
