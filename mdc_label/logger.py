"""Logging helpers for mdc-label."""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "mdc_label"


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger under the ``mdc_label`` namespace.

    Args:
        name: Logger name, typically ``__name__``.

    Returns:
        logging.Logger: Logger whose name starts with ``mdc_label.``.

    Examples:
        get_logger("scanner").name  # "mdc_label.scanner"
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
