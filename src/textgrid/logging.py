"""Structlog loggers for table diagnostics."""

from __future__ import annotations

import logging as std_logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Structlog logger backed by the stdlib logger ``name``.

    Level filtering stays with stdlib logging, so an unconfigured host
    application sees no debug output from table rendering.
    """

    return structlog.wrap_logger(
        std_logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
