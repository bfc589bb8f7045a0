"""
Process-wide logging setup for the demo API, the dashboard, and scripts.
Modules log through `logging.getLogger(__name__)`; this module only installs the root handler once.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Install the root handler, using `LOG_LEVEL` unless `level` is given."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    logging.getLogger(__name__).debug("Logging configured for %s (%s)", settings.PROJECT_NAME, settings.ENV)
    _LOGGING_CONFIGURED = True
