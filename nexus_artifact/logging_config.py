"""Logging setup shared by the API and library entrypoints."""

from __future__ import annotations

import logging
import logging.config
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Install a console handler on the root logger once per process."""
    global _configured
    if _configured:
        if level:
            logging.getLogger().setLevel(level.upper())
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": (level or "INFO").upper(),
            },
            "loggers": {
                # httpx logs every request at INFO
                "httpx": {"level": "WARNING"},
            },
        }
    )
    _configured = True
