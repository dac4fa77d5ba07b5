"""Central logging configuration for the pow calculator."""
from __future__ import annotations

import logging
from logging.config import dictConfig


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure application-wide logging on stderr."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "level": level,
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "PowCalc": {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                }
            },
        }
    )
