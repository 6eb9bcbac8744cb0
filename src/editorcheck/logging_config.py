"""Logging configuration for editorcheck."""

import logging
import logging.config
from threading import RLock
from typing import Any, Dict, Optional

_CONFIG_LOCK = RLock()
_CONFIGURED = False

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def build_config(level: str = "WARNING", fmt: str = DEFAULT_FORMAT) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": fmt},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "standard",
            }
        },
        "loggers": {
            "editorcheck": {
                "level": level.upper(),
                "handlers": ["console"],
                "propagate": False,
            }
        },
    }


def configure(level: Optional[str] = None, fmt: Optional[str] = None, force: bool = False) -> None:
    """Configure the ``editorcheck`` logger exactly once (unless ``force``)."""
    global _CONFIGURED
    with _CONFIG_LOCK:
        if _CONFIGURED and not force:
            return
        logging.config.dictConfig(build_config(level or "WARNING", fmt or DEFAULT_FORMAT))
        _CONFIGURED = True

