from __future__ import annotations

"""Logging setup for the ``tunekit`` logger hierarchy.

Modules log through ``logging.getLogger(__name__)``; nothing here runs on
import, so applications keep full control of the root logger.
"""

import logging
from typing import Optional, Union

from tunekit.runtime.settings import get_log_level

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _SkipWorkerNoise(logging.Filter):
    """Drop joblib/loky chatter that leaks into the tunekit handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not record.name.startswith(("joblib", "loky"))


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stream handler to the ``tunekit`` logger (idempotent)."""
    logger = logging.getLogger("tunekit")
    logger.setLevel(level if level is not None else get_log_level())

    if not any(getattr(h, "_tunekit_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler.addFilter(_SkipWorkerNoise())
        handler._tunekit_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


__all__ = ["configure_logging"]
