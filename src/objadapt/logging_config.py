"""Logging setup for the objadapt CLI and embedding applications."""
from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Optional, Union

LOG_LEVEL_ENV = "OBJADAPT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_config_lock = threading.Lock()
_handler: Optional[logging.Handler] = None


def setup_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """Attach a stderr handler to the ``objadapt`` logger (idempotent).

    ``level`` wins over the ``OBJADAPT_LOG_LEVEL`` environment variable;
    without either the level is WARNING.
    """

    global _handler
    resolved = _resolve_level(level)
    root = logging.getLogger("objadapt")
    with _config_lock:
        if _handler is None:
            _handler = logging.StreamHandler(sys.stderr)
            _handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(_handler)
        root.setLevel(resolved)
    return root


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or logging.WARNING
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'")
    return value
