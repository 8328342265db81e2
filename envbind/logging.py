"""ENVBIND FILE PURPOSE
Purpose: logging setup with strict debug gating; trace events for binding calls.
Hot path: yes (bind calls may trace; default is quiet).
Feature flags: ENVBIND_DEBUG.
Failure mode: never crash due to logging; variable contents are never written.
"""

from __future__ import annotations

import logging
from typing import Any

from envbind.config import is_debug

LOGGER_NAME = "envbind"

# env values may be secrets: fields with these names are masked in trace lines
REDACTED_FIELDS = frozenset({"value", "text", "raw"})
REDACTED = "<redacted>"


def _configure() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if is_debug() else logging.WARNING)
    return logger


logger = _configure()


def trace(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Log ``EVENT k=v ...`` when ENVBIND_DEBUG is on."""
    if not is_debug():
        return
    parts = [event]
    for k, v in fields.items():
        parts.append(f"{k}={REDACTED if k in REDACTED_FIELDS else v}")
    logger.log(level, "%s", " ".join(parts))
