"""ENVBIND FILE PURPOSE
Purpose: the library's own environment flags (safe defaults).
Hot path: yes (read-only env lookups; lightweight).
Feature flags: ENVBIND_DEBUG.
Failure mode: safe defaults when unset.
"""

from __future__ import annotations

import os

_TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in _TRUTHY


def is_debug() -> bool:
    return env_flag("ENVBIND_DEBUG", "0")
