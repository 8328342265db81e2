"""ENVBIND FILE PURPOSE
Purpose: map logical tags to environment variable names under a prefix.
Hot path: yes (once per bind; pure string work).
Feature flags: none.
Failure mode: EmptyTagError on empty tag; otherwise total.
"""

from __future__ import annotations

from envbind.errors import EmptyTagError


def normalize_tag(tag: str, prefix: str = "") -> str:
    """Return the lookup key for ``tag``: ``"port"`` -> ``"MYAPP_PORT"``.

    Dashes become underscores. A tag that already starts with the prefix
    (case-insensitively) and is longer than it is returned as-is.
    """
    if not tag:
        raise EmptyTagError()
    tag = tag.replace("-", "_")
    n = len(prefix)
    if len(tag) > n and tag[:n].upper() == prefix.upper():
        return tag
    return prefix + tag.upper()


def struct_key(tag: str, prefix: str = "") -> str:
    # record-field keys: no dash folding, no qualified-tag detection
    if not tag:
        raise EmptyTagError()
    return (prefix + tag).upper()
