"""ENVBIND FILE PURPOSE
Purpose: exception hierarchy for binding and decoding failures.
Hot path: no (raised on failure only).
Feature flags: none.
Failure mode: every failure reaches the caller; unset variables are never errors.
"""

from __future__ import annotations

from typing import Any


class EnvBindError(Exception):
    """Base class for all envbind exceptions."""
    code = "ENVBIND_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EmptyTagError(EnvBindError, ValueError):
    """Raised when the tag argument is empty."""
    code = "EMPTY_TAG"

    def __init__(self, message: str = "tag argument may not be empty"):
        super().__init__(message)


class NilTargetError(EnvBindError, ValueError):
    """Raised when the destination is None."""
    code = "NIL_TARGET"

    def __init__(self, message: str = "target argument may not be None"):
        super().__init__(message)


class UnsupportedTypeError(EnvBindError, TypeError):
    """Raised when a destination has no coercion rule."""
    code = "UNSUPPORTED_TYPE"

    def __init__(self, type_name: str):
        super().__init__(f"unsupported target type: {type_name}", {"type": type_name})
        self.type_name = type_name


class ParseError(EnvBindError, ValueError):
    """Raised when a present value cannot be converted to the destination kind."""
    code = "PARSE_ERROR"

    def __init__(self, key: str, kind: str, reason: str):
        super().__init__(
            f"cannot parse {key} as {kind}: {reason}",
            {"key": key, "kind": kind, "reason": reason},
        )
        self.key = key
        self.kind = kind
        self.reason = reason


class DecodeError(EnvBindError, ValueError):
    """Raised for malformed base64 payloads."""
    code = "DECODE_ERROR"

    def __init__(self, reason: str):
        super().__init__(f"invalid base64 payload: {reason}", {"reason": reason})
        self.reason = reason


class SizeMismatchError(EnvBindError, ValueError):
    """Raised when a decoded payload length differs from the expected size."""
    code = "SIZE_MISMATCH"

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"target size mismatch: expected {expected} bytes, got {actual}",
            {"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class BindAllError(EnvBindError):
    """Raised by bulk binding after every entry was attempted; holds all failures."""
    code = "BIND_ALL_ERROR"

    def __init__(self, errors: list[EnvBindError]):
        keys = [getattr(e, "key", "?") for e in errors]
        super().__init__(f"{len(errors)} binding(s) failed: {', '.join(keys)}", {"keys": keys})
        self.errors = list(errors)
