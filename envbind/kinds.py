"""ENVBIND FILE PURPOSE
Purpose: closed set of destination kinds, their text parsers, and the Ref destination holder.
Hot path: yes (one parse per bound variable; pure functions).
Feature flags: none.
Failure mode: parsers raise ValueError with a short reason; callers wrap it.
"""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class Kind(str, Enum):
    STRING = "string"
    STRING_LIST = "string_list"
    BOOL = "bool"
    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"


INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT_RE = re.compile(r"(?:[+-]?(?:inf|infinity)|nan)", re.IGNORECASE)


def parse_string(text: str) -> str:
    return text


def parse_string_list(text: str) -> list[str]:
    # "" -> [""]: present-but-empty stays distinguishable from unset
    return text.split(",")


def parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid syntax {text!r}")


def _parse_int(text: str, lo: int, hi: int) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax {text!r}")
    n = int(text, 10)
    if n < lo or n > hi:
        raise ValueError(f"value out of range {text!r}")
    return n


def parse_int32(text: str) -> int:
    return _parse_int(text, INT32_MIN, INT32_MAX)


def parse_int64(text: str) -> int:
    return _parse_int(text, INT64_MIN, INT64_MAX)


def parse_float64(text: str) -> float:
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text)
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax {text!r}")
    v = float(text)
    if math.isinf(v):
        raise ValueError(f"value out of range {text!r}")
    return v


def parse_float32(text: str) -> float:
    v = parse_float64(text)
    try:
        (narrowed,) = struct.unpack("f", struct.pack("f", v))
    except OverflowError as e:
        raise ValueError(f"value out of range {text!r}") from e
    return narrowed


_PARSERS: dict[Kind, Callable[[str], Any]] = {
    Kind.STRING: parse_string,
    Kind.STRING_LIST: parse_string_list,
    Kind.BOOL: parse_bool,
    Kind.INT: parse_int64,
    Kind.INT32: parse_int32,
    Kind.INT64: parse_int64,
    Kind.FLOAT32: parse_float32,
    Kind.FLOAT64: parse_float64,
}


def parse(kind: Kind, text: str) -> Any:
    return _PARSERS[kind](text)


def infer_kind(value: Any) -> Kind | None:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, list):
        return Kind.STRING_LIST
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT64
    return None


@dataclass
class Ref:
    """Writable destination for a bound value.

    Without an explicit ``kind`` the kind is inferred from the type of
    ``value`` when binding; values of any other type are unsupported.
    """

    value: Any = None
    kind: Kind | None = None

    def resolved_kind(self) -> Kind | None:
        if self.kind is not None:
            return self.kind
        return infer_kind(self.value)

    @classmethod
    def string(cls, default: str = "") -> Ref:
        return cls(default, Kind.STRING)

    @classmethod
    def string_list(cls, default: list[str] | None = None) -> Ref:
        return cls(list(default or []), Kind.STRING_LIST)

    @classmethod
    def boolean(cls, default: bool = False) -> Ref:
        return cls(default, Kind.BOOL)

    @classmethod
    def integer(cls, default: int = 0) -> Ref:
        return cls(default, Kind.INT)

    @classmethod
    def int32(cls, default: int = 0) -> Ref:
        return cls(default, Kind.INT32)

    @classmethod
    def int64(cls, default: int = 0) -> Ref:
        return cls(default, Kind.INT64)

    @classmethod
    def float32(cls, default: float = 0.0) -> Ref:
        return cls(default, Kind.FLOAT32)

    @classmethod
    def float64(cls, default: float = 0.0) -> Ref:
        return cls(default, Kind.FLOAT64)
