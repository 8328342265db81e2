"""ENVBIND FILE PURPOSE
Purpose: bind environment variables to typed destinations under a naming prefix.
Hot path: yes (startup config loading; one env lookup per call).
Feature flags: ENVBIND_DEBUG (trace lines only, never values).
Failure mode: unset variable => no-op; bad input => typed EnvBindError to the caller.
"""

from __future__ import annotations

import base64
import binascii
import logging
import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from envbind.errors import (
    BindAllError,
    DecodeError,
    EmptyTagError,
    EnvBindError,
    NilTargetError,
    ParseError,
    SizeMismatchError,
    UnsupportedTypeError,
)
from envbind.kinds import Kind, Ref, parse
from envbind.logging import trace
from envbind.naming import normalize_tag

if TYPE_CHECKING:
    from envbind.registry import Binding


@dataclass(frozen=True)
class EnvBinder:
    """Prefix context for binding calls.

    ``environ`` defaults to the live ``os.environ``, read on every call.
    """

    prefix: str = ""
    environ: Mapping[str, str] | None = None

    def _env(self) -> Mapping[str, str]:
        return os.environ if self.environ is None else self.environ

    def with_prefix(self, prefix: str) -> EnvBinder:
        return replace(self, prefix=prefix)

    def key(self, tag: str) -> str:
        return normalize_tag(tag, self.prefix)

    def get(self, key: str) -> str | None:
        return self._env().get(key)

    def lookup(self, tag: str) -> str | None:
        return self.get(self.key(tag))

    def coerce(self, key: str, kind: Kind, text: str) -> Any:
        try:
            return parse(kind, text)
        except ValueError as e:
            trace("EVAR_PARSE_FAILED", logging.WARNING, key=key, kind=kind.value)
            raise ParseError(key, kind.value, str(e)) from e

    def bind_evar(self, tag: str, target: Ref | None) -> bool:
        """Assign the variable named by ``tag`` to ``target.value`` if it is set.

        Returns True when the destination was written, False when the
        variable is unset (destination untouched).
        """
        if not tag:
            raise EmptyTagError()
        if target is None:
            raise NilTargetError()
        if not isinstance(target, Ref):
            raise UnsupportedTypeError(type(target).__name__)
        kind = target.resolved_kind()
        if kind is None:
            raise UnsupportedTypeError(type(target.value).__name__)

        key = self.key(tag)
        text = self.get(key)
        if text is None:
            trace("EVAR_UNSET", key=key)
            return False

        target.value = self.coerce(key, kind, text)
        trace("EVAR_BOUND", key=key, kind=kind.value)
        return True

    def bind_many(self, bindings: Iterable[Binding]) -> list[str]:
        """Apply every binding; raise BindAllError listing all failures at the end.

        Returns the tags that were set.
        """
        bound: list[str] = []
        errors: list[EnvBindError] = []
        for b in bindings:
            try:
                if not isinstance(b.kind, Kind):
                    raise UnsupportedTypeError(type(b.kind).__name__)
                key = self.key(b.tag)
                text = self.get(key)
                if text is None:
                    continue
                b.setter(self.coerce(key, b.kind, text))
                bound.append(b.tag)
            except EnvBindError as e:
                errors.append(e)

        trace("EVARS_BOUND", tags=bound, failed=len(errors))
        if errors:
            raise BindAllError(errors)
        return bound

    def decode_base64(self, value: str, target: Ref | None, size: int = 0) -> None:
        decode_base64(value, target, size)


def decode_base64_bytes(value: str, size: int = 0) -> bytes:
    # std alphabet, padding required; CR/LF ignored
    cleaned = value.replace("\r", "").replace("\n", "")
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(str(e)) from e
    if size > 0 and len(raw) != size:
        raise SizeMismatchError(size, len(raw))
    if size <= 0:
        trace("B64_UNCHECKED_SIZE", decoded_len=len(raw))
    return raw


def decode_base64(value: str, target: Ref | None, size: int = 0) -> None:
    """Decode ``value`` and store it as text in ``target.value``.

    With ``size > 0`` the decoded length must match exactly. With ``size == 0``
    nothing is checked, so a malformed but decodable payload is accepted with
    wrong contents; pass the expected size whenever it is known.
    """
    if target is None:
        raise NilTargetError()
    if not isinstance(target, Ref):
        raise UnsupportedTypeError(type(target).__name__)
    if target.kind not in (None, Kind.STRING):
        raise UnsupportedTypeError(target.kind.value)
    raw = decode_base64_bytes(value, size)
    target.value = raw.decode("utf-8", errors="surrogateescape")


_DEFAULT = EnvBinder()


def set_prefix(value: str) -> None:
    global _DEFAULT
    _DEFAULT = _DEFAULT.with_prefix(value)


def get_prefix() -> str:
    return _DEFAULT.prefix


def default_binder() -> EnvBinder:
    return _DEFAULT


def bind_evar(tag: str, target: Ref | None) -> bool:
    return _DEFAULT.bind_evar(tag, target)
