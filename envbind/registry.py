"""ENVBIND FILE PURPOSE
Purpose: bulk binding from declarative (tag, kind, setter) lists and annotated config records.
Hot path: no (startup only).
Feature flags: ENVBIND_DEBUG.
Failure mode: every field is attempted; all parse failures raised together as BindAllError.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from envbind.binder import EnvBinder, default_binder
from envbind.errors import BindAllError, EnvBindError, NilTargetError, ParseError, UnsupportedTypeError
from envbind.kinds import Kind
from envbind.logging import trace
from envbind.naming import struct_key

EVAR = "evar"

# record fields: only these types are bound, anything else is skipped.
# string forms cover annotations left unevaluated by `from __future__ import annotations`
_FIELD_KINDS: dict[Any, Kind] = {
    str: Kind.STRING,
    bool: Kind.BOOL,
    int: Kind.INT64,
    "str": Kind.STRING,
    "bool": Kind.BOOL,
    "int": Kind.INT64,
}


@dataclass(frozen=True)
class Binding:
    tag: str
    kind: Kind
    setter: Callable[[Any], Any]


def evar_field(tag: str, **kwargs: Any) -> Any:
    """dataclasses.field() carrying the ``evar`` binding annotation."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[EVAR] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def _dataclass_fields(config: Any) -> list[tuple[str, str, Any]]:
    # f.type per field: resolving every class annotation fails on TYPE_CHECKING-only names
    out = []
    for f in dataclasses.fields(config):
        tag = f.metadata.get(EVAR)
        if tag:
            out.append((f.name, tag, f.type))
    return out


def _model_fields(config: BaseModel) -> list[tuple[str, str, Any]]:
    out = []
    for name, info in type(config).model_fields.items():
        extra = info.json_schema_extra
        tag = extra.get(EVAR) if isinstance(extra, dict) else None
        if tag and not info.frozen:
            out.append((name, tag, info.annotation))
    return out


def _writable(config: Any) -> bool:
    if isinstance(config, BaseModel):
        return not config.model_config.get("frozen", False)
    return not type(config).__dataclass_params__.frozen


def _assign(config: Any, name: str, key: str, kind: Kind, parsed: Any) -> None:
    try:
        setattr(config, name, parsed)
    except ValidationError as e:
        # validate_assignment constraints, e.g. ge=/le=
        reason = "; ".join(err["msg"] for err in e.errors())
        raise ParseError(key, kind.value, reason) from e


def bind_all_evars(config: Any, binder: EnvBinder | None = None) -> list[str]:
    """Bind every annotated str/bool/int field of a dataclass or pydantic model.

    Keys are ``(prefix + tag).upper()``. Returns the field names that were set.
    """
    if config is None:
        raise NilTargetError()
    if isinstance(config, BaseModel):
        fields = _model_fields(config)
    elif dataclasses.is_dataclass(config) and not isinstance(config, type):
        fields = _dataclass_fields(config)
    else:
        raise UnsupportedTypeError(type(config).__name__)

    binder = binder or default_binder()
    if not _writable(config):
        trace("EVARS_SKIPPED_READONLY", type=type(config).__name__)
        return []

    bound: list[str] = []
    errors: list[EnvBindError] = []
    for name, tag, annotation in fields:
        kind = _FIELD_KINDS.get(annotation)
        if kind is None:
            continue
        key = struct_key(tag, binder.prefix)
        text = binder.get(key)
        if text is None:
            continue
        try:
            _assign(config, name, key, kind, binder.coerce(key, kind, text))
        except EnvBindError as e:
            errors.append(e)
            continue
        bound.append(name)

    trace("EVARS_BOUND", fields=bound, failed=len(errors))
    if errors:
        raise BindAllError(errors)
    return bound


def bind_many(bindings: list[Binding], binder: EnvBinder | None = None) -> list[str]:
    return (binder or default_binder()).bind_many(bindings)
