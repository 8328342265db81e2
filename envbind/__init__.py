"""Bind environment variables to typed configuration destinations.

Typical startup use::

    from envbind import Ref, bind_evar, set_prefix

    set_prefix("MYAPP_")
    port = Ref.int32(8080)
    bind_evar("port", port)  # reads MYAPP_PORT when set
"""

from envbind.binder import (
    EnvBinder,
    bind_evar,
    decode_base64,
    decode_base64_bytes,
    default_binder,
    get_prefix,
    set_prefix,
)
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
from envbind.kinds import Kind, Ref
from envbind.naming import normalize_tag, struct_key
from envbind.registry import Binding, bind_all_evars, bind_many, evar_field

__all__ = [
    "BindAllError",
    "Binding",
    "DecodeError",
    "EmptyTagError",
    "EnvBindError",
    "EnvBinder",
    "Kind",
    "NilTargetError",
    "ParseError",
    "Ref",
    "SizeMismatchError",
    "UnsupportedTypeError",
    "bind_all_evars",
    "bind_evar",
    "bind_many",
    "decode_base64",
    "decode_base64_bytes",
    "default_binder",
    "evar_field",
    "get_prefix",
    "normalize_tag",
    "set_prefix",
    "struct_key",
]
