"""pycip-codec: CIP data type tags, sizes, labels and fixed-width unit decoding."""

__version__ = "0.1.0"

from .decode import DecodedValue, DecodeResult, decode, decode_bytes, decode_many, string_payload_text
from .errors import InvalidTypeError, PyCIPCodecError, ShortReadError, UnsupportedTagError
from .normalize import parse_cip_type
from .types import (
    SCALAR_TYPES,
    STRING_PAYLOAD_SIZE,
    CIPType,
    NativeKind,
    kind_for_type,
    native_kind_of,
    new_buffer,
    tag_for_kind,
    tag_for_type,
    tag_for_value,
    type_label,
    type_size,
)

__all__ = [
    "__version__",
    "DecodedValue",
    "DecodeResult",
    "decode",
    "decode_bytes",
    "decode_many",
    "string_payload_text",
    "InvalidTypeError",
    "PyCIPCodecError",
    "ShortReadError",
    "UnsupportedTagError",
    "parse_cip_type",
    "SCALAR_TYPES",
    "STRING_PAYLOAD_SIZE",
    "CIPType",
    "NativeKind",
    "kind_for_type",
    "native_kind_of",
    "new_buffer",
    "tag_for_kind",
    "tag_for_type",
    "tag_for_value",
    "type_label",
    "type_size",
]
