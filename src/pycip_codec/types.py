"""Core data model: CIP type tags, their sizes and labels, and native kind classification."""

import ctypes
import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any


class CIPType(int, Enum):
    """CIP data type tags as they appear on the wire (one byte each)."""

    UNKNOWN = 0x00
    STRUCT = 0xA0  # also used for strings
    BOOL = 0xC1
    SINT = 0xC2
    INT = 0xC3
    DINT = 0xC4
    LINT = 0xC5
    USINT = 0xC6
    UINT = 0xC7
    UDINT = 0xC8
    LWORD = 0xC9
    REAL = 0xCA
    LREAL = 0xCB
    BYTE = 0xD1  # 8 bits packed into one byte
    WORD = 0xD2
    DWORD = 0xD3
    # Controllers send strings as STRUCT; this code only marks a structure as a string.
    STRING = 0xDA

    @classmethod
    def from_code(cls, code: int) -> "CIPType":
        """Return the member for a raw wire code, or UNKNOWN if the code is not in the table."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @property
    def size(self) -> int:
        return type_size(self)

    @property
    def label(self) -> str:
        return type_label(self)

    @property
    def is_scalar(self) -> bool:
        return self in SCALAR_TYPES

    def __str__(self) -> str:
        return type_label(self)


class NativeKind(str, Enum):
    """Closed set of native value kinds that map onto CIP tags."""

    BOOL = "bool"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    TEXT = "text"
    BYTES = "bytes"
    STRUCTURE = "structure"
    OTHER = "other"


# Fixed decoded width in bytes. STRING is a marker; its payload width is STRING_PAYLOAD_SIZE.
_SIZES: dict[int, int] = {
    CIPType.UNKNOWN: 0,
    CIPType.STRUCT: 88,
    CIPType.BOOL: 1,
    CIPType.SINT: 1,
    CIPType.INT: 2,
    CIPType.DINT: 4,
    CIPType.LINT: 8,
    CIPType.USINT: 1,
    CIPType.UINT: 2,
    CIPType.UDINT: 4,
    CIPType.LWORD: 8,
    CIPType.REAL: 4,
    CIPType.LREAL: 8,
    CIPType.BYTE: 1,
    CIPType.WORD: 2,
    CIPType.DWORD: 4,
    CIPType.STRING: 1,
}

_LABELS: dict[int, str] = {
    CIPType.UNKNOWN: "0x00 - Unknown",
    CIPType.STRUCT: "0xA0 - Struct",
    CIPType.BOOL: "0xC1 - BOOL",
    CIPType.SINT: "0xC2 - SINT",
    CIPType.INT: "0xC3 - INT",
    CIPType.DINT: "0xC4 - DINT",
    CIPType.LINT: "0xC5 - LINT",
    CIPType.USINT: "0xC6 - USINT",
    CIPType.UINT: "0xC7 - UINT",
    CIPType.UDINT: "0xC8 - UDINT",
    CIPType.LWORD: "0xC9 - LWORD",
    CIPType.REAL: "0xCA - REAL",
    CIPType.LREAL: "0xCB - LREAL",
    CIPType.BYTE: "0xD1 - BYTE",
    CIPType.WORD: "0xD2 - WORD",
    CIPType.DWORD: "0xD3 - DWORD",
    CIPType.STRING: "0xDA - String",
}

_UNRECOGNIZED_LABEL = "0 - Unknown"

# Logix STRING: DINT LEN + SINT[82] DATA
STRING_PAYLOAD_SIZE = 86
STRING_DATA_SIZE = 82

SCALAR_TYPES: frozenset[CIPType] = frozenset(
    {
        CIPType.BOOL,
        CIPType.BYTE,
        CIPType.SINT,
        CIPType.INT,
        CIPType.DINT,
        CIPType.LINT,
        CIPType.USINT,
        CIPType.UINT,
        CIPType.UDINT,
        CIPType.LWORD,
        CIPType.REAL,
        CIPType.LREAL,
        CIPType.WORD,
        CIPType.DWORD,
    }
)

_KIND_TAGS: dict[NativeKind, CIPType] = {
    NativeKind.BOOL: CIPType.BOOL,
    NativeKind.INT8: CIPType.SINT,
    NativeKind.UINT8: CIPType.USINT,
    NativeKind.INT16: CIPType.INT,
    NativeKind.UINT16: CIPType.UINT,
    NativeKind.INT32: CIPType.DINT,
    NativeKind.UINT32: CIPType.UDINT,
    NativeKind.INT64: CIPType.LINT,
    NativeKind.UINT64: CIPType.LWORD,
    NativeKind.FLOAT32: CIPType.REAL,
    NativeKind.FLOAT64: CIPType.LREAL,
    NativeKind.TEXT: CIPType.STRUCT,
    NativeKind.BYTES: CIPType.STRUCT,
    NativeKind.STRUCTURE: CIPType.STRUCT,
}

# Fixed-width ctypes scalars carry their width in the type; aliases (c_byte, c_short, c_int, ...) resolve here.
_CTYPES_KINDS: dict[type, NativeKind] = {
    ctypes.c_bool: NativeKind.BOOL,
    ctypes.c_int8: NativeKind.INT8,
    ctypes.c_uint8: NativeKind.UINT8,
    ctypes.c_int16: NativeKind.INT16,
    ctypes.c_uint16: NativeKind.UINT16,
    ctypes.c_int32: NativeKind.INT32,
    ctypes.c_uint32: NativeKind.UINT32,
    ctypes.c_int64: NativeKind.INT64,
    ctypes.c_uint64: NativeKind.UINT64,
    ctypes.c_float: NativeKind.FLOAT32,
    ctypes.c_double: NativeKind.FLOAT64,
}

_STRUCTURED_BASES = (Mapping, list, tuple, ctypes.Structure, ctypes.Array)


def type_size(tag: int) -> int:
    """Return the fixed byte width of a tag; 0 for UNKNOWN and unrecognized codes."""
    return _SIZES.get(tag, 0)


def type_label(tag: int) -> str:
    """Return the "<hex code> - <name>" diagnostic label; "0 - Unknown" for unrecognized codes."""
    return _LABELS.get(tag, _UNRECOGNIZED_LABEL)


def new_buffer(tag: int) -> bytearray:
    """Return a new zero-filled buffer of exactly type_size(tag) bytes."""
    return bytearray(type_size(tag))


def tag_for_kind(kind: NativeKind) -> CIPType:
    """Map a native kind to its CIP tag; UNKNOWN when the kind has no mapping."""
    return _KIND_TAGS.get(kind, CIPType.UNKNOWN)


def kind_for_type(tp: Any) -> NativeKind:
    """
    Classify a Python type object into a NativeKind.

    Only the type is inspected. Plain int is treated as the controller's native
    32-bit integer and plain float as a double; fixed-width ctypes scalars keep
    their own width. Anything without a mapping is OTHER.
    """
    if not isinstance(tp, type):
        return NativeKind.OTHER
    kind = _CTYPES_KINDS.get(tp)
    if kind is not None:
        return kind
    # bool before int: bool is an int subclass
    if issubclass(tp, bool):
        return NativeKind.BOOL
    if issubclass(tp, int):
        return NativeKind.INT32
    if issubclass(tp, float):
        return NativeKind.FLOAT64
    if issubclass(tp, str):
        return NativeKind.TEXT
    if issubclass(tp, (bytes, bytearray, memoryview)):
        return NativeKind.BYTES
    if issubclass(tp, _STRUCTURED_BASES) or dataclasses.is_dataclass(tp):
        return NativeKind.STRUCTURE
    return NativeKind.OTHER


def native_kind_of(value: Any) -> NativeKind:
    """Return the NativeKind of a value (by its type, never its content)."""
    return kind_for_type(type(value))


def tag_for_value(value: Any) -> CIPType:
    """Return the CIP tag a value of this kind would carry; UNKNOWN if unsupported."""
    return tag_for_kind(native_kind_of(value))


def tag_for_type(tp: Any) -> CIPType:
    """Return the CIP tag for a Python type object (e.g. tag_for_type(ctypes.c_float) is REAL)."""
    return tag_for_kind(kind_for_type(tp))
