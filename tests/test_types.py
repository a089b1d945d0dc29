"""Tests for the CIP type tag model: sizes, labels, buffers and native kind classification."""

import ctypes
from dataclasses import dataclass

import pytest

from pycip_codec import (
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
from pycip_codec.types import SCALAR_TYPES


@pytest.mark.parametrize(
    ("tag", "code", "size", "label"),
    [
        (CIPType.UNKNOWN, 0x00, 0, "0x00 - Unknown"),
        (CIPType.STRUCT, 0xA0, 88, "0xA0 - Struct"),
        (CIPType.BOOL, 0xC1, 1, "0xC1 - BOOL"),
        (CIPType.SINT, 0xC2, 1, "0xC2 - SINT"),
        (CIPType.INT, 0xC3, 2, "0xC3 - INT"),
        (CIPType.DINT, 0xC4, 4, "0xC4 - DINT"),
        (CIPType.LINT, 0xC5, 8, "0xC5 - LINT"),
        (CIPType.USINT, 0xC6, 1, "0xC6 - USINT"),
        (CIPType.UINT, 0xC7, 2, "0xC7 - UINT"),
        (CIPType.UDINT, 0xC8, 4, "0xC8 - UDINT"),
        (CIPType.LWORD, 0xC9, 8, "0xC9 - LWORD"),
        (CIPType.REAL, 0xCA, 4, "0xCA - REAL"),
        (CIPType.LREAL, 0xCB, 8, "0xCB - LREAL"),
        (CIPType.BYTE, 0xD1, 1, "0xD1 - BYTE"),
        (CIPType.WORD, 0xD2, 2, "0xD2 - WORD"),
        (CIPType.DWORD, 0xD3, 4, "0xD3 - DWORD"),
        (CIPType.STRING, 0xDA, 1, "0xDA - String"),
    ],
)
def test_type_table(tag: CIPType, code: int, size: int, label: str) -> None:
    assert int(tag) == code
    assert type_size(tag) == size
    assert tag.size == size
    assert type_label(tag) == label
    assert tag.label == label
    assert str(tag) == label
    # raw wire codes resolve to the same facts
    assert type_size(code) == size
    assert type_label(code) == label


def test_table_covers_every_member() -> None:
    assert len(CIPType) == 17
    for tag in CIPType:
        assert type_label(tag) != "0 - Unknown"


@pytest.mark.parametrize("code", [0x01, 0x99, 0xA1, 0xDB, 0xFF, 1000, -1])
def test_unrecognized_codes(code: int) -> None:
    assert type_size(code) == 0
    assert type_label(code) == "0 - Unknown"
    assert len(new_buffer(code)) == 0
    assert CIPType.from_code(code) is CIPType.UNKNOWN


def test_from_code_known() -> None:
    assert CIPType.from_code(0xC4) is CIPType.DINT
    assert CIPType.from_code(0xDA) is CIPType.STRING


def test_new_buffer_sized_and_zeroed() -> None:
    for tag in CIPType:
        buf = new_buffer(tag)
        assert isinstance(buf, bytearray)
        assert len(buf) == type_size(tag)
        assert not any(buf)


def test_new_buffer_is_independent() -> None:
    a = new_buffer(CIPType.DINT)
    b = new_buffer(CIPType.DINT)
    a[0] = 0xFF
    assert b[0] == 0


def test_scalar_types() -> None:
    assert CIPType.DINT.is_scalar
    assert CIPType.BYTE.is_scalar
    assert not CIPType.STRUCT.is_scalar
    assert not CIPType.STRING.is_scalar
    assert not CIPType.UNKNOWN.is_scalar
    assert len(SCALAR_TYPES) == 14


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (NativeKind.BOOL, CIPType.BOOL),
        (NativeKind.INT8, CIPType.SINT),
        (NativeKind.UINT8, CIPType.USINT),
        (NativeKind.INT16, CIPType.INT),
        (NativeKind.UINT16, CIPType.UINT),
        (NativeKind.INT32, CIPType.DINT),
        (NativeKind.UINT32, CIPType.UDINT),
        (NativeKind.INT64, CIPType.LINT),
        (NativeKind.UINT64, CIPType.LWORD),
        (NativeKind.FLOAT32, CIPType.REAL),
        (NativeKind.FLOAT64, CIPType.LREAL),
        (NativeKind.TEXT, CIPType.STRUCT),
        (NativeKind.BYTES, CIPType.STRUCT),
        (NativeKind.STRUCTURE, CIPType.STRUCT),
        (NativeKind.OTHER, CIPType.UNKNOWN),
    ],
)
def test_tag_for_kind(kind: NativeKind, expected: CIPType) -> None:
    assert tag_for_kind(kind) is expected


def test_tag_for_kind_is_total() -> None:
    for kind in NativeKind:
        assert isinstance(tag_for_kind(kind), CIPType)
    assert tag_for_kind("not-a-kind") is CIPType.UNKNOWN  # type: ignore[arg-type]


@dataclass
class _Motor:
    speed: float
    running: bool


@pytest.mark.parametrize(
    ("value", "kind", "tag"),
    [
        (True, NativeKind.BOOL, CIPType.BOOL),
        (False, NativeKind.BOOL, CIPType.BOOL),
        (ctypes.c_bool(True), NativeKind.BOOL, CIPType.BOOL),
        (ctypes.c_int8(-1), NativeKind.INT8, CIPType.SINT),
        (ctypes.c_uint8(1), NativeKind.UINT8, CIPType.USINT),
        (ctypes.c_int16(1), NativeKind.INT16, CIPType.INT),
        (ctypes.c_uint16(1), NativeKind.UINT16, CIPType.UINT),
        (ctypes.c_int32(1), NativeKind.INT32, CIPType.DINT),
        (ctypes.c_uint32(1), NativeKind.UINT32, CIPType.UDINT),
        (ctypes.c_int64(1), NativeKind.INT64, CIPType.LINT),
        (ctypes.c_uint64(1), NativeKind.UINT64, CIPType.LWORD),
        (ctypes.c_float(1.0), NativeKind.FLOAT32, CIPType.REAL),
        (ctypes.c_double(1.0), NativeKind.FLOAT64, CIPType.LREAL),
        (7, NativeKind.INT32, CIPType.DINT),
        (2.5, NativeKind.FLOAT64, CIPType.LREAL),
        ("pump", NativeKind.TEXT, CIPType.STRUCT),
        (b"\x00\x01", NativeKind.BYTES, CIPType.STRUCT),
        ({"a": 1}, NativeKind.STRUCTURE, CIPType.STRUCT),
        ([1, 2], NativeKind.STRUCTURE, CIPType.STRUCT),
        ((1, 2), NativeKind.STRUCTURE, CIPType.STRUCT),
        (_Motor(1.0, True), NativeKind.STRUCTURE, CIPType.STRUCT),
        (None, NativeKind.OTHER, CIPType.UNKNOWN),
        (1 + 2j, NativeKind.OTHER, CIPType.UNKNOWN),
        ({1, 2}, NativeKind.OTHER, CIPType.UNKNOWN),
        (object(), NativeKind.OTHER, CIPType.UNKNOWN),
    ],
)
def test_classify_value(value: object, kind: NativeKind, tag: CIPType) -> None:
    assert native_kind_of(value) is kind
    assert tag_for_value(value) is tag


def test_classification_ignores_content() -> None:
    # a huge int is still the native integer kind
    assert tag_for_value(2**40) is CIPType.DINT
    assert tag_for_value("") is CIPType.STRUCT


def test_tag_for_type() -> None:
    assert tag_for_type(bool) is CIPType.BOOL
    assert tag_for_type(int) is CIPType.DINT
    assert tag_for_type(float) is CIPType.LREAL
    assert tag_for_type(ctypes.c_float) is CIPType.REAL
    assert tag_for_type(ctypes.c_uint16) is CIPType.UINT
    assert tag_for_type(str) is CIPType.STRUCT
    assert tag_for_type(_Motor) is CIPType.STRUCT
    assert tag_for_type(type(None)) is CIPType.UNKNOWN


def test_kind_for_non_type() -> None:
    assert kind_for_type(42) is NativeKind.OTHER
    assert kind_for_type(None) is NativeKind.OTHER
