"""Tests for CIP type string parsing and validation."""

import pytest

from pycip_codec import CIPType, parse_cip_type
from pycip_codec.errors import InvalidTypeError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("dint", CIPType.DINT),
        ("DINT", CIPType.DINT),
        (" real ", CIPType.REAL),
        ("Struct", CIPType.STRUCT),
        ("string", CIPType.STRING),
        ("unknown", CIPType.UNKNOWN),
        ("0xC4", CIPType.DINT),
        ("0xc4", CIPType.DINT),
        ("0XCA", CIPType.REAL),
        ("196", CIPType.DINT),
        ("0xA0", CIPType.STRUCT),
        ("0xC4 - DINT", CIPType.DINT),
        ("0xDA - String", CIPType.STRING),
        ("0xCB-LREAL", CIPType.LREAL),
    ],
)
def test_parse_cip_type_canonical(raw: str, expected: CIPType) -> None:
    assert parse_cip_type(raw) is expected


@pytest.mark.parametrize(
    "malformed",
    [
        "",
        "   ",
        "QWORD",
        "0x99",
        "999",
        "DINT4",
        "0xZZ",
        "0xC4 - REAL",
        "d int",
    ],
)
def test_parse_cip_type_invalid_raises(malformed: str) -> None:
    with pytest.raises(InvalidTypeError) as exc_info:
        parse_cip_type(malformed)
    assert exc_info.value.text == malformed


def test_parse_cip_type_round_trips_labels() -> None:
    for tag in CIPType:
        assert parse_cip_type(tag.label) is tag
        assert parse_cip_type(tag.name) is tag
