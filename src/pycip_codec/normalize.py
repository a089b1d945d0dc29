"""Parse and validate CIP type strings: names, numeric codes and diagnostic labels."""

import re

from .errors import InvalidTypeError
from .types import CIPType

# Numeric code: 0x-prefixed hex or decimal
_CODE_PATTERN = re.compile(r"^(0x[0-9a-f]+|\d+)$", re.IGNORECASE)

# Type name: DINT, real, Struct, ...
_NAME_PATTERN = re.compile(r"^[a-z]+$", re.IGNORECASE)

# Diagnostic label as printed by type_label(): "0xC4 - DINT"
_LABEL_PATTERN = re.compile(r"^(0x[0-9a-f]+|\d+)\s*-\s*([a-z]+)$", re.IGNORECASE)


def _parse_code(raw: str, text: str) -> CIPType:
    code = int(text, 0) if text.lower().startswith("0x") else int(text)
    try:
        return CIPType(code)
    except ValueError:
        raise InvalidTypeError(raw, f"Unknown CIP type code: {text}") from None


def _parse_name(raw: str, text: str) -> CIPType:
    member = CIPType.__members__.get(text.upper())
    if member is None:
        raise InvalidTypeError(raw, f"Unknown CIP type name: {text!r}")
    return member


def parse_cip_type(raw: str) -> CIPType:
    """
    Parse a CIP type from user text.

    Accepts a name ("dint", "REAL", "struct"), a numeric code ("0xC4", "196"),
    or a full label ("0xC4 - DINT"). In a label the code and name must agree.

    Raises InvalidTypeError for malformed or unknown types.
    """
    s = raw.strip()
    if not s:
        raise InvalidTypeError(raw, "CIP type cannot be empty")

    m = _LABEL_PATTERN.match(s)
    if m:
        by_code = _parse_code(raw, m.group(1))
        by_name = _parse_name(raw, m.group(2))
        if by_code is not by_name:
            raise InvalidTypeError(raw, f"Code and name disagree in {raw!r}: {by_code.label} vs {by_name.label}")
        return by_code

    if _CODE_PATTERN.match(s):
        return _parse_code(raw, s)

    if _NAME_PATTERN.match(s):
        return _parse_name(raw, s)

    raise InvalidTypeError(raw, f"Malformed CIP type: {raw!r}")
