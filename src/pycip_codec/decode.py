"""Unit decoder: read one fixed-width little-endian CIP unit from a byte source into a native value."""

import io
import logging
import struct
from dataclasses import dataclass
from typing import Any, BinaryIO, Iterable

from .errors import ShortReadError, UnsupportedTagError
from .types import STRING_DATA_SIZE, STRING_PAYLOAD_SIZE, CIPType, NativeKind, type_label, type_size

logger = logging.getLogger(__name__)

_FORMATS: dict[CIPType, str] = {
    CIPType.BOOL: "<?",
    CIPType.BYTE: "<B",
    CIPType.SINT: "<b",
    CIPType.INT: "<h",
    CIPType.DINT: "<i",
    CIPType.LINT: "<q",
    CIPType.USINT: "<B",
    CIPType.UINT: "<H",
    CIPType.UDINT: "<I",
    CIPType.LWORD: "<Q",
    CIPType.REAL: "<f",
    CIPType.LREAL: "<d",
    CIPType.WORD: "<H",
    CIPType.DWORD: "<I",
}

_DECODED_KINDS: dict[CIPType, NativeKind] = {
    CIPType.BOOL: NativeKind.BOOL,
    CIPType.BYTE: NativeKind.UINT8,
    CIPType.SINT: NativeKind.INT8,
    CIPType.INT: NativeKind.INT16,
    CIPType.DINT: NativeKind.INT32,
    CIPType.LINT: NativeKind.INT64,
    CIPType.USINT: NativeKind.UINT8,
    CIPType.UINT: NativeKind.UINT16,
    CIPType.UDINT: NativeKind.UINT32,
    CIPType.LWORD: NativeKind.UINT64,
    CIPType.REAL: NativeKind.FLOAT32,
    CIPType.LREAL: NativeKind.FLOAT64,
    CIPType.WORD: NativeKind.UINT16,
    CIPType.DWORD: NativeKind.UINT32,
    CIPType.STRING: NativeKind.BYTES,
}

_STRING_LEN = struct.Struct("<i")


@dataclass(frozen=True)
class DecodedValue:
    """One decoded unit: the tag it was read as, its native kind, and the value."""

    tag: CIPType
    kind: NativeKind
    value: bool | int | float | bytes


@dataclass(frozen=True)
class DecodeResult:
    """Result of decode(): the (possibly zero) value and the read fault, if any."""

    value: DecodedValue
    fault: ShortReadError | None = None

    @property
    def ok(self) -> bool:
        return self.fault is None


def _zero_value(tag: CIPType) -> bool | int | float | bytes:
    if tag == CIPType.BOOL:
        return False
    if tag in (CIPType.REAL, CIPType.LREAL):
        return 0.0
    if tag == CIPType.STRING:
        return bytes(STRING_PAYLOAD_SIZE)
    return 0


def _unit_width(tag: Any) -> int:
    """Bytes one unit of tag occupies; raise UnsupportedTagError if tag is not directly decodable."""
    if tag in _FORMATS:
        return type_size(tag)
    if tag == CIPType.STRING:
        return STRING_PAYLOAD_SIZE
    raise UnsupportedTagError(tag)


def _read_exact(source: BinaryIO, size: int) -> tuple[bytes, BaseException | None]:
    """
    Read up to size bytes, looping over partial reads.

    Returns the bytes read and the exception that stopped the read, if any.
    Bytes consumed before a failure are kept.
    """
    buf = bytearray()
    while len(buf) < size:
        try:
            chunk = source.read(size - len(buf))
        except (OSError, EOFError, ValueError) as e:
            # EOFError: truncated compressed streams, asyncio.IncompleteReadError
            # ValueError: read on a closed file object
            return bytes(buf), e
        if not chunk:
            break
        buf += chunk
    return bytes(buf), None


def decode(tag: CIPType | int, source: BinaryIO) -> DecodeResult:
    """
    Decode exactly one unit of tag from source.

    Scalars are unpacked little-endian into bool/int/float; STRING yields the
    raw 86-byte payload. UNKNOWN, STRUCT and unrecognized codes raise
    UnsupportedTagError before anything is read.

    A short or failed read does not raise: the warning is logged and the
    result carries the zero value for the tag plus a ShortReadError fault.
    """
    size = _unit_width(tag)
    tag = CIPType(tag)
    kind = _DECODED_KINDS[tag]

    data, cause = _read_exact(source, size)

    if len(data) < size:
        reason = f"got {len(data)} of {size} bytes"
        if cause is not None:
            reason = f"{cause} ({reason})"
        fault = ShortReadError(
            f"Problem reading {type_label(tag)} as one unit of {kind.value}. {reason}",
            tag=tag,
            expected=size,
            received=len(data),
            cause=cause,
        )
        logger.warning("%s", fault)
        return DecodeResult(DecodedValue(tag, kind, _zero_value(tag)), fault)

    if tag == CIPType.STRING:
        value: bool | int | float | bytes = data
    else:
        value = struct.unpack(_FORMATS[tag], data)[0]
    logger.debug("Decoded %s: %r", type_label(tag), value)
    return DecodeResult(DecodedValue(tag, kind, value))


def decode_many(tags: Iterable[CIPType | int], source: BinaryIO) -> list[DecodeResult]:
    """
    Decode consecutive units, one per tag, from source.

    Every tag is checked before the first read, so an undecodable tag raises
    UnsupportedTagError without consuming input. Read faults do not stop the
    run; inspect each result's fault.
    """
    tag_list = list(tags)
    for tag in tag_list:
        _unit_width(tag)
    results = [decode(tag, source) for tag in tag_list]
    faults = sum(1 for r in results if not r.ok)
    if faults:
        logger.warning("Decoded %d units with %d read faults", len(results), faults)
    return results


def decode_bytes(tag: CIPType | int, data: bytes | bytearray | memoryview, offset: int = 0) -> DecodeResult:
    """Decode one unit of tag from an in-memory buffer starting at offset."""
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    return decode(tag, io.BytesIO(bytes(data[offset:])))


def string_payload_text(payload: bytes | bytearray, encoding: str = "latin-1") -> str:
    """Return the text held in an 86-byte Logix STRING payload (DINT LEN + 82 data bytes)."""
    if len(payload) < _STRING_LEN.size:
        return ""
    (length,) = _STRING_LEN.unpack_from(payload, 0)
    length = max(0, min(length, STRING_DATA_SIZE))
    data = bytes(payload[_STRING_LEN.size : _STRING_LEN.size + length])
    return data.decode(encoding, errors="replace")
