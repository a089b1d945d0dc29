"""Clear exceptions for pycip-codec: invalid type text, undecodable tags and short reads."""

from typing import Any

from .types import CIPType, type_label


class PyCIPCodecError(Exception):
    """Base exception for pycip-codec."""

    pass


class InvalidTypeError(PyCIPCodecError):
    """Raised when a CIP type string is malformed or names no known tag."""

    def __init__(self, text: str, message: str | None = None) -> None:
        self.text = text
        self._msg = message or f"Invalid CIP type: {text!r}"
        super().__init__(self._msg)


class UnsupportedTagError(PyCIPCodecError):
    """Raised when decode() is handed a tag it cannot decode as one unit (Unknown, Struct, unrecognized)."""

    def __init__(self, tag: Any, message: str | None = None) -> None:
        self.tag = tag
        self.label = type_label(tag)
        detail = self.label
        if isinstance(tag, int) and not isinstance(tag, CIPType):
            detail = f"{self.label} (code 0x{tag:02X})"
        elif not isinstance(tag, CIPType):
            detail = f"{self.label} (code {tag!r})"
        self._msg = message or f"Cannot decode tag directly: {detail}"
        super().__init__(self._msg)


class ShortReadError(PyCIPCodecError):
    """Fault record for a unit that could not be read in full; returned by decode(), not raised."""

    def __init__(
        self,
        message: str,
        *,
        tag: Any,
        expected: int,
        received: int,
        cause: BaseException | None = None,
    ) -> None:
        self.tag = tag
        self.expected = expected
        self.received = received
        self.cause = cause
        super().__init__(message)
