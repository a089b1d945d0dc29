#!/usr/bin/env python3
"""Example: decode a run of CIP units from a captured reply payload."""

import io
import logging
import struct
import sys

from pycip_codec import CIPType, UnsupportedTagError, decode_many, string_payload_text, tag_for_value


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    # Payload as it would arrive after the message layer strips the reply header:
    # DINT, REAL, BOOL, then a Logix STRING, then a truncated LINT.
    name = b"Tank_3"
    string_payload = struct.pack("<i", len(name)) + name + bytes(86 - 4 - len(name))
    payload = struct.pack("<i", 1200) + struct.pack("<f", 72.5) + b"\x01" + string_payload + b"\x00\x00"
    layout = [CIPType.DINT, CIPType.REAL, CIPType.BOOL, CIPType.STRING, CIPType.LINT]

    try:
        results = decode_many(layout, io.BytesIO(payload))
    except UnsupportedTagError as e:
        print(f"Layout error: {e}", file=sys.stderr)
        sys.exit(2)

    for r in results:
        value = r.value.value
        if r.value.tag == CIPType.STRING:
            value = string_payload_text(value)
        status = "ok" if r.ok else f"fault: {r.fault}"
        print(f"{r.value.tag.label:<16} {value!r:<12} ({status})")

    # Which tag would a Python value be written as?
    for v in (True, 42, 1.5, "text", {"member": 1}, None):
        print(f"{v!r:<14} -> {tag_for_value(v).label}")


if __name__ == "__main__":
    main()
