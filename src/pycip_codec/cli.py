#!/usr/bin/env python3
"""Diagnostic CLI for pycip-codec using Typer."""

import io
import json
import logging
from typing import Any, Optional

import typer
from typing_extensions import Annotated

from . import __version__  # type: ignore
from .decode import DecodeResult, decode_many, string_payload_text
from .errors import InvalidTypeError, UnsupportedTagError
from .normalize import parse_cip_type
from .types import CIPType, NativeKind, native_kind_of, tag_for_kind, tag_for_value

app = typer.Typer(
    name="pycip",
    help="Inspect CIP type tags and decode raw CIP units from hex bytes.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Shared options and helpers
# ============================================================================

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Output as JSON"),
]
StrictOption = Annotated[
    bool,
    typer.Option("--strict", help="Exit with code 3 if any unit could not be read in full", envvar="PYCIP_STRICT"),
]
EncodingOption = Annotated[
    str,
    typer.Option("--encoding", help="Text encoding for STRING payloads", envvar="PYCIP_ENCODING"),
]


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbose flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if not verbose else "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def parse_hex(parts: list[str]) -> bytes:
    """Parse hex bytes given as one or more words ("01 00 00 00", "01:00", "0x0100", "0x01 0x00")."""
    words = []
    for part in parts:
        for word in part.split():
            if word.lower().startswith("0x"):
                word = word[2:]
            words.append(word)
    text = "".join(words).replace(":", "").replace("-", "")
    if not text:
        raise ValueError("No bytes given")
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise ValueError(f"Invalid hex bytes: {' '.join(parts)!r}") from None


def parse_literal(value: str) -> Any:
    """Parse a command-line literal into bool, int, float, or str (in that order)."""
    v = value.strip()
    if v.lower() in ("true", "false"):
        return v.lower() == "true"
    try:
        return int(v, 16) if v.lower().startswith("0x") else int(v)
    except ValueError:
        pass
    try:
        return float(v)
    except ValueError:
        return value


def format_value(value: bool | int | float | bytes, tag: CIPType, encoding: str = "latin-1") -> str:
    """Format a decoded value for display."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, bytes):
        if tag == CIPType.STRING:
            return repr(string_payload_text(value, encoding))
        return value.hex(" ")
    return str(value)


def result_to_dict(result: DecodeResult, encoding: str = "latin-1") -> dict[str, Any]:
    """JSON-ready view of one decode result."""
    decoded = result.value
    value: Any = decoded.value
    out: dict[str, Any] = {"tag": decoded.tag.label, "kind": decoded.kind.value}
    if isinstance(value, bytes):
        out["value"] = value.hex()
        if decoded.tag == CIPType.STRING:
            out["text"] = string_payload_text(value, encoding)
    else:
        out["value"] = value
    out["fault"] = str(result.fault) if result.fault is not None else None
    return out


def type_row(tag: CIPType) -> dict[str, Any]:
    return {"code": int(tag), "name": tag.name, "size": tag.size, "label": tag.label}


# ============================================================================
# Commands
# ============================================================================


@app.command(name="types")
def list_types(
    json_output: JsonOption = False,
) -> None:
    """List every CIP type tag with its code, size and label."""
    rows = [type_row(tag) for tag in CIPType]
    if json_output:
        typer.echo(json.dumps(rows, indent=2))
        return
    for row in rows:
        typer.echo(f"{row['label']:<16} size={row['size']}")


@app.command()
def size(
    cip_type: Annotated[str, typer.Argument(help="CIP type name or code (e.g. DINT, 0xC4)")],
    json_output: JsonOption = False,
) -> None:
    """Show the label and fixed byte size of one CIP type."""
    try:
        tag = parse_cip_type(cip_type)
    except InvalidTypeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    if json_output:
        typer.echo(json.dumps(type_row(tag)))
    else:
        typer.echo(f"{tag.label}: {tag.size} bytes")


@app.command(name="decode")
def decode_cmd(
    cip_type: Annotated[str, typer.Argument(help="CIP type name or code (e.g. DINT, 0xC4)")],
    data: Annotated[list[str], typer.Argument(help="Hex bytes, little-endian (e.g. 01 00 00 00)")],
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of consecutive units to decode")] = 1,
    verbose: VerboseOption = False,
    json_output: JsonOption = False,
    strict: StrictOption = False,
    encoding: EncodingOption = "latin-1",
) -> None:
    """
    Decode one or more consecutive units of a CIP type from hex bytes.

    Units that cannot be read in full decode as zero and are logged as warnings.
    Use --strict to exit with code 3 when that happens.
    """
    setup_logging(verbose)

    try:
        tag = parse_cip_type(cip_type)
        raw = parse_hex(data)
        stream = io.BytesIO(raw)
        results = decode_many([tag] * count, stream)
        leftover = len(raw) - stream.tell()
        if leftover:
            logger.debug("%d trailing bytes not decoded", leftover)
    except InvalidTypeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    except UnsupportedTagError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    except ValueError as e:
        typer.echo(f"Error: Invalid data: {e}", err=True)
        raise typer.Exit(2)
    except Exception as e:
        typer.echo(f"Error: Unexpected error: {e}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        raise typer.Exit(4)

    if json_output:
        typer.echo(json.dumps([result_to_dict(r, encoding) for r in results], indent=2))
    else:
        for r in results:
            typer.echo(f"{r.value.tag.label}: {format_value(r.value.value, r.value.tag, encoding)}")

    faults = sum(1 for r in results if not r.ok)
    if faults and strict:
        typer.echo(f"Error: {faults} of {len(results)} units could not be read in full", err=True)
        raise typer.Exit(3)


@app.command()
def classify(
    value: Annotated[str, typer.Argument(help="Literal value (true, 12, 0x10, 1.5, text) or kind name with --kind")],
    kind_name: Annotated[bool, typer.Option("--kind", help="Treat VALUE as a native kind name (e.g. float32)")] = False,
    json_output: JsonOption = False,
) -> None:
    """Show which CIP type a native value (or native kind) maps to."""
    if kind_name:
        try:
            kind = NativeKind(value.strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in NativeKind)
            typer.echo(f"Error: Unknown kind {value!r}; expected one of: {choices}", err=True)
            raise typer.Exit(2)
        tag = tag_for_kind(kind)
    else:
        parsed = parse_literal(value)
        kind = native_kind_of(parsed)
        tag = tag_for_value(parsed)

    if json_output:
        typer.echo(json.dumps({"value": value, "kind": kind.value, "tag": tag.label}))
    else:
        typer.echo(f"{kind.value} -> {tag.label}")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"pycip-codec {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """pycip - CIP type tags and unit decoding from the command line."""
    pass


if __name__ == "__main__":
    app()
