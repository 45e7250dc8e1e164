"""emoji-id CLI.

This is the stable CLI entrypoint (console-script: ``emoji-id``).

Notes:
  - --version is supported at top-level.
  - decode supports --json (machine-readable output, stdout on success, stderr on error).
  - The codec never strips anything. The CLI strips surrounding whitespace from
    stdin, from decode TEXT and from hex/base64 values; encode --format text
    takes VALUE byte for byte.
"""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import sys
from pathlib import Path

from emoji_id.core.alphabet import BYTE_TO_EMOJI, check_alphabet, render_alphabet_markdown
from emoji_id.errors import EXIT_GENERIC, EmojiIdError, InvalidEmoji, UsageError
from emoji_id.identifier import EmojiId

DECODE_JSON_SCHEMA = "emoji-id.decode.v1"
FORMATS = ("hex", "base64", "text")


def _pkg_version() -> str:
    try:
        from importlib.metadata import PackageNotFoundError, version

        try:
            return version("emoji-id")
        except PackageNotFoundError:
            # running from a source checkout without metadata
            return "0+unknown"
    except Exception:
        return "0+unknown"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _read_value(value: str | None, *, strip: bool = True) -> str:
    # stdin always ends with a newline; argv is taken as given unless strip
    if value is None or value == "-":
        return sys.stdin.read().strip()
    return value.strip() if strip else value


def _parse_value(value: str, fmt: str) -> bytes:
    if fmt == "hex":
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise UsageError(f"encode: hex non valido: {e}") from e
    if fmt == "base64":
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise UsageError(f"encode: base64 non valido: {e}") from e
    if fmt == "text":
        return value.encode("utf-8")
    raise UsageError(f"formato non supportato: {fmt}")


def _format_bytes(data: bytes, fmt: str) -> str:
    if fmt == "hex":
        return data.hex()
    if fmt == "base64":
        return base64.b64encode(data).decode("ascii")
    if fmt == "text":
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UsageError(f"decode: i byte non sono UTF-8 valido, usa --format hex: {e}") from e
    raise UsageError(f"formato non supportato: {fmt}")


def _print_decode_json(eid: EmojiId) -> None:
    print(
        json.dumps(
            {
                "schema": DECODE_JSON_SCHEMA,
                "ok": True,
                "length": len(eid),
                "hex": eid.hex(),
                "version": _pkg_version(),
            },
            ensure_ascii=False,
            separators=(",", ":"),
        )
    )


def _print_decode_json_error(err: Exception, exit_code: int) -> None:
    """Emit stable JSON on stderr for decode errors when --json is used."""
    obj = {
        "schema": DECODE_JSON_SCHEMA,
        "ok": False,
        "version": _pkg_version(),
        "error": {
            "type": type(err).__name__,
            "message": str(err),
            "exit_code": int(exit_code),
            "position": getattr(err, "position", None),
        },
    }
    print(json.dumps(obj, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _cmd_encode(value: str | None, *, fmt: str, input_path: Path | None) -> int:
    if input_path is not None:
        if value is not None:
            raise UsageError("encode: usa VALUE oppure --input, non entrambi")
        if not input_path.is_file():
            raise UsageError(f"encode: file non trovato: {input_path}")
        data = input_path.read_bytes()
    else:
        # text values are encoded byte for byte, only hex/base64 tolerate padding
        data = _parse_value(_read_value(value, strip=(fmt != "text")), fmt)

    print(str(EmojiId(data)))
    return 0


def _cmd_decode(text: str | None, *, fmt: str, output_path: Path | None, json_out: bool) -> int:
    s = _read_value(text)
    try:
        eid = EmojiId.from_str(s)
    except InvalidEmoji as e:
        if json_out:
            _print_decode_json_error(e, e.exit_code)
            return e.exit_code
        raise

    try:
        if output_path is not None:
            output_path.write_bytes(eid.as_bytes())
        elif not json_out:
            print(_format_bytes(eid.as_bytes(), fmt))
    except Exception as e:
        # For --json we must emit JSON on stderr (stable schema).
        if json_out:
            code = int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
            _print_decode_json_error(e, code)
            return code
        raise

    if json_out:
        _print_decode_json(eid)
    return 0


def _cmd_alphabet(*, markdown: bool) -> int:
    if markdown:
        sys.stdout.write(render_alphabet_markdown())
        return 0
    for i, glyph in enumerate(BYTE_TO_EMOJI):
        print(f"{i}\t{glyph}\tU+{ord(glyph):04X}")
    return 0


def _cmd_check() -> int:
    check_alphabet(BYTE_TO_EMOJI)
    full = bytes(range(256))
    s = str(EmojiId(full))
    if s != "".join(BYTE_TO_EMOJI) or EmojiId.from_str(s).as_bytes() != full:
        raise EmojiIdError("check: roundtrip 0..255 fallito")
    print("OK")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="emoji-id", description="Render byte strings as emoji (1 byte = 1 emoji) and back"
    )
    p.add_argument("--version", action="version", version=f"emoji-id {_pkg_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_enc = sub.add_parser("encode", help="Bytes -> emoji string")
    p_enc.add_argument(
        "value", nargs="?", default=None, help="Value to encode ('-' or omitted: read stdin)"
    )
    p_enc.add_argument(
        "--format", choices=FORMATS, default="hex", help="How VALUE is written (default: hex)"
    )
    p_enc.add_argument(
        "--input", type=Path, default=None, help="Encode the raw bytes of a file instead of VALUE"
    )
    _add_common_args(p_enc)

    p_dec = sub.add_parser("decode", help="Emoji string -> bytes")
    p_dec.add_argument(
        "text", nargs="?", default=None, help="Emoji string ('-' or omitted: read stdin)"
    )
    p_dec.add_argument(
        "--format", choices=FORMATS, default="hex", help="How decoded bytes are printed (default: hex)"
    )
    p_dec.add_argument(
        "--output", type=Path, default=None, help="Write the raw decoded bytes to a file"
    )
    p_dec.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    _add_common_args(p_dec)

    p_alpha = sub.add_parser("alphabet", help="Print the emojibet (byte, emoji, code point)")
    p_alpha.add_argument("--markdown", action="store_true", help="Markdown reference table")
    _add_common_args(p_alpha)

    p_check = sub.add_parser("check", help="Self-check the emojibet (size, uniqueness, roundtrip)")
    _add_common_args(p_check)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "encode":
            return _cmd_encode(ns.value, fmt=ns.format, input_path=ns.input)
        if ns.cmd == "decode":
            return _cmd_decode(
                ns.text, fmt=ns.format, output_path=ns.output, json_out=bool(ns.json)
            )
        if ns.cmd == "alphabet":
            return _cmd_alphabet(markdown=bool(ns.markdown))
        if ns.cmd == "check":
            return _cmd_check()
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except EmojiIdError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[emoji-id] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[emoji-id] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
