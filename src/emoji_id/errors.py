"""Typed errors for emoji-id.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_docs.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_INVALID_EMOJI = 11
EXIT_ALPHABET = 12


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage error (invalid args, value not parseable in the chosen format, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_INVALID_EMOJI, "INVALID_EMOJI", "Input contains a character outside the emojibet"),
    ExitCodeInfo(EXIT_ALPHABET, "ALPHABET", "The built-in emojibet fails its invariants (broken build)"),
)

_EXIT_CODE_BY_NAME: dict[str, int] = {e.name: e.code for e in EXIT_CODES}
_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def exit_code_for_name(name: str) -> int | None:
    return _EXIT_CODE_BY_NAME.get(name.strip().upper())


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE — do not edit manually.\n")
    lines.append("> Source of truth: `src/emoji_id/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_docs.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Internal errors extend `EmojiIdError` and carry an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    lines.append(
        "- `--json` on `decode` prints a JSON object to stdout (ok) or stderr (error), and returns the same exit code.\n"
    )
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class EmojiIdError(Exception):
    """Base error for emoji-id."""

    exit_code: int = EXIT_GENERIC


class UsageError(EmojiIdError):
    exit_code = EXIT_USAGE


class InvalidEmoji(EmojiIdError, ValueError):
    """A decoded string holds a character that is not in the emojibet.

    ``position`` is the 0-based index of the first offending character in the
    input string, ``char`` the character itself.
    """

    exit_code = EXIT_INVALID_EMOJI

    def __init__(self, position: int, char: str):
        self.position = int(position)
        self.char = char
        super().__init__(f"Invalid emoji character at position {self.position}: {_fmt_char(char)}")


class AlphabetError(EmojiIdError):
    exit_code = EXIT_ALPHABET


def _fmt_char(c: str) -> str:
    if len(c) != 1:
        return repr(c)
    return f"U+{ord(c):04X}"
