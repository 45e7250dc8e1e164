from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from emoji_id.core.alphabet import BYTE_TO_EMOJI, check_alphabet


def _build_reverse_index() -> Mapping[str, int]:
    # fail fast: a broken table must never reach a decode call
    check_alphabet(BYTE_TO_EMOJI)
    m: dict[str, int] = {}
    for i, glyph in enumerate(BYTE_TO_EMOJI):
        m[glyph] = i
    return MappingProxyType(m)


# The reverse emojibet, mapping emoji characters to byte values.
# Built once at import (the import lock serializes it), read-only afterwards.
EMOJI_TO_BYTE: Mapping[str, int] = _build_reverse_index()


def byte_for(glyph: str) -> int | None:
    """Return the byte value for an emoji, or None if it is not in the emojibet."""
    return EMOJI_TO_BYTE.get(glyph)
