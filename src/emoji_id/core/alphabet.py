"""The emojibet: 256 emoji, one per byte value.

The table is the single source of truth for the encoding. Changing it (order
included) breaks every string encoded before the change, so it is a source
constant and not a setting.

Every entry is exactly one code point: decode walks the input one character at
a time, so multi-code-point sequences (ZWJ, skin tones, VS16) are not allowed.
"""

from __future__ import annotations

from collections.abc import Sequence

from emoji_id.errors import AlphabetError

DICT_SIZE = 256  # number of elements in the emojibet

# fmt: off
BYTE_TO_EMOJI: tuple[str, ...] = (
    "🦋", "📟", "🌈", "🌊", "🎯", "🐋", "🌙", "🤔", "🌕", "⭐", "🎋", "🌰", "🌴", "🌵", "🌲", "🌸",
    "🌹", "🌻", "🌽", "🍀", "🍁", "🍄", "🥑", "🍆", "🍇", "🍈", "🍉", "🍊", "🍋", "🍌", "🍍", "🍎",
    "🍐", "🍑", "🍒", "🍓", "🍔", "🍕", "🍗", "🍚", "🍞", "🍟", "🥝", "🍣", "🍦", "🍩", "🍪", "🍫",
    "🍬", "🍭", "🍯", "🥐", "🍳", "🥄", "🍵", "🍶", "🍷", "🍸", "🍾", "🍺", "🍼", "🎀", "🎁", "🎂",
    "🎃", "🤖", "🎈", "🎉", "🎒", "🎓", "🎠", "🎡", "🎢", "🎣", "🎤", "🎥", "🎧", "🎨", "🎩", "🎪",
    "🎬", "🎭", "🎮", "🎰", "🎱", "🎲", "🎳", "🎵", "🎷", "🎸", "🎹", "🎺", "🎻", "🎼", "🎽", "🎾",
    "🎿", "🏀", "🏁", "🏆", "🏈", "⚽", "🏠", "🏥", "🏦", "🏭", "🏰", "🐀", "🐉", "🐊", "🐌", "🐍",
    "🦁", "🐐", "🐑", "🐔", "🙈", "🐗", "🐘", "🐙", "🐚", "🐛", "🐜", "🐝", "🐞", "🐢", "🐣", "🐨",
    "🦀", "🐪", "🐬", "🐭", "🐮", "🐯", "🐰", "🦆", "🦂", "🐴", "🐵", "🐶", "🐷", "🐸", "🐺", "🐻",
    "🐼", "🐽", "🐾", "👀", "👅", "👑", "👒", "🧢", "💅", "👕", "👖", "👗", "👘", "👙", "💃", "👛",
    "👞", "👟", "👠", "🥊", "👢", "👣", "🤡", "👻", "👽", "👾", "🤠", "👃", "💄", "💈", "💉", "💊",
    "💋", "👂", "💍", "💎", "💐", "💔", "🔒", "🧩", "💡", "💣", "💤", "💦", "💨", "💩", "➕", "💯",
    "💰", "💳", "💵", "💺", "💻", "💼", "📈", "📜", "📌", "📎", "📖", "📿", "📡", "⏰", "📱", "📷",
    "🔋", "🔌", "🚰", "🔑", "🔔", "🔥", "🔦", "🔧", "🔨", "🔩", "🔪", "🔫", "🔬", "🔭", "🔮", "🔱",
    "🗽", "😂", "😇", "😈", "🤑", "😍", "😎", "😱", "😷", "🤢", "👍", "👶", "🚀", "🚁", "🚂", "🚚",
    "🚑", "🚒", "🚓", "🛵", "🚗", "🚜", "🚢", "🚦", "🚧", "🚨", "🚪", "🚫", "🚲", "🚽", "🚿", "🧲",
)
# fmt: on


def glyph_for(byte: int) -> str:
    """Return the emoji for a byte value (0..255)."""
    if not isinstance(byte, int) or isinstance(byte, bool):
        raise TypeError(f"byte must be int, got {type(byte).__name__}")
    if not (0 <= byte < DICT_SIZE):
        raise ValueError(f"byte must be 0..255, got {byte}")
    return BYTE_TO_EMOJI[byte]


def check_alphabet(table: Sequence[str]) -> None:
    """Validate an emoji table; raise AlphabetError on the first defect found.

    Checks: exactly DICT_SIZE entries, one code point per entry, no duplicates.
    """
    if len(table) != DICT_SIZE:
        raise AlphabetError(f"emojibet: expected {DICT_SIZE} entries, got {len(table)}")

    seen: dict[str, int] = {}
    for i, glyph in enumerate(table):
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise AlphabetError(f"emojibet: entry {i} is not a single code point: {glyph!r}")
        j = seen.get(glyph)
        if j is not None:
            raise AlphabetError(
                f"emojibet: duplicate glyph U+{ord(glyph):04X} at bytes {j} and {i}"
            )
        seen[glyph] = i


def render_alphabet_markdown() -> str:
    """Render docs/alphabet.md content."""
    lines: list[str] = []
    lines.append("# Emojibet\n")
    lines.append("> GENERATED FILE — do not edit manually.\n")
    lines.append("> Source of truth: `src/emoji_id/core/alphabet.py` (BYTE_TO_EMOJI).\n")
    lines.append("> Regenerate: `python scripts/gen_docs.py`.\n\n")
    lines.append("| Byte | Hex | Emoji | Code point |\n")
    lines.append("|---:|---|---|---|\n")
    for i, glyph in enumerate(BYTE_TO_EMOJI):
        lines.append(f"| {i} | `{i:02x}` | {glyph} | U+{ord(glyph):04X} |\n")
    return "".join(lines)
