"""EmojiId: an emoji rendering of a byte string.

Useful for keys, hashes or addresses where visual differentiation matters.
Equality, hashing and ordering follow the underlying bytes (lexicographic),
so ids sort and work as dict keys; ``str()`` gives the emoji string.
"""

from __future__ import annotations

from dataclasses import dataclass

from emoji_id.core.codec_emoji import decode_text, encode_bytes


@dataclass(frozen=True, order=True, slots=True)
class EmojiId:
    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise TypeError(f"EmojiId wants bytes, got {type(self.raw).__name__}")
        # own an immutable copy (bytearray/memoryview callers may mutate theirs)
        object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def from_bytes(cls, data: bytes) -> EmojiId:
        return cls(data)

    @classmethod
    def from_str(cls, text: str) -> EmojiId:
        """Decode an emoji string. Raises InvalidEmoji if any character is not in the emojibet."""
        return cls(decode_text(text))

    def as_bytes(self) -> bytes:
        return self.raw

    def hex(self) -> str:
        return self.raw.hex()

    def to_emoji(self) -> str:
        return encode_bytes(self.raw)

    def __str__(self) -> str:
        return self.to_emoji()

    def __bytes__(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return len(self.raw)


def encode(data: bytes) -> str:
    """bytes -> emoji string (never fails for bytes-like input)."""
    return encode_bytes(data)


def decode(text: str) -> EmojiId:
    """emoji string -> EmojiId, or InvalidEmoji."""
    return EmojiId.from_str(text)
