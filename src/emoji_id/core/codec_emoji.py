from __future__ import annotations

from emoji_id.core.alphabet import glyph_for
from emoji_id.core.reverse_index import byte_for
from emoji_id.errors import InvalidEmoji


class CodecEmoji:
    """
    Codec bytes <-> emoji string, 1 byte = 1 emoji.

    Non comprime: la lunghezza in emoji è sempre uguale alla lunghezza in byte.
    """

    codec_id: str = "emoji"

    def encode(self, data: bytes) -> str:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes")
        return "".join(glyph_for(b) for b in bytes(data))

    def decode(self, text: str) -> bytes:
        """Decode an emoji string; raise InvalidEmoji on the first unknown character.

        Iterates by code point. No normalization, no whitespace skipping:
        anything outside the emojibet is an error, and nothing partial is returned.
        """
        if not isinstance(text, str):
            raise TypeError("text must be str")
        out = bytearray()
        for i, c in enumerate(text):
            b = byte_for(c)
            if b is None:
                raise InvalidEmoji(i, c)
            out.append(b)
        return bytes(out)


_DEFAULT = CodecEmoji()


def encode_bytes(data: bytes) -> str:
    return _DEFAULT.encode(data)


def decode_text(text: str) -> bytes:
    return _DEFAULT.decode(text)
