from __future__ import annotations

import dataclasses

import pytest

from emoji_id.core.alphabet import BYTE_TO_EMOJI
from emoji_id.errors import InvalidEmoji
from emoji_id.identifier import EmojiId, decode, encode


def test_valid_emoji_id_from_bytes() -> None:
    # complete ordered byte string
    data = bytes(range(256))
    eid = EmojiId(data)

    assert str(eid) == "".join(BYTE_TO_EMOJI)
    assert eid.to_emoji() == str(eid)
    assert eid.as_bytes() == data
    assert bytes(eid) == data
    assert len(eid) == 256


def test_valid_emoji_id_from_string() -> None:
    emoji = "".join(BYTE_TO_EMOJI)
    eid = EmojiId.from_str(emoji)

    assert eid.as_bytes() == bytes(range(256))
    assert str(eid) == emoji


def test_invalid_emoji() -> None:
    santa = "\U0001F385"
    s = encode(bytes.fromhex("0c80d1c8f00b")) + santa
    assert santa in s

    with pytest.raises(InvalidEmoji):
        EmojiId.from_str(s)
    with pytest.raises(InvalidEmoji):
        decode(s)


def test_empty_id() -> None:
    eid = decode("")
    assert eid == EmojiId(b"")
    assert eid.as_bytes() == b""
    assert str(eid) == ""
    assert len(eid) == 0


def test_owns_its_bytes() -> None:
    buf = bytearray(b"\x01\x02\x03")
    eid = EmojiId(buf)
    buf[0] = 0xFF
    assert eid.as_bytes() == b"\x01\x02\x03"
    assert type(eid.as_bytes()) is bytes

    mv = memoryview(bytearray(b"\x09"))
    assert EmojiId.from_bytes(mv).as_bytes() == b"\x09"


def test_immutable() -> None:
    eid = EmojiId(b"\x01")
    with pytest.raises(dataclasses.FrozenInstanceError):
        eid.raw = b"\x02"  # type: ignore[misc]


def test_rejects_str() -> None:
    with pytest.raises(TypeError):
        EmojiId("abc")  # type: ignore[arg-type]


def test_equality_and_hash() -> None:
    a = EmojiId(b"\x01\x02")
    b = EmojiId.from_str(str(a))
    assert a == b
    assert hash(a) == hash(b)
    assert a != EmojiId(b"\x01\x03")
    assert {a: "x"}[b] == "x"
    assert len({a, b, EmojiId(b"")}) == 2


def test_ordering_is_lexicographic_bytes() -> None:
    ids = [EmojiId(b"\x02"), EmojiId(b"\x01\xff"), EmojiId(b""), EmojiId(b"\x01"), EmojiId(b"\x01\x00")]
    got = [e.as_bytes() for e in sorted(ids)]
    assert got == [b"", b"\x01", b"\x01\x00", b"\x01\xff", b"\x02"]
    assert EmojiId(b"\x00") < EmojiId(b"\x00\x00")
    assert max(ids) == EmojiId(b"\x02")


def test_hex_and_repr() -> None:
    eid = EmojiId(b"\xde\xad")
    assert eid.hex() == "dead"
    assert repr(eid) == "EmojiId(raw=b'\\xde\\xad')"


def test_module_helpers_roundtrip() -> None:
    data = b"\x00tari\xff"
    s = encode(data)
    assert len(s) == len(data)
    assert decode(s) == EmojiId(data)
    assert encode(decode(s).as_bytes()) == s
