from __future__ import annotations

import hashlib
import os
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from emoji_id.core.codec_emoji import CodecEmoji, decode_text, encode_bytes

pytestmark = pytest.mark.p1


def _payloads(n: int, seed: int = 1234) -> list[bytes]:
    # deterministico: include vuoto, tutti i byte, ripetizioni
    rnd = random.Random(seed)
    out = [b"", bytes(range(256)), b"\x00" * 64, b"\xff" * 64]
    for _ in range(n):
        out.append(bytes(rnd.randrange(256) for _ in range(rnd.randrange(1, 300))))
    return out


def _fingerprint(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def test_repeated_calls_are_identical() -> None:
    data = os.urandom(4096)
    first = encode_bytes(data)
    for _ in range(5):
        assert encode_bytes(data) == first
        assert decode_text(first) == data


def test_no_state_between_calls() -> None:
    # a failed decode must not affect later calls
    c = CodecEmoji()
    s = c.encode(b"\x01\x02\x03")
    with pytest.raises(ValueError):
        c.decode(s + "?")
    assert c.decode(s) == b"\x01\x02\x03"
    assert CodecEmoji().encode(b"\x01\x02\x03") == s


def test_concurrent_encode_decode_matches_serial() -> None:
    payloads = _payloads(200)
    serial = [_fingerprint(encode_bytes(p)) for p in payloads]

    def work(p: bytes) -> tuple[str, bool]:
        s = encode_bytes(p)
        return _fingerprint(s), decode_text(s) == p

    with ThreadPoolExecutor(max_workers=8) as ex:
        results = list(ex.map(work, payloads))

    assert [fp for fp, _ in results] == serial
    assert all(ok for _, ok in results)
