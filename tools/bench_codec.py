#!/usr/bin/env python3
"""Codec benchmark: encode -> decode -> compare, with timings and peak RSS.

Usage example:
  python tools/bench_codec.py --size 1048576 --iters 5
  python tools/bench_codec.py --input some.bin

Notes:
- Uses internal APIs (no subprocess). Run inside repo venv.
- Prints one JSON row per iteration plus a summary row.
"""

from __future__ import annotations

import argparse
import json
import os
import resource
import time
from pathlib import Path
from typing import Any


def _peak_rss_kb() -> int:
    # Linux: ru_maxrss is KB
    return int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="bench_codec.py", description="emoji-id codec benchmark")
    ap.add_argument("--input", type=Path, default=None, help="Benchmark the bytes of this file")
    ap.add_argument("--size", type=int, default=1 << 20, help="Random payload size (default: 1 MiB)")
    ap.add_argument("--iters", type=int, default=3)
    ns = ap.parse_args(argv)

    from emoji_id.core.codec_emoji import CodecEmoji

    if ns.input is not None:
        if not ns.input.is_file():
            raise SystemExit(f"input non valido: {ns.input}")
        data = ns.input.read_bytes()
    else:
        if ns.size < 0:
            raise SystemExit(f"--size non valido: {ns.size}")
        data = os.urandom(int(ns.size))

    codec = CodecEmoji()
    rows: list[dict[str, Any]] = []
    t0_all = time.perf_counter()

    for i in range(int(ns.iters)):
        rss0 = _peak_rss_kb()
        t0 = time.perf_counter()
        text = codec.encode(data)
        t_enc = time.perf_counter() - t0
        rss1 = _peak_rss_kb()

        t1 = time.perf_counter()
        back = codec.decode(text)
        t_dec = time.perf_counter() - t1
        rss2 = _peak_rss_kb()

        same = back == data
        mib = len(data) / (1 << 20)
        row = {
            "iter": i + 1,
            "bytes": len(data),
            "glyphs": len(text),
            "utf8_bytes": len(text.encode("utf-8")),
            "times_sec": {"encode": t_enc, "decode": t_dec, "total": t_enc + t_dec},
            "mib_per_sec": {
                "encode": (mib / t_enc) if t_enc > 0 else None,
                "decode": (mib / t_dec) if t_dec > 0 else None,
            },
            "peak_rss_kb": {"before": rss0, "after_encode": rss1, "after_decode": rss2},
            "roundtrip_ok": bool(same),
        }
        rows.append(row)
        print(json.dumps(row, ensure_ascii=False))
        if not same:
            raise SystemExit("roundtrip mismatch: decode(encode(x)) != x")

    total = time.perf_counter() - t0_all
    avg_total = (sum(r["times_sec"]["total"] for r in rows) / len(rows)) if rows else 0.0
    summary = {
        "schema": "emoji-id.bench_codec.v1",
        "iters": len(rows),
        "bytes": len(data),
        "avg_total_sec": avg_total,
        "wall_total_sec": total,
        "max_peak_rss_kb": max((r["peak_rss_kb"]["after_decode"] for r in rows), default=0),
    }
    print(json.dumps(summary, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
