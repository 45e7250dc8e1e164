#!/usr/bin/env python3
"""Generate docs/*.md from the modules that own the data.

  docs/exit_codes.md  <- emoji_id.errors.render_exit_codes_markdown()
  docs/alphabet.md    <- emoji_id.core.alphabet.render_alphabet_markdown()

--check writes nothing and exits 1 if any doc is missing or stale (for CI).
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path


def _targets() -> dict[str, Callable[[], str]]:
    from emoji_id.core import alphabet
    from emoji_id import errors

    return {
        "exit_codes.md": errors.render_exit_codes_markdown,
        "alphabet.md": alphabet.render_alphabet_markdown,
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="gen_docs.py", description="Regenerate emoji-id docs")
    ap.add_argument("--check", action="store_true", help="Only report stale docs, write nothing")
    ap.add_argument("--only", choices=["exit_codes.md", "alphabet.md"], default=None)
    ns = ap.parse_args(argv)

    repo = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo / "src"))
    docs = repo / "docs"

    stale: list[str] = []
    for name, render in _targets().items():
        if ns.only and name != ns.only:
            continue
        out = docs / name
        text = render()
        current = out.read_text(encoding="utf-8") if out.is_file() else None
        if ns.check:
            if current != text:
                stale.append(name)
            continue
        docs.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        print(f"[emoji-id] wrote {out}")

    if stale:
        print(f"[emoji-id] stale docs: {', '.join(stale)} (run scripts/gen_docs.py)", file=sys.stderr)
        return 1
    if ns.check:
        print("[emoji-id] docs up to date")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
