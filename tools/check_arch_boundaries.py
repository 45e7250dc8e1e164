#!/usr/bin/env python3
"""Run the import-layering checks from tests/test_arch_boundaries.py without pytest."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    test_path = repo_root / "tests" / "test_arch_boundaries.py"
    if not test_path.is_file():
        print("ERROR: tests/test_arch_boundaries.py not found.", file=sys.stderr)
        return 3

    spec = importlib.util.spec_from_file_location("arch_boundaries", test_path)
    if spec is None or spec.loader is None:
        print(f"ERROR: cannot load {test_path}", file=sys.stderr)
        return 3
    mod = importlib.util.module_from_spec(spec)
    # dataclasses look the module up in sys.modules
    sys.modules[spec.name] = mod
    spec.loader.exec_module(mod)

    checks = sorted(k for k in vars(mod) if k.startswith("test_") and callable(getattr(mod, k)))
    if not checks:
        print("ERROR: no test_* checks found.", file=sys.stderr)
        return 3

    failed = 0
    for name in checks:
        try:
            getattr(mod, name)()
        except AssertionError as e:
            print(str(e), file=sys.stderr)
            failed += 1
        except Exception as e:
            print(f"ERROR: {name}: unexpected failure: {e}", file=sys.stderr)
            return 3

    if failed:
        return 2
    print(f"OK: architecture boundaries respected ({len(checks)} checks).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
