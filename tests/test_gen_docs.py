from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from emoji_id.core.alphabet import render_alphabet_markdown
from emoji_id.errors import render_exit_codes_markdown

REPO = Path(__file__).resolve().parents[1]


@pytest.fixture()
def repo_copy(tmp_path: Path) -> Path:
    # the generator writes into <repo>/docs: run it on a throwaway copy
    dst = tmp_path / "repo"
    shutil.copytree(REPO / "src", dst / "src", ignore=shutil.ignore_patterns("__pycache__"))
    shutil.copytree(REPO / "scripts", dst / "scripts", ignore=shutil.ignore_patterns("__pycache__"))
    return dst


def _gen(repo: Path, *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, str(repo / "scripts" / "gen_docs.py"), *args],
        text=True,
        capture_output=True,
    )


def test_generated_docs_match_modules(repo_copy: Path) -> None:
    r = _gen(repo_copy)
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert r.stdout.count("[emoji-id] wrote") == 2

    docs = repo_copy / "docs"
    assert (docs / "exit_codes.md").read_text(encoding="utf-8") == render_exit_codes_markdown()
    assert (docs / "alphabet.md").read_text(encoding="utf-8") == render_alphabet_markdown()


@pytest.mark.parametrize(
    "doc,render",
    [
        ("exit_codes.md", render_exit_codes_markdown),
        ("alphabet.md", render_alphabet_markdown),
    ],
)
def test_only_writes_one_doc(repo_copy: Path, doc: str, render) -> None:
    r = _gen(repo_copy, "--only", doc)
    assert r.returncode == 0, (r.stdout, r.stderr)

    written = sorted(p.name for p in (repo_copy / "docs").iterdir())
    assert written == [doc]
    assert (repo_copy / "docs" / doc).read_text(encoding="utf-8") == render()


def test_check_reports_missing_then_stale_then_clean(repo_copy: Path) -> None:
    r = _gen(repo_copy, "--check")
    assert r.returncode == 1
    assert "stale docs" in r.stderr
    assert not (repo_copy / "docs").exists()

    assert _gen(repo_copy).returncode == 0
    r = _gen(repo_copy, "--check")
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert "docs up to date" in r.stdout

    stale = repo_copy / "docs" / "exit_codes.md"
    stale.write_text("# Exit codes\n", encoding="utf-8")
    r = _gen(repo_copy, "--check")
    assert r.returncode == 1
    assert "exit_codes.md" in r.stderr
    assert "alphabet.md" not in r.stderr
    assert stale.read_text(encoding="utf-8") == "# Exit codes\n"
