"""Shared test fixtures for folder-diff."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sample_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Create two directory trees with known differences.

    Structure:
        a/
            common.txt          (identical in both)
            modified.txt        (different content)
            a_only.txt          (only in a)
            same/
                nested.txt      (identical in both)
            sub/
                nested.txt      (identical in both)
                a_nested.txt    (only in a)
            docs/               (only in a)
                guide.md
            empty/              (empty in both)
        b/
            common.txt
            modified.txt
            b_only.txt          (only in b)
            same/
                nested.txt
            sub/
                nested.txt
                b_nested.txt    (only in b)
            empty/
    """
    left = tmp_path / "a"
    right = tmp_path / "b"
    for root in (left, right):
        (root / "same").mkdir(parents=True)
        (root / "sub").mkdir()
        (root / "empty").mkdir()
        (root / "common.txt").write_text("same content\n")
        (root / "same" / "nested.txt").write_text("nested same\n")
        (root / "sub" / "nested.txt").write_text("nested same\n")

    (left / "modified.txt").write_text("line 1\nline 2\nline 3\n")
    (right / "modified.txt").write_text("line 1\nchanged line 2\nline 3\n")

    (left / "a_only.txt").write_text("a only\n")
    (right / "b_only.txt").write_text("b only\n")

    (left / "sub" / "a_nested.txt").write_text("a nested\n")
    (right / "sub" / "b_nested.txt").write_text("b nested\n")

    (left / "docs").mkdir()
    (left / "docs" / "guide.md").write_text("# Guide\n")

    return left, right


@pytest.fixture
def identical_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Create two byte-identical trees with nested and empty directories."""
    left = tmp_path / "left"
    right = tmp_path / "right"
    for root in (left, right):
        (root / "src" / "pkg").mkdir(parents=True)
        (root / "empty").mkdir()
        (root / "README.md").write_text("readme\n")
        (root / "src" / "main.py").write_text("print('hi')\n")
        (root / "src" / "pkg" / "mod.py").write_text("x = 1\n")
        (root / "src" / "pkg" / "empty.txt").write_bytes(b"")
    return left, right


@pytest.fixture
def scenario_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Root A has x.txt "a\\nb\\n", root B has x.txt "a\\nc\\n"."""
    left = tmp_path / "A"
    right = tmp_path / "B"
    left.mkdir()
    right.mkdir()
    (left / "x.txt").write_text("a\nb\n")
    (right / "x.txt").write_text("a\nc\n")
    return left, right
