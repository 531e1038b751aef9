"""Collect .gitignore rules from a directory tree."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from folder_diff.core.patterns import COMMENT_PREFIX, compile_ignore_rules

if TYPE_CHECKING:
    from pathlib import Path

    from folder_diff.core.models import IgnoreRule
    from folder_diff.core.options import CompareOptions

logger = logging.getLogger(__name__)

GITIGNORE_FILENAME = ".gitignore"
VCS_METADATA_DIR = ".git"


def _join_posix(directory: str, name: str) -> str:
    """Join a relative directory and name with POSIX separator."""
    if directory:
        return f"{directory}/{name}"
    return name


def parse_ignore_file(path: Path) -> list[str]:
    """Read rule lines from an ignore file.

    Lines are trimmed; blank lines and comments are dropped. An unreadable
    file yields no rules.
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Cannot read ignore file %s: %s", path, exc)
        return []
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if line and not line.startswith(COMMENT_PREFIX)]


def collect_ignore_rules(root: Path) -> list[IgnoreRule]:
    """Walk ``root`` depth-first and compile every ignore file found.

    Rules from a nested ignore file are scoped to the directory that holds
    it. The VCS metadata directory is never entered. Directories that cannot
    be listed are skipped.
    """
    rules: list[IgnoreRule] = []
    seen: set[tuple[int, int]] = set()

    def walk(directory: Path, rel_dir: str) -> None:
        try:
            st = directory.stat()
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            return
        if (st.st_dev, st.st_ino) in seen:
            return
        seen.add((st.st_dev, st.st_ino))

        ignore_file = directory / GITIGNORE_FILENAME
        try:
            has_ignore_file = ignore_file.is_file()
        except OSError:
            has_ignore_file = False
        if has_ignore_file:
            patterns = parse_ignore_file(ignore_file)
            rules.extend(compile_ignore_rules(patterns, scope=rel_dir))

        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            return

        for child in children:
            if child.name == VCS_METADATA_DIR:
                continue
            try:
                is_dir = child.is_dir()
            except OSError:
                continue
            if is_dir:
                walk(directory / child.name, _join_posix(rel_dir, child.name))

    walk(root, "")
    logger.debug("Collected %d ignore rule(s) under %s", len(rules), root)
    return rules


def build_rule_list(left: Path, right: Path, options: CompareOptions) -> list[IgnoreRule]:
    """Build the ordered rule list shared by both snapshots.

    Caller-supplied patterns come first, then rules collected from the left
    tree, then rules from the right tree.
    """
    rules = compile_ignore_rules(options.ignore_patterns)
    if options.use_gitignore:
        rules.extend(collect_ignore_rules(left))
        rules.extend(collect_ignore_rules(right))
    return rules
