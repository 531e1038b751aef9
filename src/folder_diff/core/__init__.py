"""Public API for folder_diff.core."""

from __future__ import annotations

from folder_diff.core.comparator import Comparator
from folder_diff.core.ignorefiles import build_rule_list, collect_ignore_rules
from folder_diff.core.linediff import diff_lines, split_lines
from folder_diff.core.models import (
    ComparisonRecord,
    ComparisonResult,
    ComparisonStats,
    DiffLine,
    DiffLineKind,
    Entry,
    EntryKind,
    FileDiff,
    IgnoreRule,
    Side,
    SingleFileView,
    Snapshot,
    Status,
    TextUnavailable,
)
from folder_diff.core.navigator import ChangeNavigator
from folder_diff.core.options import CompareOptions
from folder_diff.core.patterns import compile_ignore_rules, is_ignored
from folder_diff.core.snapshotter import snapshot
from folder_diff.core.text import load_file_view
from folder_diff.core.tree import compare_trees

__all__ = [
    "ChangeNavigator",
    "CompareOptions",
    "Comparator",
    "ComparisonRecord",
    "ComparisonResult",
    "ComparisonStats",
    "DiffLine",
    "DiffLineKind",
    "Entry",
    "EntryKind",
    "FileDiff",
    "IgnoreRule",
    "Side",
    "SingleFileView",
    "Snapshot",
    "Status",
    "TextUnavailable",
    "build_rule_list",
    "collect_ignore_rules",
    "compare_trees",
    "compile_ignore_rules",
    "diff_lines",
    "is_ignored",
    "load_file_view",
    "snapshot",
    "split_lines",
]
