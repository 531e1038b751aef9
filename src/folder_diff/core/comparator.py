"""Comparison orchestrator that chains the snapshot and tree passes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from folder_diff.core.ignorefiles import build_rule_list
from folder_diff.core.models import ComparisonResult, ComparisonStats
from folder_diff.core.options import CompareOptions
from folder_diff.core.snapshotter import snapshot
from folder_diff.core.text import load_file_view
from folder_diff.core.tree import compare_trees

if TYPE_CHECKING:
    from pathlib import Path

    from folder_diff.core.models import FileView

logger = logging.getLogger(__name__)


class Comparator:
    """Runs one comparison of two directory trees.

    Pipeline: ignore rules -> snapshot A, snapshot B -> tree comparison ->
    stats. The comparator holds only its options; every run returns a new
    :class:`ComparisonResult` that the caller owns.
    """

    def __init__(self, options: CompareOptions | None = None) -> None:
        """Initialize the comparator.

        Args:
            options: Comparison options. Defaults to CompareOptions() if None.
        """
        self._options = options or CompareOptions()

    @property
    def options(self) -> CompareOptions:
        return self._options

    def compare(self, left: Path, right: Path) -> ComparisonResult:
        """Compare two directory trees.

        Args:
            left: Root of tree A.
            right: Root of tree B.

        Returns:
            ComparisonResult with records in ascending path order and stats.

        Raises:
            NotADirectoryError: If left or right is not an existing directory.
        """
        left = left.resolve()
        right = right.resolve()
        self._validate_root(left, "Left")
        self._validate_root(right, "Right")

        rules = build_rule_list(left, right, self._options)
        logger.info("Comparing %s with %s using %d ignore rule(s)", left, right, len(rules))

        snapshot_a = snapshot(
            left,
            rules,
            normalize_line_endings=self._options.ignore_line_breaks,
            hash_algo=self._options.hash_algo,
        )
        snapshot_b = snapshot(
            right,
            rules,
            normalize_line_endings=self._options.ignore_line_breaks,
            hash_algo=self._options.hash_algo,
        )

        records = compare_trees(snapshot_a, snapshot_b)
        return ComparisonResult(
            left_root=left,
            right_root=right,
            records=records,
            stats=ComparisonStats.from_records(records),
        )

    def open(self, result: ComparisonResult, path: str) -> FileView:
        """Load the file view for one path of a previous result."""
        return load_file_view(result, path, self._options)

    @staticmethod
    def _validate_root(path: Path, label: str) -> None:
        """Check that a comparison root is an existing directory."""
        if not path.is_dir():
            msg = f"{label} path is not a directory: {path}"
            raise NotADirectoryError(msg)
