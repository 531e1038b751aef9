"""JSON export renderer."""

from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import PurePath
from typing import TYPE_CHECKING

from folder_diff.core.models import FileDiff, SingleFileView
from folder_diff.output.base import visible_records

if TYPE_CHECKING:
    from typing import Any, TextIO

    from folder_diff.core.models import ComparisonResult, ComparisonStats, FileView


class _ResultEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles Path objects.

    StrEnum values serialize natively as strings. Only Path objects
    require custom handling.
    """

    def default(self, o: object) -> object:
        """Encode Path objects as their string representation."""
        if isinstance(o, PurePath):
            return str(o)
        return super().default(o)


def _file_view_data(view: FileView) -> dict[str, Any]:
    """Convert a file view to plain data; the navigator becomes counts."""
    if isinstance(view, FileDiff):
        return {
            "view": "diff",
            "path": view.path,
            "status": view.status,
            "changes": view.navigator.count,
            "lines": [dataclasses.asdict(line) for line in view.lines],
        }
    if isinstance(view, SingleFileView):
        return {"view": "single", **dataclasses.asdict(view)}
    return {"view": "unavailable", **dataclasses.asdict(view)}


class JsonRenderer:
    """Renders comparison results as JSON to a text stream.

    Output goes to stdout by default. Pass a custom TextIO for
    file output or testing.
    """

    def __init__(self, output: TextIO | None = None, *, indent: int = 2) -> None:
        """Initialize with an optional output stream.

        Args:
            output: Text stream for JSON output. Defaults to sys.stdout.
            indent: JSON indentation level. Defaults to 2.
        """
        self._output = output or sys.stdout
        self._indent = indent

    def render(self, result: ComparisonResult, *, hide_matches: bool = False) -> None:
        """Serialize the comparison result as JSON."""
        data = {
            "left_root": result.left_root,
            "right_root": result.right_root,
            "records": [
                dataclasses.asdict(r)
                for r in visible_records(result.records, hide_matches=hide_matches)
            ],
            "stats": dataclasses.asdict(result.stats),
        }
        self._dump(data)

    def render_stats(self, stats: ComparisonStats) -> None:
        """Serialize summary statistics as JSON."""
        self._dump(dataclasses.asdict(stats))

    def render_file(self, view: FileView) -> None:
        """Serialize a file view as JSON."""
        self._dump(_file_view_data(view))

    def _dump(self, data: object) -> None:
        json.dump(data, self._output, cls=_ResultEncoder, indent=self._indent)
        self._output.write("\n")
