"""Load the two sides of a compared path as text for display."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from folder_diff.core.linediff import diff_lines, split_lines
from folder_diff.core.models import (
    EntryKind,
    FileDiff,
    Side,
    SingleFileView,
    Status,
    TextUnavailable,
)
from folder_diff.core.navigator import ChangeNavigator
from folder_diff.core.options import CompareOptions

if TYPE_CHECKING:
    from pathlib import Path

    from folder_diff.core.models import ComparisonResult, FileView

logger = logging.getLogger(__name__)

_BINARY_SAMPLE_BYTES = 8192

CANNOT_READ = "cannot read file"
NOT_TEXT = "cannot display as text"
NOT_A_FILE = "not a file"
NOT_COMPARED = "path was not compared"
TOO_LARGE = "too large to diff"


def _is_binary(data: bytes) -> bool:
    """Detect binary content via null-byte check."""
    return b"\x00" in data[:_BINARY_SAMPLE_BYTES]


def read_text(path: Path, *, encoding: str = "utf-8") -> str | None:
    """Read a file as text.

    Returns:
        The decoded content, or None if the file cannot be read, looks
        binary, or is not valid in ``encoding``.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return None
    if _is_binary(data):
        logger.debug("%s looks binary", path)
        return None
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        logger.debug("Cannot decode %s as %s: %s", path, encoding, exc)
        return None


def _unavailable_reason(path: Path) -> str:
    if os.path.isfile(path) and os.access(path, os.R_OK):
        return NOT_TEXT
    return CANNOT_READ


def load_file_view(
    result: ComparisonResult,
    path: str,
    options: CompareOptions | None = None,
) -> FileView:
    """Build the display view for one compared path.

    Files on one side only yield a :class:`SingleFileView`; files on both
    sides yield a :class:`FileDiff` with a fresh navigator. Anything that
    cannot be shown as text yields :class:`TextUnavailable`.
    """
    options = options or CompareOptions()
    record = result.find(path)
    if record is None:
        return TextUnavailable(path=path, reason=NOT_COMPARED)
    if record.kind != EntryKind.file:
        return TextUnavailable(path=path, reason=NOT_A_FILE)

    normalize = options.ignore_line_breaks

    if record.status in (Status.only_a, Status.only_b):
        side = Side.a if record.status == Status.only_a else Side.b
        full_path = (result.left_root if side == Side.a else result.right_root) / path
        text = read_text(full_path)
        if text is None:
            return TextUnavailable(path=path, reason=_unavailable_reason(full_path))
        lines = split_lines(text, normalize_line_endings=normalize)
        return SingleFileView(path=path, side=side, lines=tuple(lines))

    left_path = result.left_root / path
    right_path = result.right_root / path
    text_a = read_text(left_path)
    if text_a is None:
        return TextUnavailable(path=path, reason=_unavailable_reason(left_path))
    text_b = read_text(right_path)
    if text_b is None:
        return TextUnavailable(path=path, reason=_unavailable_reason(right_path))

    lines_a = split_lines(text_a, normalize_line_endings=normalize)
    lines_b = split_lines(text_b, normalize_line_endings=normalize)
    if len(lines_a) * len(lines_b) > options.max_diff_cells:
        logger.warning(
            "Not diffing %s: %d x %d lines exceeds the limit of %d cells",
            path,
            len(lines_a),
            len(lines_b),
            options.max_diff_cells,
        )
        return TextUnavailable(path=path, reason=TOO_LARGE)

    lines = diff_lines(lines_a, lines_b)
    return FileDiff(path=path, status=record.status, lines=lines, navigator=ChangeNavigator(lines))
