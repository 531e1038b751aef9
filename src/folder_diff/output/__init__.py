"""Public API for folder_diff.output."""

from __future__ import annotations

from folder_diff.output.base import Renderer, visible_records
from folder_diff.output.json_output import JsonRenderer
from folder_diff.output.rich_output import RichRenderer

__all__ = [
    "JsonRenderer",
    "Renderer",
    "RichRenderer",
    "visible_records",
]
