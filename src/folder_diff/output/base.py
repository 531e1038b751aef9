"""Renderer protocol for comparison output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from folder_diff.core.models import Status

if TYPE_CHECKING:
    from collections.abc import Sequence

    from folder_diff.core.models import (
        ComparisonRecord,
        ComparisonResult,
        ComparisonStats,
        FileView,
    )


@runtime_checkable
class Renderer(Protocol):
    """Protocol for rendering comparison results.

    Implementations write to their own destination (console, stream).
    """

    def render(self, result: ComparisonResult, *, hide_matches: bool = False) -> None:
        """Render the classified tree."""
        ...

    def render_stats(self, stats: ComparisonStats) -> None:
        """Render summary counts only."""
        ...

    def render_file(self, view: FileView) -> None:
        """Render a single file view (diff, one-sided content, or reason)."""
        ...


def visible_records(
    records: Sequence[ComparisonRecord],
    *,
    hide_matches: bool,
) -> tuple[ComparisonRecord, ...]:
    """Drop ``match`` records when ``hide_matches`` is set."""
    if not hide_matches:
        return tuple(records)
    return tuple(r for r in records if r.status != Status.match)
