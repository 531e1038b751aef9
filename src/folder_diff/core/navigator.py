"""Cyclic cursor over the changed lines of a file diff."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folder_diff.core.models import DiffLineKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from folder_diff.core.models import DiffLine


class ChangeNavigator:
    """Moves forward and backward through the non-``same`` lines of a diff.

    The index starts at -1 (nothing selected). ``next`` past the last change
    wraps to the first; ``previous`` before the first wraps to the last.
    With no changes both moves are no-ops.
    """

    def __init__(self, lines: Iterable[DiffLine]) -> None:
        self._changes = tuple(line for line in lines if line.kind != DiffLineKind.same)
        self._index = -1

    @property
    def changes(self) -> tuple[DiffLine, ...]:
        return self._changes

    @property
    def count(self) -> int:
        return len(self._changes)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> DiffLine | None:
        """The selected change, or None before the first move."""
        if self._index < 0:
            return None
        return self._changes[self._index]

    def next(self) -> DiffLine | None:
        """Select the following change, wrapping to the first."""
        if not self._changes:
            return None
        self._index = self._index + 1 if self._index < self.count - 1 else 0
        return self.current

    def previous(self) -> DiffLine | None:
        """Select the preceding change, wrapping to the last."""
        if not self._changes:
            return None
        self._index = self._index - 1 if self._index > 0 else self.count - 1
        return self.current

    def reset(self) -> None:
        """Clear the selection."""
        self._index = -1

    def __len__(self) -> int:
        return len(self._changes)

    def __repr__(self) -> str:
        return f"ChangeNavigator(index={self._index}, count={self.count})"
