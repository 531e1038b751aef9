"""Data models for folder-diff comparison results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import re
    from collections.abc import Iterator, Sequence
    from pathlib import Path

    from folder_diff.core.navigator import ChangeNavigator


class EntryKind(StrEnum):
    """Kind of a path in a snapshot."""

    file = "file"
    directory = "directory"


class Status(StrEnum):
    """Comparison status of a path."""

    only_a = "only-a"
    only_b = "only-b"
    match = "match"
    different = "different"


class DiffLineKind(StrEnum):
    """Alignment kind of a single diff line."""

    same = "same"
    added = "added"
    removed = "removed"


class Side(StrEnum):
    """One of the two compared roots."""

    a = "a"
    b = "b"


@dataclass(frozen=True)
class IgnoreRule:
    """A compiled gitignore-style exclusion rule.

    ``scope`` is the directory (relative to the scan root) whose ignore file
    declared the rule; it is empty for root-level and caller-supplied rules.
    """

    raw: str
    regex: re.Pattern[str]
    negated: bool = False
    anchored: bool = False
    directory_only: bool = False
    scope: str = ""

    def matches(self, path: str) -> bool:
        """Check whether a normalized relative path is matched by this rule."""
        return self.regex.search(path) is not None


@dataclass(frozen=True)
class Entry:
    """One path in a snapshot.

    ``digest`` is ``None`` for directories and for files whose content could
    not be read. An empty file still has a digest.
    """

    path: str
    kind: EntryKind
    size: int | None = None
    digest: str | None = None

    @property
    def readable(self) -> bool:
        """True for files whose content digest was computed."""
        return self.kind == EntryKind.file and self.digest is not None


@dataclass(frozen=True)
class Snapshot:
    """Flat, read-only index of one directory tree keyed by relative path."""

    root: Path
    entries: Mapping[str, Entry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, path: object) -> bool:
        return path in self.entries

    def __getitem__(self, path: str) -> Entry:
        return self.entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class ComparisonRecord:
    """Classification of one path present in either snapshot."""

    path: str
    kind: EntryKind
    status: Status
    in_a: bool
    in_b: bool


@dataclass(frozen=True)
class ComparisonStats:
    """Summary counts for a comparison run.

    ``only_a``, ``only_b`` and ``match`` count files; ``different`` counts
    files and directories.
    """

    only_a: int
    only_b: int
    different: int
    match: int

    @classmethod
    def from_records(cls, records: Sequence[ComparisonRecord]) -> ComparisonStats:
        """Compute stats by counting record statuses."""
        files = [r for r in records if r.kind == EntryKind.file]
        return cls(
            only_a=sum(1 for r in files if r.status == Status.only_a),
            only_b=sum(1 for r in files if r.status == Status.only_b),
            different=sum(1 for r in records if r.status == Status.different),
            match=sum(1 for r in files if r.status == Status.match),
        )

    @property
    def identical(self) -> bool:
        """True when no path is missing or different on either side."""
        return self.only_a == 0 and self.only_b == 0 and self.different == 0


@dataclass(frozen=True)
class ComparisonResult:
    """Top-level result of comparing two roots."""

    left_root: Path
    right_root: Path
    records: tuple[ComparisonRecord, ...]
    stats: ComparisonStats

    def find(self, path: str) -> ComparisonRecord | None:
        """Return the record for a relative path, or None."""
        for record in self.records:
            if record.path == path:
                return record
        return None


@dataclass(frozen=True)
class DiffLine:
    """A single aligned line of a file diff."""

    kind: DiffLineKind
    content: str
    line_a: int | None
    line_b: int | None


@dataclass(frozen=True)
class FileDiff:
    """Line diff of a path present on both sides."""

    path: str
    status: Status
    lines: tuple[DiffLine, ...]
    navigator: ChangeNavigator


@dataclass(frozen=True)
class SingleFileView:
    """Content of a file present on one side only."""

    path: str
    side: Side
    lines: tuple[str, ...]


@dataclass(frozen=True)
class TextUnavailable:
    """A path whose content cannot be shown as a line diff."""

    path: str
    reason: str


FileView = FileDiff | SingleFileView | TextUnavailable
