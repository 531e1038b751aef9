"""Two-phase tree comparison with bottom-up directory aggregation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from folder_diff.core.models import ComparisonRecord, EntryKind, Status

if TYPE_CHECKING:
    from folder_diff.core.models import Entry, Snapshot

logger = logging.getLogger(__name__)


def _parent(path: str) -> str:
    return path.rpartition("/")[0]


def _classify(entry_a: Entry | None, entry_b: Entry | None) -> Status | None:
    """Classify a path from presence and digests; None means pending aggregation."""
    if entry_b is None:
        return Status.only_a
    if entry_a is None:
        return Status.only_b
    if entry_a.kind != entry_b.kind:
        return Status.different
    if entry_a.kind == EntryKind.directory:
        return None
    # An unreadable file never matches, not even another unreadable one.
    if entry_a.readable and entry_b.readable and entry_a.digest == entry_b.digest:
        return Status.match
    return Status.different


def compare_trees(a: Snapshot, b: Snapshot) -> tuple[ComparisonRecord, ...]:
    """Classify every path present in either snapshot.

    Files on both sides are compared by digest. A directory on both sides is
    ``match`` only when every descendant is on both sides and matches;
    directories missing from one side keep their ``only-a``/``only-b``
    status. Records are returned in ascending path order.
    """
    universe = set(a) | set(b)

    kinds: dict[str, EntryKind] = {}
    statuses: dict[str, Status | None] = {}
    for path in universe:
        entry_a = a.entries.get(path)
        entry_b = b.entries.get(path)
        kinds[path] = (entry_a or entry_b).kind  # type: ignore[union-attr]
        statuses[path] = _classify(entry_a, entry_b)

    # Descending order visits every descendant before its ancestors, so each
    # pending directory is resolved after all of its children are final.
    differing_dirs: set[str] = set()
    for path in sorted(universe, reverse=True):
        status = statuses[path]
        if status is None:
            status = Status.different if path in differing_dirs else Status.match
            statuses[path] = status
        if status != Status.match:
            differing_dirs.add(_parent(path))

    records = tuple(
        ComparisonRecord(
            path=path,
            kind=kinds[path],
            status=statuses[path],  # type: ignore[arg-type]
            in_a=path in a,
            in_b=path in b,
        )
        for path in sorted(universe)
    )
    logger.info(
        "Compared %d path(s): %d not matching",
        len(records),
        sum(1 for r in records if r.status != Status.match),
    )
    return records
