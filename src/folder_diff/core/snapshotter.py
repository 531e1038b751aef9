"""Directory snapshotter: flat, content-addressed index of one tree."""

from __future__ import annotations

import hashlib
import logging
import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec.util import normalize_file

from folder_diff.core.models import Entry, EntryKind, Snapshot
from folder_diff.core.patterns import is_ignored

if TYPE_CHECKING:
    from collections.abc import Sequence

    from folder_diff.core.models import IgnoreRule

logger = logging.getLogger(__name__)

_HASH_BUFFER_SIZE = 65536


def normalize_line_breaks(data: bytes) -> bytes:
    """Collapse CRLF and lone CR to LF."""
    return data.replace(b"\r\n", b"\n").replace(b"\r", b"\n")


def hash_file(
    path: Path,
    *,
    normalize_line_endings: bool = True,
    hash_algo: str = "sha256",
) -> str | None:
    """Compute the hex digest of a file.

    Raw bytes are streamed through the hash. With ``normalize_line_endings``
    the whole file is read and its line breaks collapsed first.

    Returns:
        Hexadecimal digest string, or None if the file could not be read.
    """
    hasher = hashlib.new(hash_algo)
    try:
        if normalize_line_endings:
            hasher.update(normalize_line_breaks(path.read_bytes()))
        else:
            with path.open("rb") as f:
                while True:
                    chunk = f.read(_HASH_BUFFER_SIZE)
                    if not chunk:
                        break
                    hasher.update(chunk)
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return None
    return hasher.hexdigest()


def snapshot(
    root: Path,
    rules: Sequence[IgnoreRule] = (),
    *,
    normalize_line_endings: bool = True,
    hash_algo: str = "sha256",
) -> Snapshot:
    """Index every non-ignored path under ``root``.

    Args:
        root: Directory to scan. Relative paths are computed against it.
        rules: Ordered ignore rules; the last matching rule decides.
        normalize_line_endings: Ignore CRLF/CR/LF differences when hashing.
        hash_algo: Hash algorithm name accepted by :func:`hashlib.new`.

    Returns:
        Snapshot of the tree. Paths that vanish or cannot be stat'ed are
        omitted; files that cannot be read are kept with no digest.
    """
    root = Path(root)
    entries: dict[str, Entry] = {}

    if not os.path.isdir(root):
        logger.warning("Snapshot root is not a directory: %s", root)
        return Snapshot(root=root, entries=entries)

    seen_dirs: set[tuple[int, int]] = set()

    def walk(directory: str) -> None:
        try:
            st = os.stat(directory)
        except OSError as exc:
            logger.warning("Cannot stat directory %s: %s", directory, exc)
            return
        key = (st.st_dev, st.st_ino)
        if key in seen_dirs:
            logger.info("Not descending into %s again (directory cycle)", directory)
            return
        seen_dirs.add(key)

        try:
            with os.scandir(directory) as it:
                names = sorted(e.name for e in it)
        except OSError as exc:
            logger.warning("Cannot list directory %s: %s", directory, exc)
            return

        for name in names:
            full_path = os.path.join(directory, name)
            rel_path = normalize_file(os.path.relpath(full_path, root))

            if is_ignored(rel_path, rules):
                logger.debug("Ignored %s", rel_path)
                continue

            try:
                child_stat = os.stat(full_path)
            except OSError as exc:
                logger.debug("Skipping inaccessible %s: %s", rel_path, exc)
                continue

            if stat.S_ISDIR(child_stat.st_mode):
                entries[rel_path] = Entry(path=rel_path, kind=EntryKind.directory)
                walk(full_path)
            else:
                entries[rel_path] = Entry(
                    path=rel_path,
                    kind=EntryKind.file,
                    size=child_stat.st_size,
                    digest=hash_file(
                        Path(full_path),
                        normalize_line_endings=normalize_line_endings,
                        hash_algo=hash_algo,
                    ),
                )

    walk(str(root))
    logger.info("Indexed %d path(s) under %s", len(entries), root)
    return Snapshot(root=root, entries=entries)
