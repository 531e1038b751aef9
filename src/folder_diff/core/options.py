"""Options for a comparison run."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DIFF_CELLS = 25_000_000


@dataclass(frozen=True)
class CompareOptions:
    """Immutable configuration for one comparison run.

    ``ignore_patterns`` are placed ahead of any collected ``.gitignore``
    rules. ``hide_matches`` only affects rendering.
    """

    ignore_line_breaks: bool = True
    use_gitignore: bool = True
    ignore_patterns: tuple[str, ...] = ()
    hide_matches: bool = False
    hash_algo: str = "sha256"
    max_diff_cells: int = DEFAULT_MAX_DIFF_CELLS
