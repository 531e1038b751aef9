"""folder-diff: compare two directory trees path by path."""

from __future__ import annotations

__version__ = "0.1.0"
