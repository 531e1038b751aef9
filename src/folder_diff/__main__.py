"""Allow ``python -m folder_diff``."""

from __future__ import annotations

from folder_diff.cli.app import app

app()
