"""Command line interface for folder-diff."""
