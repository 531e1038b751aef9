"""CLI entry point for folder-diff."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from folder_diff.core.comparator import Comparator
from folder_diff.core.models import FileDiff
from folder_diff.core.options import CompareOptions
from folder_diff.output.rich_output import RichRenderer

if TYPE_CHECKING:
    from folder_diff.output.base import Renderer

OUTPUT_MODES = ("rich", "json")

app = typer.Typer(
    name="folder-diff",
    help="Compare two directory trees path by path.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from folder_diff import __version__

        typer.echo(f"folder-diff {__version__}")
        raise typer.Exit()


def _configure_logging(verbosity: int) -> None:
    """Send package logs to stderr through Rich; -v for INFO, -vv for DEBUG."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG

    logger = logging.getLogger("folder_diff")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    )
    logger.setLevel(level)
    logger.propagate = False


def _parse_output_mode(value: str) -> str:
    """Validate the output mode name."""
    if value not in OUTPUT_MODES:
        valid = ", ".join(OUTPUT_MODES)
        msg = f"Invalid output mode '{value}'. Choose from: {valid}"
        raise typer.BadParameter(msg)
    return value


def _parse_hash_algo(value: str) -> str:
    """Validate the hash algorithm name; only fixed-length digests are usable."""
    name = value.lower()
    if name not in hashlib.algorithms_available:
        msg = f"Unknown hash algorithm '{value}'"
        raise typer.BadParameter(msg)
    try:
        digest_size = hashlib.new(name).digest_size
    except ValueError:
        digest_size = 0
    if digest_size <= 0 or name.startswith("shake_"):
        msg = f"Hash algorithm '{value}' has no fixed digest length"
        raise typer.BadParameter(msg)
    return name


def _build_options(
    *,
    keep_line_breaks: bool,
    no_gitignore: bool,
    ignore: list[str] | None,
    hide_matches: bool,
    hash_algo: str,
) -> CompareOptions:
    """Build CompareOptions from CLI flags."""
    return CompareOptions(
        ignore_line_breaks=not keep_line_breaks,
        use_gitignore=not no_gitignore,
        ignore_patterns=tuple(ignore) if ignore else (),
        hide_matches=hide_matches,
        hash_algo=hash_algo,
    )


def _get_renderer(output_mode: str) -> Renderer:
    """Get the renderer for an output mode."""
    if output_mode == "json":
        from folder_diff.output.json_output import JsonRenderer

        return JsonRenderer()
    return RichRenderer()


@app.command()
def main(
    left: Annotated[Path, typer.Argument(help="Directory A.")],
    right: Annotated[Path, typer.Argument(help="Directory B.")],
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output mode: rich or json."),
    ] = "rich",
    stat: Annotated[
        bool,
        typer.Option("--stat", help="Show only summary statistics."),
    ] = False,
    hide_matches: Annotated[
        bool,
        typer.Option("--hide-matches", help="Leave matching paths out of the tree."),
    ] = False,
    no_gitignore: Annotated[
        bool,
        typer.Option("--no-gitignore", help="Don't collect .gitignore rules from either tree."),
    ] = False,
    ignore: Annotated[
        list[str] | None,
        typer.Option("--ignore", "-i", help="Extra ignore pattern(s), gitignore syntax."),
    ] = None,
    keep_line_breaks: Annotated[
        bool,
        typer.Option("--keep-line-breaks", help="Treat CRLF/CR/LF differences as changes."),
    ] = False,
    hash_algo: Annotated[
        str,
        typer.Option("--hash", help="Hash algorithm for file content."),
    ] = "sha256",
    diff: Annotated[
        str | None,
        typer.Option("--diff", "-D", help="Show the line diff of one relative path."),
    ] = None,
    goto: Annotated[
        int,
        typer.Option(
            "--goto",
            "-g",
            help="Highlight the Nth change of --diff (negative counts back).",
        ),
    ] = 0,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Log progress to stderr (repeat for debug).",
        ),
    ] = 0,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Compare two directory trees and report each path as only-a, only-b, match or different.

    With --diff, show an aligned line diff of one path instead of the tree.
    """
    _configure_logging(verbose)

    try:
        output_mode = _parse_output_mode(output)
        options = _build_options(
            keep_line_breaks=keep_line_breaks,
            no_gitignore=no_gitignore,
            ignore=ignore,
            hide_matches=hide_matches,
            hash_algo=_parse_hash_algo(hash_algo),
        )
        comparator = Comparator(options)
        result = comparator.compare(left, right)
        renderer = _get_renderer(output_mode)

        if diff is not None:
            path = diff.replace("\\", "/").strip("/")
            if result.find(path) is None:
                msg = f"Path was not compared: {path}"
                raise ValueError(msg)
            view = comparator.open(result, path)
            if isinstance(view, FileDiff):
                move = view.navigator.next if goto > 0 else view.navigator.previous
                for _ in range(abs(goto)):
                    move()
            renderer.render_file(view)
        elif stat:
            renderer.render_stats(result.stats)
        else:
            renderer.render(result, hide_matches=options.hide_matches)

    except (NotADirectoryError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from None
