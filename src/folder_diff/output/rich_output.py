"""Rich console renderer (default output mode)."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from folder_diff.core.models import (
    DiffLineKind,
    EntryKind,
    FileDiff,
    Side,
    SingleFileView,
    Status,
)
from folder_diff.output.base import visible_records

if TYPE_CHECKING:
    from folder_diff.core.models import (
        ComparisonRecord,
        ComparisonResult,
        ComparisonStats,
        DiffLine,
        FileView,
        TextUnavailable,
    )

_STATUS_STYLES: dict[Status, tuple[str, str]] = {
    Status.only_a: ("red", "A"),
    Status.only_b: ("green", "B"),
    Status.different: ("yellow", "~"),
    Status.match: ("dim", "="),
}

_LINE_STYLES: dict[DiffLineKind, tuple[str, str]] = {
    DiffLineKind.removed: ("red", "-"),
    DiffLineKind.added: ("green", "+"),
    DiffLineKind.same: ("", " "),
}


def _status_style(status: Status) -> tuple[str, str]:
    """Return (rich_style, marker) for a comparison status."""
    return _STATUS_STYLES[status]


def _tree_order(record: ComparisonRecord) -> tuple[bool, str]:
    """Directories first, then by name."""
    return (record.kind != EntryKind.directory, record.path.rpartition("/")[2])


class RichRenderer:
    """Renders comparison results to a Rich console.

    - render(): nested tree, directories first, one colour and marker per
      status (A: only in A, B: only in B, ~: different, =: match)
    - render_stats(): one-line summary
    - render_file(): numbered side-by-side line table with change markers
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with an optional Rich console.

        Args:
            console: Rich Console instance. Defaults to Console() if None.
        """
        self._console = console or Console()

    def render(self, result: ComparisonResult, *, hide_matches: bool = False) -> None:
        """Render the classified tree followed by the summary."""
        self._console.print(self._build_tree(result, hide_matches=hide_matches))
        self.render_stats(result.stats)

    def render_stats(self, stats: ComparisonStats) -> None:
        """Render summary statistics."""
        self._console.print(
            f"[red]{stats.only_a} only in A[/red], "
            f"[green]{stats.only_b} only in B[/green], "
            f"[yellow]{stats.different} different[/yellow], "
            f"[dim]{stats.match} match[/dim]"
        )

    def render_file(self, view: FileView) -> None:
        """Render a file view."""
        if isinstance(view, FileDiff):
            self._render_diff(view)
        elif isinstance(view, SingleFileView):
            self._render_single(view)
        else:
            self._render_unavailable(view)

    def _build_tree(self, result: ComparisonResult, *, hide_matches: bool) -> Tree:
        """Build a nested Rich Tree from the flat record list."""
        left_name = escape(result.left_root.name)
        right_name = escape(result.right_root.name)
        label = f"[bold]{left_name}[/bold] vs [bold]{right_name}[/bold]"
        tree = Tree(label)

        children: dict[str, list[ComparisonRecord]] = defaultdict(list)
        for record in visible_records(result.records, hide_matches=hide_matches):
            children[record.path.rpartition("/")[0]].append(record)

        def add_children(parent: Tree, parent_path: str) -> None:
            for record in sorted(children.get(parent_path, ()), key=_tree_order):
                style, marker = _status_style(record.status)
                name = escape(record.path.rpartition("/")[2])
                if record.kind == EntryKind.directory:
                    node = parent.add(f"[{style}]{marker} [bold]{name}/[/bold][/{style}]")
                    add_children(node, record.path)
                else:
                    parent.add(f"[{style}]{marker} {name}[/{style}]")

        add_children(tree, "")
        return tree

    def _render_diff(self, view: FileDiff) -> None:
        navigator = view.navigator
        position = navigator.index + 1
        table = Table(show_edge=False, box=None)
        table.add_column("A", justify="right", style="dim")
        table.add_column("B", justify="right", style="dim")
        table.add_column("", width=1)
        table.add_column("Content", overflow="fold")

        current = navigator.current
        for line in view.lines:
            self._add_diff_row(table, line, highlighted=line is current)

        # Printed apart from the table so the header never wraps to its width.
        self._console.print(
            f"[bold]{escape(view.path)}[/bold]  change {position} / {navigator.count}"
        )
        self._console.print(table)

    @staticmethod
    def _add_diff_row(table: Table, line: DiffLine, *, highlighted: bool) -> None:
        style, marker = _LINE_STYLES[line.kind]
        if highlighted:
            style = f"reverse {style}".strip()
        table.add_row(
            "" if line.line_a is None else str(line.line_a),
            "" if line.line_b is None else str(line.line_b),
            Text(marker, style=style),
            Text(line.content, style=style),
        )

    def _render_single(self, view: SingleFileView) -> None:
        style = "red" if view.side == Side.a else "green"
        table = Table(show_edge=False, box=None)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Content", overflow="fold")
        for number, content in enumerate(view.lines, start=1):
            table.add_row(str(number), Text(content))
        self._console.print(
            f"[{style}]Only in {view.side.value.upper()}[/{style}] [bold]{escape(view.path)}[/bold]"
        )
        self._console.print(table)

    def _render_unavailable(self, view: TextUnavailable) -> None:
        self._console.print(f"[dim]{escape(view.path)}: {view.reason}[/dim]")
