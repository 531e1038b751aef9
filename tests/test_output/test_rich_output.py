"""Tests for folder_diff.output.rich_output."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich.console import Console

from folder_diff.core.comparator import Comparator
from folder_diff.core.models import (
    ComparisonRecord,
    ComparisonResult,
    ComparisonStats,
    EntryKind,
    FileDiff,
    Side,
    SingleFileView,
    Status,
    TextUnavailable,
)
from folder_diff.output.base import Renderer
from folder_diff.output.rich_output import RichRenderer


def _renderer() -> RichRenderer:
    return RichRenderer(Console(file=StringIO(), width=120))


def _output(renderer: RichRenderer) -> str:
    file = renderer._console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


class TestRichRendererInit:
    """Verify RichRenderer constructor."""

    def test_default_console(self) -> None:
        renderer = RichRenderer()
        assert isinstance(renderer._console, Console)

    def test_custom_console(self) -> None:
        console = Console(file=StringIO())
        assert RichRenderer(console)._console is console

    def test_satisfies_protocol(self) -> None:
        assert isinstance(_renderer(), Renderer)


class TestRichRender:
    """Verify the tree view."""

    def test_markers_and_names(self, sample_dirs: tuple[Path, Path]) -> None:
        left, right = sample_dirs
        renderer = _renderer()
        renderer.render(Comparator().compare(left, right))
        output = _output(renderer)
        assert "a vs b" in output
        assert "A a_only.txt" in output
        assert "B b_only.txt" in output
        assert "~ modified.txt" in output
        assert "= common.txt" in output
        assert "~ sub/" in output
        assert "A docs/" in output
        assert "A guide.md" in output

    def test_directories_before_files(self, sample_dirs: tuple[Path, Path]) -> None:
        left, right = sample_dirs
        renderer = _renderer()
        renderer.render(Comparator().compare(left, right))
        output = _output(renderer)
        assert output.index("sub/") < output.index("a_only.txt")

    def test_includes_stats(self, sample_dirs: tuple[Path, Path]) -> None:
        left, right = sample_dirs
        renderer = _renderer()
        renderer.render(Comparator().compare(left, right))
        assert "3 only in A, 2 only in B, 2 different, 3 match" in _output(renderer)

    def test_hide_matches(self, sample_dirs: tuple[Path, Path]) -> None:
        left, right = sample_dirs
        renderer = _renderer()
        renderer.render(Comparator().compare(left, right), hide_matches=True)
        output = _output(renderer)
        assert "common.txt" not in output
        assert "same/" not in output
        assert "modified.txt" in output
        assert "a_nested.txt" in output

    def test_names_are_escaped(self) -> None:
        record = ComparisonRecord(
            path="[bold]x.txt", kind=EntryKind.file, status=Status.only_a, in_a=True, in_b=False
        )
        result = ComparisonResult(
            left_root=Path("/tmp/left"),
            right_root=Path("/tmp/right"),
            records=(record,),
            stats=ComparisonStats.from_records([record]),
        )
        renderer = _renderer()
        renderer.render(result)
        assert "[bold]x.txt" in _output(renderer)

    def test_root_names_are_escaped(self) -> None:
        result = ComparisonResult(
            left_root=Path("/tmp/[red]left"),
            right_root=Path("/tmp/[green]right"),
            records=(),
            stats=ComparisonStats.from_records([]),
        )
        renderer = _renderer()
        renderer.render(result)
        assert "[red]left vs [green]right" in _output(renderer)


class TestRichRenderStats:
    """Verify the summary line."""

    def test_counts(self) -> None:
        renderer = _renderer()
        renderer.render_stats(ComparisonStats(only_a=1, only_b=2, different=3, match=4))
        assert "1 only in A, 2 only in B, 3 different, 4 match" in _output(renderer)


class TestRichRenderFile:
    """Verify file views."""

    def test_diff_title_tracks_navigator(self, scenario_dirs: tuple[Path, Path]) -> None:
        left, right = scenario_dirs
        comparator = Comparator()
        view = comparator.open(comparator.compare(left, right), "x.txt")
        assert isinstance(view, FileDiff)

        renderer = _renderer()
        renderer.render_file(view)
        assert "x.txt  change 0 / 2" in _output(renderer)

        view.navigator.next()
        renderer = _renderer()
        renderer.render_file(view)
        assert "x.txt  change 1 / 2" in _output(renderer)

    def test_diff_rows(self, scenario_dirs: tuple[Path, Path]) -> None:
        left, right = scenario_dirs
        comparator = Comparator()
        view = comparator.open(comparator.compare(left, right), "x.txt")
        renderer = _renderer()
        renderer.render_file(view)
        rows = [line.split() for line in _output(renderer).splitlines()]
        assert ["1", "1", "a"] in rows
        assert ["2", "-", "b"] in rows
        assert ["2", "+", "c"] in rows

    def test_single_side(self) -> None:
        renderer = _renderer()
        renderer.render_file(SingleFileView(path="only.txt", side=Side.b, lines=("hello", "")))
        output = _output(renderer)
        assert "Only in B only.txt" in output
        assert "hello" in output

    def test_unavailable(self) -> None:
        renderer = _renderer()
        renderer.render_file(TextUnavailable(path="img.bin", reason="cannot display as text"))
        assert "img.bin: cannot display as text" in _output(renderer)
