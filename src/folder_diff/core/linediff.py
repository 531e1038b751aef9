"""Line diff engine based on the longest common subsequence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folder_diff.core.models import DiffLine, DiffLineKind

if TYPE_CHECKING:
    from collections.abc import Sequence


def split_lines(text: str, *, normalize_line_endings: bool = True) -> list[str]:
    """Split text on LF.

    A trailing newline yields a final empty line. Without normalization a
    CRLF file keeps its ``\\r`` at the end of each line.
    """
    if normalize_line_endings:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def _lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = dp[i], dp[i - 1]
        line_a = a[i - 1]
        for j in range(1, n + 1):
            if line_a == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def longest_common_subsequence(a: Sequence[str], b: Sequence[str]) -> list[str]:
    """Return the LCS of two line sequences.

    Uses an O(len(a) * len(b)) table. When backtracking hits a tie the walk
    moves along ``b`` first.
    """
    dp = _lcs_table(a, b)
    lcs: list[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            lcs.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    lcs.reverse()
    return lcs


def diff_lines(lines_a: Sequence[str], lines_b: Sequence[str]) -> tuple[DiffLine, ...]:
    """Align two line sequences.

    Both inputs are walked in lockstep against their LCS. A line that is the
    current LCS element on both sides is ``same``; an extra line in ``b`` is
    ``added``; an extra line in ``a`` is ``removed``. Line numbers are
    1-based and refer to the original sequences.

    Example:
        >>> [d.kind.value for d in diff_lines(["a", "b", ""], ["a", "c", ""])]
        ['same', 'removed', 'added', 'same']
    """
    lcs = longest_common_subsequence(lines_a, lines_b)
    result: list[DiffLine] = []
    i = j = k = 0
    len_a, len_b, len_lcs = len(lines_a), len(lines_b), len(lcs)

    def removed() -> None:
        nonlocal i
        result.append(DiffLine(DiffLineKind.removed, lines_a[i], line_a=i + 1, line_b=None))
        i += 1

    def added() -> None:
        nonlocal j
        result.append(DiffLine(DiffLineKind.added, lines_b[j], line_a=None, line_b=j + 1))
        j += 1

    while i < len_a or j < len_b:
        target = lcs[k] if k < len_lcs else None
        a_on_target = target is not None and i < len_a and lines_a[i] == target
        b_on_target = target is not None and j < len_b and lines_b[j] == target

        if a_on_target and b_on_target:
            result.append(DiffLine(DiffLineKind.same, lines_a[i], line_a=i + 1, line_b=j + 1))
            i += 1
            j += 1
            k += 1
        elif a_on_target and j < len_b:
            added()
        elif i < len_a:
            removed()
        else:
            added()

    return tuple(result)
