"""Gitignore-style pattern compiler.

Each rule line compiles to a regular expression tested against normalized
(forward-slash) relative paths. A compiled rule matches the named path and
everything nested under it.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from folder_diff.core.models import IgnoreRule

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
NEGATION_PREFIX = "!"

_GLOBSTAR = ".*"
_LEADING_GLOBSTAR = "(.*/)?"
_INNER_GLOBSTAR = "/(.*/)?"
_TRAILING_GLOBSTAR = "/.*"
_STAR = "[^/]*"
_QUESTION = "[^/]"
_UNANCHORED_PREFIX = "(^|.*/)"
_ANCHORED_PREFIX = "^"
_NESTED_SUFFIX = "($|/.*)"


def _glob_to_regex(body: str) -> str:
    """Translate glob tokens in ``body``; every other character is literal.

    A ``**`` bounded by separators matches zero or more whole segments:
    ``**/x`` also matches ``x`` and ``a/**/b`` also matches ``a/b``.
    """
    parts: list[str] = []
    i = 0
    while i < len(body):
        char = body[i]
        if i == 0 and body.startswith("**/"):
            parts.append(_LEADING_GLOBSTAR)
            i += 3
            continue
        if body.startswith("/**/", i):
            parts.append(_INNER_GLOBSTAR)
            i += 4
            continue
        if body.startswith("/**", i) and i + 3 == len(body):
            parts.append(_TRAILING_GLOBSTAR)
            i += 3
            continue
        if body.startswith("**", i):
            parts.append(_GLOBSTAR)
            i += 2
            continue
        if char == "*":
            parts.append(_STAR)
        elif char == "?":
            parts.append(_QUESTION)
        else:
            parts.append(re.escape(char))
        i += 1
    return "".join(parts)


def _join_scope(scope: str, body: str) -> str:
    if scope:
        return f"{scope}/{body}"
    return body


def compile_ignore_rule(pattern: str, *, scope: str = "") -> IgnoreRule | None:
    """Compile one ignore rule line.

    Args:
        pattern: Rule text, e.g. ``"*.log"``, ``"!keep.log"``, ``"/build/"``.
        scope: Relative directory the rule was declared in. Empty for the
            scan root and for caller-supplied rules.

    Returns:
        The compiled rule, or None for blank lines, comments and rules with
        nothing left to match after stripping their markers.
    """
    text = pattern.strip()
    if not text or text.startswith(COMMENT_PREFIX):
        return None

    body = text
    negated = body.startswith(NEGATION_PREFIX)
    if negated:
        body = body[1:]

    body = body.replace("\\", "/")

    anchored = body.startswith("/")
    if anchored:
        body = body[1:]

    directory_only = body.endswith("/")
    if directory_only:
        body = body[:-1]

    if not body:
        logger.debug("Skipping ignore rule with empty body: %r", pattern)
        return None

    body = _join_scope(scope.strip("/"), body)
    prefix = _ANCHORED_PREFIX if anchored or "/" in body else _UNANCHORED_PREFIX

    try:
        regex = re.compile(prefix + _glob_to_regex(body) + _NESTED_SUFFIX)
    except re.error as exc:
        logger.warning("Ignore rule %r is malformed (%s); matching it literally", pattern, exc)
        regex = re.compile(prefix + re.escape(body) + _NESTED_SUFFIX)

    return IgnoreRule(
        raw=text,
        regex=regex,
        negated=negated,
        anchored=anchored,
        directory_only=directory_only,
        scope=scope.strip("/"),
    )


def compile_ignore_rules(patterns: Iterable[str], *, scope: str = "") -> list[IgnoreRule]:
    """Compile an ordered list of rule lines, skipping those that compile to nothing."""
    rules: list[IgnoreRule] = []
    for pattern in patterns:
        rule = compile_ignore_rule(pattern, scope=scope)
        if rule is not None:
            rules.append(rule)
    return rules


def is_ignored(path: str, rules: Sequence[IgnoreRule]) -> bool:
    """Decide whether ``path`` is excluded by ``rules``.

    Every rule is evaluated in order and the last matching one wins: a
    matching negated rule re-includes the path.
    """
    ignored = False
    for rule in rules:
        if rule.matches(path):
            ignored = not rule.negated
    return ignored
