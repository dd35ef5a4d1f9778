# projectinfo/matcher.py

"""
Ignore-rule matching.

Given the ordered rules produced by :mod:`projectinfo.ignore_rules`, decide
whether a path below a project root is ignored. Evaluation is a plain
sequential overwrite: every matching rule sets the result to
``not rule.is_negated`` and the last match wins.

The matcher is a simplified ``.gitignore`` interpreter. It understands exact
paths, bare names matching any path segment, directory prefixes and the
``*`` wildcard. Character classes, ``**`` and anchored patterns are not
supported.
"""


from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from projectinfo.ignore_rules import IGNORE_FILE_NAME, IgnoreRule


@lru_cache(maxsize=256)
def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Translate a wildcard pattern into a compiled regular expression.

    Every ``*`` becomes "any sequence of characters" (``/`` included); all
    other characters are matched literally. The expression is meant to be
    used with :meth:`re.Pattern.fullmatch`.
    """
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")))


def to_relative_posix(path: Path | str, root: Path | str) -> str:
    """Return ``path`` relative to ``root`` using ``/`` separators."""
    rel = os.path.normpath(os.path.relpath(path, root))
    return rel.replace(os.sep, "/")


def match_pattern(rel_path: str, rule: IgnoreRule, *, abs_path: Path | None = None) -> bool:
    """
    Test a single rule against a normalized relative path.

    The checks run in this order:

    1. the pattern equals the whole relative path;
    2. the pattern equals any single path segment;
    3. a directory-only rule never matches a path that does not exist;
    4. a wildcard pattern matches the whole path or any leading run of
       segments (so a rule can prune an ancestor directory);
    5. the pattern is a directory prefix of the path.

    Parameters
    ----------
    rel_path : str
        Candidate path relative to the root, ``/``-separated.
    rule : IgnoreRule
        Rule to evaluate.
    abs_path : pathlib.Path | None, optional
        Absolute location of the candidate, used for the existence check of
        directory-only rules. Defaults to ``rel_path`` itself.

    Returns
    -------
    bool
        ``True`` if the rule matches.
    """

    pattern = rule.pattern

    if pattern == rel_path:
        return True

    parts = rel_path.split("/")
    if pattern in parts:
        return True

    if rule.is_directory:
        candidate = abs_path if abs_path is not None else Path(rel_path)
        if not candidate.exists():
            return False

    if "*" in pattern:
        regex = wildcard_to_regex(pattern)
        if regex.fullmatch(rel_path):
            return True
        for i in range(1, len(parts) + 1):
            if regex.fullmatch("/".join(parts[:i])):
                return True

    return rel_path.startswith(pattern + "/")


def is_ignored(
    path: Path | str,
    root: Path | str,
    rules: Sequence[IgnoreRule],
    *,
    ignore_file: str = IGNORE_FILE_NAME,
) -> bool:
    """
    Decide whether ``path`` is ignored by ``rules``.

    Two special cases apply before any rule is evaluated:

    - with no rules at all, every path is reported as ignored (the original
      tool's behaviour when the project has no ignore file);
    - the ignore-rules file itself is never ignored.

    Parameters
    ----------
    path : pathlib.Path | str
        Absolute path of the candidate entry.
    root : pathlib.Path | str
        Project root the rules are relative to.
    rules : Sequence[IgnoreRule]
        Rules in file order. Not modified.
    ignore_file : str, default=".gitignore"
        Name of the ignore-rules file.

    Returns
    -------
    bool
        ``True`` if the path should be hidden.
    """

    if not rules:
        return True

    path = Path(path)
    if path.name == ignore_file:
        return False

    rel_path = to_relative_posix(path, root)

    ignored = False
    for rule in rules:
        if match_pattern(rel_path, rule, abs_path=path):
            ignored = not rule.is_negated
    return ignored
