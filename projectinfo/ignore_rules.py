# projectinfo/ignore_rules.py

"""
Ignore-rules file parsing.

This module reads a simplified ``.gitignore``-style file at the root of a
project and turns it into an ordered sequence of :class:`IgnoreRule`
records. Order matters: the matcher evaluates rules front to back and later
matches override earlier ones.

Supported syntax is intentionally small: one pattern per line, ``#``
comments, blank lines, a leading ``!`` for negation and a trailing ``/`` for
directory-only patterns.
"""


from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from loguru import logger

IGNORE_FILE_NAME = ".gitignore"


@dataclass(frozen=True)
class IgnoreRule:
    """
    One parsed line of an ignore-rules file.

    Attributes
    ----------
    pattern : str
        Pattern text with the leading ``!`` and trailing ``/`` removed.
    is_negated : bool
        ``True`` if the line started with ``!``.
    is_directory : bool
        ``True`` if the line ended with ``/``.
    """

    pattern: str
    is_negated: bool = False
    is_directory: bool = False


def parse_rule(line: str) -> IgnoreRule:
    """Parse a single, already trimmed, non-comment line."""
    is_negated = line.startswith("!")
    if is_negated:
        line = line[1:]

    is_directory = line.endswith("/")
    if is_directory:
        line = line[:-1]

    return IgnoreRule(pattern=line.strip(), is_negated=is_negated, is_directory=is_directory)


def parse_ignore_rules(lines: Iterable[str]) -> list[IgnoreRule]:
    """
    Parse ignore-file lines into an ordered list of rules.

    Whitespace is trimmed from every line; blank lines and lines starting
    with ``#`` are dropped.

    Parameters
    ----------
    lines : Iterable[str]
        Raw lines of an ignore-rules file.

    Returns
    -------
    list[IgnoreRule]
        Rules in file order.
    """

    rules: list[IgnoreRule] = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        rules.append(parse_rule(line))
    return rules


def parse_ignore_file(root: Path, *, ignore_file: str = IGNORE_FILE_NAME) -> list[IgnoreRule]:
    """
    Read and parse the ignore-rules file located directly under ``root``.

    Only that single file is read; nested ignore files are not consulted.
    A missing file is not an error. A file that exists but cannot be read or
    decoded is logged and treated as empty.

    Parameters
    ----------
    root : pathlib.Path
        Project root directory.
    ignore_file : str, default=".gitignore"
        Name of the ignore-rules file.

    Returns
    -------
    list[IgnoreRule]
        Parsed rules, or an empty list.
    """

    path = Path(root) / ignore_file
    if not path.exists():
        return []

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error reading {}: {}", path, exc)
        return []

    rules = parse_ignore_rules(content.split("\n"))
    logger.debug("Parsed {} ignore rule(s) from {}", len(rules), path)
    return rules
