# projectinfo/tree.py

"""
Filtered project tree building and rendering.

This module walks a project directory and builds an :mod:`anytree` node
tree of the entries that survive two layers of filtering:

- structural exclusions (``node_modules``, ``.git``, ``dist``, ``build`` and,
  by default, any dot-prefixed directory), applied unconditionally;
- the project's ignore rules, evaluated by :func:`projectinfo.matcher.is_ignored`.

Traversal is deterministic (directories first, accent- and case-insensitive
sorting) and pruning-based: an excluded directory is neither shown nor
descended into.
The tree is rendered with :func:`draw_tree` into the familiar ``├──`` /
``└──`` layout.
"""


from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import Collection, Sequence

from anytree import ContStyle, Node, RenderTree
from loguru import logger

from projectinfo.ignore_rules import IGNORE_FILE_NAME, IgnoreRule, parse_ignore_file
from projectinfo.matcher import is_ignored

STRUCTURAL_EXCLUDES: frozenset[str] = frozenset({"node_modules", ".git", "dist", "build"})


def is_dir(p: Path) -> bool:
    """
    Safely determine whether a path refers to a directory.

    Returns ``False`` instead of raising when the directory status cannot be
    determined (e.g. permission issues).
    """

    try:
        return p.is_dir()
    except OSError:
        return False


def is_excluded_dir(
    name: str,
    *,
    exclude_dirs: Collection[str] = STRUCTURAL_EXCLUDES,
    skip_hidden_dirs: bool = True,
) -> bool:
    """Return whether a directory name is pruned regardless of ignore rules."""
    return name in exclude_dirs or (skip_hidden_dirs and name.startswith("."))


def collation_key(name: str) -> str:
    """
    Locale-like sort key for an entry name.

    Accents are stripped (NFKD decomposition without combining marks) and the
    result is casefolded, so ``éclair`` sorts between ``apple`` and ``zebra``.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def iter_children(d: Path) -> list[Path]:
    """
    Return the immediate children of a directory in stable tree order.

    Directories come before files and each group is ordered by name,
    ignoring accents and case, with the exact name as a tie-breaker. If the
    directory cannot be listed, a warning is logged and an empty list is
    returned so the rest of the tree is still produced.

    Parameters
    ----------
    d : pathlib.Path
        Directory whose children should be listed.

    Returns
    -------
    list[pathlib.Path]
        Sorted list of child paths.
    """

    try:
        children = list(d.iterdir())
    except OSError as exc:
        logger.warning("Cannot list directory {}: {}", d, exc)
        return []
    children.sort(key=lambda p: (not is_dir(p), collation_key(p.name), p.name.casefold(), p.name))
    return children


def _make_node(p: Path, parent: Node | None = None) -> Node:
    return Node(
        p.name,
        parent=parent,
        fs_path=p,
        is_dir=is_dir(p),
        is_symlink=p.is_symlink(),
    )


def build_tree(
    root: Path,
    *,
    rules: Sequence[IgnoreRule] | None = None,
    ignore_file: str = IGNORE_FILE_NAME,
    exclude_dirs: Collection[str] = STRUCTURAL_EXCLUDES,
    skip_hidden_dirs: bool = True,
    follow_symlinks: bool = False,
) -> Node:
    """
    Build an :class:`anytree.Node` tree for the visible part of a project.

    The ignore-rules file is parsed once (unless ``rules`` is given) and the
    same rules are applied at every level. Note that with an empty rule set
    every entry is considered ignored, so a project without an ignore file
    yields a root node with no children.

    Every node carries ``fs_path`` (absolute path), ``is_dir`` and
    ``is_symlink`` attributes.

    Parameters
    ----------
    root : pathlib.Path
        Project root directory.
    rules : Sequence[IgnoreRule] | None, optional
        Pre-parsed rules. When ``None`` they are read from ``ignore_file``
        under ``root``.
    ignore_file : str, default=".gitignore"
        Name of the ignore-rules file.
    exclude_dirs : Collection[str], optional
        Directory names that are always pruned.
    skip_hidden_dirs : bool, default=True
        Whether dot-prefixed directories are always pruned as well.
    follow_symlinks : bool, default=False
        Whether to descend into symbolic links to directories.

    Returns
    -------
    anytree.Node
        Root node of the tree.

    Raises
    ------
    NotADirectoryError
        If ``root`` is not a directory.
    """

    root = Path(root).resolve()
    if not is_dir(root):
        raise NotADirectoryError(f"Not a directory: {root}")

    if rules is None:
        rules = parse_ignore_file(root, ignore_file=ignore_file)

    def keep(p: Path) -> bool:
        if is_dir(p) and is_excluded_dir(
            p.name, exclude_dirs=exclude_dirs, skip_hidden_dirs=skip_hidden_dirs
        ):
            return False
        return not is_ignored(p, root, rules, ignore_file=ignore_file)

    # resolved directories on the current branch; stops symlink cycles
    active: set[Path] = set()

    def rec(d: Path, parent: Node) -> None:
        real = d.resolve()
        if real in active:
            return
        active.add(real)
        for child in iter_children(d):
            if not keep(child):
                continue
            node = _make_node(child, parent)
            if node.is_dir and (follow_symlinks or not node.is_symlink):
                rec(child, node)
        active.discard(real)

    top = _make_node(root)
    rec(root, top)
    logger.debug("Built tree for {} with {} node(s)", root, len(top.descendants) + 1)
    return top


def draw_tree(node: Node, *, show_root: bool = True) -> str:
    """
    Render a node tree using ``├──`` / ``└──`` connectors.

    The last child of each directory gets ``└── ``; deeper levels are
    indented with ``│   `` below a non-last sibling and blank padding below
    a last one.

    Parameters
    ----------
    node : anytree.Node
        Root of the tree to render.
    show_root : bool, default=True
        Whether the first line holds the root node's name.

    Returns
    -------
    str
        The rendered tree, one entry per line.
    """

    lines = [f"{pre}{n.name}" for pre, _, n in RenderTree(node, style=ContStyle())]
    if not show_root:
        lines = lines[1:]
    return "\n".join(lines)


def build_and_draw_tree(root: Path, *, show_root: bool = True, **options) -> str:
    """Shortcut for ``draw_tree(build_tree(root, **options))``."""
    return draw_tree(build_tree(root, **options), show_root=show_root)
