# projectinfo/project.py

"""
Project overview for calling agents.

Combines the filtered tree and the detected tech stack into two plain-text
blocks:

.. code-block:: text

    Project Structure:
    /abs/path/to/project
    ├── src
    │   └── index.ts
    └── package.json

    Tech Stack:
    TypeScript, React, Node.js
"""


from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from loguru import logger

from projectinfo.ignore_rules import IGNORE_FILE_NAME
from projectinfo.stack import MANIFEST_FILE_NAME, detect_tech_stack
from projectinfo.tree import build_and_draw_tree

STRUCTURE_HEADER = "Project Structure:"
TECH_STACK_HEADER = "Tech Stack:"


class ProjectInfo(NamedTuple):
    """The two text blocks describing a project."""

    structure: str
    tech_stack: str

    def render(self) -> str:
        return f"{self.structure}\n{self.tech_stack}"


def get_project_structure(
    root: Path | str,
    *,
    ignore_file: str = IGNORE_FILE_NAME,
    skip_hidden_dirs: bool = True,
    follow_symlinks: bool = False,
) -> str:
    """
    Render the project tree under a header line and the root path.

    The root path is echoed exactly as given and every line, the last one
    included, ends with a newline. An unreadable or missing root is logged
    and produces an empty tree body.
    """

    try:
        body = build_and_draw_tree(
            Path(root),
            show_root=False,
            ignore_file=ignore_file,
            skip_hidden_dirs=skip_hidden_dirs,
            follow_symlinks=follow_symlinks,
        )
    except OSError as exc:
        logger.error("Cannot build project tree for {}: {}", root, exc)
        body = ""
    if body:
        body += "\n"
    return f"{STRUCTURE_HEADER}\n{root}\n{body}"


def get_tech_stack(root: Path | str, *, manifest_file: str = MANIFEST_FILE_NAME) -> str:
    """Render the detected technologies as a comma-separated list under a header."""
    stack = detect_tech_stack(Path(root), manifest_file=manifest_file)
    return f"{TECH_STACK_HEADER}\n{', '.join(stack)}"


def get_project_info(
    root: Path | str,
    *,
    ignore_file: str = IGNORE_FILE_NAME,
    manifest_file: str = MANIFEST_FILE_NAME,
    skip_hidden_dirs: bool = True,
    follow_symlinks: bool = False,
) -> ProjectInfo:
    """
    Describe a project: its filtered tree and its inferred tech stack.

    Parameters
    ----------
    root : pathlib.Path | str
        Absolute path of the project root.
    ignore_file : str, default=".gitignore"
        Name of the ignore-rules file at the root.
    manifest_file : str, default="package.json"
        Name of the dependency manifest at the root.
    skip_hidden_dirs : bool, default=True
        Whether dot-prefixed directories are always left out of the tree.
    follow_symlinks : bool, default=False
        Whether to descend into symbolic links to directories.

    Returns
    -------
    ProjectInfo
        ``structure`` and ``tech_stack`` text blocks. Never raises for
        filesystem problems; they degrade to partial or empty output.
    """

    return ProjectInfo(
        structure=get_project_structure(
            root,
            ignore_file=ignore_file,
            skip_hidden_dirs=skip_hidden_dirs,
            follow_symlinks=follow_symlinks,
        ),
        tech_stack=get_tech_stack(root, manifest_file=manifest_file),
    )
