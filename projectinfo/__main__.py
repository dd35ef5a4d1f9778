"""Command-line front door for projectinfo.

Prints the project structure and tech stack for a root directory.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from projectinfo.ignore_rules import IGNORE_FILE_NAME
from projectinfo.project import get_project_info, get_project_structure, get_tech_stack


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projectinfo",
        description="Show a project's filtered file tree and inferred tech stack.",
    )
    parser.add_argument("root", type=Path, help="project root directory")
    parser.add_argument(
        "--ignore-file",
        default=IGNORE_FILE_NAME,
        help=f"ignore-rules file name at the root (default: {IGNORE_FILE_NAME})",
    )
    parser.add_argument(
        "--show-hidden-dirs",
        action="store_true",
        help="do not prune dot-prefixed directories",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="descend into symlinked directories",
    )
    parser.add_argument(
        "--only",
        choices=("structure", "stack"),
        help="print a single block",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, print the requested blocks and return an exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    root = args.root.expanduser().resolve()
    if not root.is_dir():
        parser.error(f"not a directory: {args.root}")

    tree_options = {
        "ignore_file": args.ignore_file,
        "skip_hidden_dirs": not args.show_hidden_dirs,
        "follow_symlinks": args.follow_symlinks,
    }
    if args.only == "structure":
        out = get_project_structure(root, **tree_options)
    elif args.only == "stack":
        out = get_tech_stack(root)
    else:
        out = get_project_info(root, **tree_options).render()

    sys.stdout.write(out.rstrip("\n") + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
