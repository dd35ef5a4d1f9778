"""
projectinfo — project structure and tech-stack overview for calling agents.

This package provides small, composable tools to:
- render a project's directory tree filtered by its ignore rules,
- infer the technologies a project uses from marker files and its manifest.

The API is based on ``pathlib.Path`` and is deterministic: repeated calls on
an unchanged project produce identical output.
"""

from __future__ import annotations

from .ignore_rules import IgnoreRule, parse_ignore_file, parse_ignore_rules
from .matcher import is_ignored, match_pattern
from .project import ProjectInfo, get_project_info, get_project_structure, get_tech_stack
from .stack import TechStack, detect_tech_stack
from .tree import build_and_draw_tree, build_tree, draw_tree

__all__ = [
    "IgnoreRule",
    "parse_ignore_file",
    "parse_ignore_rules",
    "is_ignored",
    "match_pattern",
    "build_tree",
    "draw_tree",
    "build_and_draw_tree",
    "TechStack",
    "detect_tech_stack",
    "ProjectInfo",
    "get_project_info",
    "get_project_structure",
    "get_tech_stack",
]
