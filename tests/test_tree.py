import os
import stat
import sys
from pathlib import Path

import pytest
from anytree import PreOrderIter

from projectinfo import build_tree
from projectinfo.ignore_rules import IgnoreRule
from projectinfo.tree import STRUCTURAL_EXCLUDES, collation_key, is_excluded_dir


def _collect_paths(node, root: Path):
    """
    Collect relative POSIX paths from the built tree (including directories).
    Returns a set of strings.
    """
    rels = set()
    for n in PreOrderIter(node):
        p = getattr(n, "fs_path", None)
        assert p is not None, "each node must carry a `fs_path` attribute"
        rels.add("" if p == root else p.relative_to(root).as_posix())
    return rels


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def _write_ignore(root: Path, *lines: str):
    _make_file(root / ".gitignore", "\n".join(lines) + "\n")


def test_root_is_a_file(root: Path):
    f = root / "single.txt"
    _make_file(f, "hello")

    with pytest.raises(NotADirectoryError):
        build_tree(f)


def test_basic_directory_tree(root: Path):
    (root / "src").mkdir()
    (root / "docs").mkdir()
    (root / ".hidden").mkdir()
    _make_file(root / "src/a.py")
    _make_file(root / "src/b.txt")
    _make_file(root / "docs/readme.md")
    _make_file(root / "top.txt")
    _write_ignore(root, "*.tmp")

    node = build_tree(root)
    rels = _collect_paths(node, root)

    assert rels == {
        "",
        ".gitignore",
        "src",
        "src/a.py",
        "src/b.txt",
        "docs",
        "docs/readme.md",
        "top.txt",
    }

    src = next(n for n in PreOrderIter(node) if n.fs_path == root / "src")
    assert src.is_dir is True
    apy = next(n for n in PreOrderIter(node) if n.fs_path == root / "src/a.py")
    assert apy.is_dir is False
    assert apy.is_symlink is False


def test_hidden_dirs_can_be_shown(root: Path):
    _make_file(root / ".config/settings.json")
    _make_file(root / ".git/HEAD")
    _write_ignore(root, "*.tmp")

    rels = _collect_paths(build_tree(root, skip_hidden_dirs=False), root)

    assert ".config" in rels
    assert ".config/settings.json" in rels
    # version-control metadata stays out either way
    assert ".git" not in rels


def test_no_ignore_file_hides_everything(root: Path):
    (root / "dir").mkdir()
    _make_file(root / "dir/file.txt")
    _make_file(root / "a.txt")

    node = build_tree(root)

    nodes = list(PreOrderIter(node))
    assert len(nodes) == 1
    assert nodes[0].fs_path == root
    assert nodes[0].is_dir is True


def test_comment_only_ignore_file_counts_as_empty(root: Path):
    _make_file(root / "a.txt")
    _write_ignore(root, "# nothing here", "")

    node = build_tree(root)
    assert list(node.children) == []


def test_structural_excludes_win_over_negation(root: Path):
    for name in ["node_modules", "dist", "build", ".git"]:
        _make_file(root / name / "inner.js")
    _make_file(root / "index.js")
    _write_ignore(root, "*.tmp", "!node_modules", "!dist", "!build")

    rels = _collect_paths(build_tree(root, skip_hidden_dirs=False), root)
    assert rels == {"", ".gitignore", "index.js"}


def test_structural_excludes_only_apply_to_directories(root: Path):
    _make_file(root / "build")
    _write_ignore(root, "*.tmp")

    rels = _collect_paths(build_tree(root), root)
    assert "build" in rels


def test_rules_prune_files_and_directories(root: Path):
    _make_file(root / "pkg/data/keep.txt")
    _make_file(root / "pkg/skipme.pyc")
    _make_file(root / "__pycache__/x.cpython-312.pyc")
    _make_file(root / "top.log")
    _make_file(root / "top.py")
    _write_ignore(root, "__pycache__/", "*.pyc", "*.log")

    rels = _collect_paths(build_tree(root), root)

    assert {"pkg", "pkg/data", "pkg/data/keep.txt", "top.py"} <= rels
    assert "__pycache__" not in rels
    assert "pkg/skipme.pyc" not in rels
    assert "top.log" not in rels


def test_directory_exclusion_blocks_descent(root: Path):
    _make_file(root / "logs/day1/events.jsonl")
    _make_file(root / "logs/day2/events.jsonl")
    _write_ignore(root, "logs/")

    rels = _collect_paths(build_tree(root), root)
    assert "logs" not in rels
    assert "logs/day1" not in rels
    assert "logs/day1/events.jsonl" not in rels


def test_negated_rule_brings_file_back(root: Path):
    _make_file(root / "drop.log")
    _make_file(root / "keep.log")
    _write_ignore(root, "*.log", "!keep.log")

    rels = _collect_paths(build_tree(root), root)
    assert "keep.log" in rels
    assert "drop.log" not in rels


def test_explicit_rules_skip_reading_ignore_file(root: Path):
    _make_file(root / "a.txt")
    _make_file(root / "b.txt")

    node = build_tree(root, rules=[IgnoreRule("b.txt")])
    assert _collect_paths(node, root) == {"", "a.txt"}


def test_custom_ignore_file_name(root: Path):
    _make_file(root / ".toolignore", "secret.txt\n")
    _make_file(root / "secret.txt")
    _make_file(root / "public.txt")

    rels = _collect_paths(build_tree(root, ignore_file=".toolignore"), root)
    assert rels == {"", ".toolignore", "public.txt"}


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlink_directory_traversal_flag(root: Path):
    real = root / "real"
    _make_file(real / "inside.txt")
    link = root / "linkdir"
    link.symlink_to(real, target_is_directory=True)
    _write_ignore(root, "*.tmp")

    rels = _collect_paths(build_tree(root, follow_symlinks=False), root)
    assert "linkdir" in rels
    assert "linkdir/inside.txt" not in rels

    node = build_tree(root, follow_symlinks=True)
    rels2 = _collect_paths(node, root)
    assert "linkdir/inside.txt" in rels2

    link_node = next(n for n in PreOrderIter(node) if n.fs_path == link)
    assert link_node.is_symlink is True
    assert link_node.is_dir is True


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlink_cycle_terminates(root: Path):
    (root / "loop").mkdir()
    (root / "loop/back").symlink_to(root, target_is_directory=True)
    _write_ignore(root, "*.tmp")

    rels = _collect_paths(build_tree(root, follow_symlinks=True), root)
    assert "loop/back" in rels
    assert "loop/back/loop" not in rels


def test_listing_failure_keeps_directory_and_siblings(root: Path, monkeypatch, log_messages):
    _make_file(root / "locked/hidden.txt")
    _make_file(root / "open/visible.txt")
    _make_file(root / "top.txt")
    _write_ignore(root, "*.tmp")

    locked = root / "locked"
    real_iterdir = Path.iterdir

    def iterdir(self):
        if self == locked:
            raise PermissionError(13, "Permission denied", str(self))
        return real_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)

    node = build_tree(root)
    rels = _collect_paths(node, root)

    assert rels == {"", ".gitignore", "locked", "open", "open/visible.txt", "top.txt"}
    locked_node = next(n for n in PreOrderIter(node) if n.fs_path == locked)
    assert locked_node.is_dir is True
    assert locked_node.children == ()
    assert any("Cannot list directory" in m and "locked" in m for m in log_messages)


@pytest.mark.skipif(os.name != "posix", reason="Permission bits test is POSIX-only")
@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permission bits")
def test_unreadable_directory_is_skipped_safely(root: Path, log_messages):
    secret = root / "secret"
    _make_file(secret / "hidden.txt")
    _write_ignore(root, "*.tmp")

    secret.chmod(0)
    try:
        rels = _collect_paths(build_tree(root), root)
        assert "secret" in rels
        assert "secret/hidden.txt" not in rels
        assert any("Cannot list directory" in m for m in log_messages)
    finally:
        secret.chmod(stat.S_IRWXU)


def test_sorting_is_dirs_first_then_files_case_insensitive(root: Path):
    (root / "bDir").mkdir()
    (root / "ADir").mkdir()
    _make_file(root / "z.txt")
    _make_file(root / "A.txt")
    _write_ignore(root, "*.tmp")

    node = build_tree(root)
    names = [c.name for c in node.children]

    assert names == ["ADir", "bDir", ".gitignore", "A.txt", "z.txt"]


def test_repeated_builds_are_identical(root: Path):
    for rel in ["b/2.txt", "a/1.txt", "C.md", "c.md"]:
        _make_file(root / rel)
    _write_ignore(root, "*.tmp")

    first = [n.fs_path for n in PreOrderIter(build_tree(root))]
    second = [n.fs_path for n in PreOrderIter(build_tree(root))]
    assert first == second


def test_is_excluded_dir():
    for name in STRUCTURAL_EXCLUDES:
        assert is_excluded_dir(name, skip_hidden_dirs=False)
    assert is_excluded_dir(".venv")
    assert not is_excluded_dir(".venv", skip_hidden_dirs=False)
    assert not is_excluded_dir("src")


def test_accented_names_sort_with_their_base_letter(root: Path):
    for name in ["zebra.txt", "éclair.txt", "apple.txt", "Émile.md", "eagle.txt"]:
        _make_file(root / name)
    (root / "Ünter").mkdir()
    (root / "alpha").mkdir()
    _write_ignore(root, "*.tmp")

    names = [c.name for c in build_tree(root).children]

    assert names == [
        "alpha",
        "Ünter",
        ".gitignore",
        "apple.txt",
        "eagle.txt",
        "éclair.txt",
        "Émile.md",
        "zebra.txt",
    ]


def test_collation_key_ignores_accents_and_case():
    assert collation_key("Éclair") == collation_key("eclair") == "eclair"
    assert collation_key("Straße") == "strasse"
    assert sorted(["zebra", "éclair", "apple"], key=collation_key) == ["apple", "éclair", "zebra"]
