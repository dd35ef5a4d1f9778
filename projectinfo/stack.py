# projectinfo/stack.py

"""
Heuristic tech-stack detection.

The detector looks at a project root and infers the technologies in use
from three independent sources, merged into a single insertion-ordered,
duplicate-free sequence:

1. marker files listed in :data:`projectinfo.catalog.CONFIG_FILE_CHECKS`;
2. exact dependency names from the manifest (``package.json``);
3. npm organisation scopes (``@org/pkg``) from the same manifest.

Missing, unreadable or malformed manifests never fail the detection: the
problem is logged and whatever was already found is returned.
"""


from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from loguru import logger

from projectinfo.catalog import CONFIG_FILE_CHECKS, DEP_TO_TECH_MAP, ORG_TO_TECH_MAP

MANIFEST_FILE_NAME = "package.json"


class TechStack:
    """Insertion-ordered set of technology names."""

    def __init__(self, techs: Iterable[str] = ()) -> None:
        self._items: dict[str, None] = {}
        for tech in techs:
            self.add(tech)

    def add(self, tech: str) -> bool:
        """Append ``tech`` unless already present; return whether it was added."""
        if tech in self._items:
            return False
        self._items[tech] = None
        return True

    def as_list(self) -> list[str]:
        return list(self._items)

    def __contains__(self, tech: object) -> bool:
        return tech in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TechStack):
            return self.as_list() == other.as_list()
        return NotImplemented

    def __repr__(self) -> str:
        return f"TechStack({self.as_list()!r})"


def capitalize_first_letter(s: str) -> str:
    """Upper-case the first character and keep the rest unchanged."""
    return s[:1].upper() + s[1:]


def read_manifest(root: Path, *, manifest_file: str = MANIFEST_FILE_NAME) -> dict[str, Any] | None:
    """
    Load the project manifest as a JSON object.

    Parameters
    ----------
    root : pathlib.Path
        Project root directory.
    manifest_file : str, default="package.json"
        Manifest file name.

    Returns
    -------
    dict | None
        The parsed object, or ``None`` if the file is missing, cannot be
        read, is not valid JSON, or is not a JSON object. Every failure
        other than absence is logged.
    """

    path = Path(root) / manifest_file
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Error parsing {}: {}", path, exc)
        return None

    if not isinstance(data, dict):
        logger.warning("Error parsing {}: expected a JSON object, got {}", path, type(data).__name__)
        return None
    return data


def _mapping_field(manifest: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = manifest.get(key) or {}
    if not isinstance(value, Mapping):
        logger.warning("Ignoring manifest field {!r}: expected an object", key)
        return {}
    return value


def detect_from_markers(root: Path, stack: TechStack) -> None:
    """Add technologies whose marker file exists directly under ``root``."""
    for filename, tech in CONFIG_FILE_CHECKS:
        if (root / filename).exists():
            stack.add(tech)


def detect_from_dependencies(dependencies: Mapping[str, Any], stack: TechStack) -> None:
    """
    Add technologies implied by runtime dependency names.

    An exact hit in :data:`DEP_TO_TECH_MAP` wins. For a scoped name
    ``@org/pkg`` the organisation is looked up in :data:`ORG_TO_TECH_MAP`;
    an unknown organisation contributing more than one dependency is added
    under its capitalised name.
    """

    for dep in dependencies:
        if dep in DEP_TO_TECH_MAP:
            stack.add(DEP_TO_TECH_MAP[dep])
            continue

        if not dep.startswith("@"):
            continue

        org = dep.split("/")[0][1:]
        if org in ORG_TO_TECH_MAP:
            stack.add(ORG_TO_TECH_MAP[org])
            continue

        org_packages = [d for d in dependencies if d.startswith(f"@{org}/")]
        if len(org_packages) > 1:
            stack.add(capitalize_first_letter(org))


def uses_node_runtime(manifest: Mapping[str, Any], stack: TechStack) -> bool:
    """
    Decide whether to report Node.js.

    True when the manifest declares ``engines.node`` or depends on
    ``@types/node``, or when the stack lacks either Bun or Deno. The last
    two clauses make this true for almost every project.
    """

    engines = _mapping_field(manifest, "engines")
    dev_dependencies = _mapping_field(manifest, "devDependencies")
    dependencies = _mapping_field(manifest, "dependencies")
    return bool(
        engines.get("node")
        or dev_dependencies.get("@types/node")
        or dependencies.get("@types/node")
        or "Bun" not in stack
        or "Deno" not in stack
    )


def detect_tech_stack(root: Path, *, manifest_file: str = MANIFEST_FILE_NAME) -> TechStack:
    """
    Infer the technologies used by the project at ``root``.

    Steps, in order:

    1. marker files;
    2. "JavaScript" when neither TypeScript nor JavaScript was found;
    3. manifest dependencies and organisation scopes;
    4. "Node.js" according to :func:`uses_node_runtime` (manifest only).

    Running the detection twice on an unchanged project yields the same
    sequence.

    Parameters
    ----------
    root : pathlib.Path
        Project root directory.
    manifest_file : str, default="package.json"
        Manifest file name.

    Returns
    -------
    TechStack
        Deduplicated technologies in discovery order.
    """

    root = Path(root)
    stack = TechStack()

    detect_from_markers(root, stack)

    if "TypeScript" not in stack and "JavaScript" not in stack:
        stack.add("JavaScript")

    manifest = read_manifest(root, manifest_file=manifest_file)
    if manifest is not None:
        detect_from_dependencies(_mapping_field(manifest, "dependencies"), stack)
        if uses_node_runtime(manifest, stack):
            stack.add("Node.js")

    logger.debug("Detected {} technolog(ies) in {}: {}", len(stack), root, stack.as_list())
    return stack
