"""
Descriptor file loader

Reads branch descriptor snapshots (YAML or JSON) exported from the remote
system and turns them into BranchObject instances.

Accepted layouts:

    - path: $/Proj/Main
      is_root: true
    - path: $/Proj/Dev
      parent_path: $/Proj/Main

or the same list under a top-level ``branches`` key. The camelCase keys
``parentPath`` and ``isRoot`` are accepted as well.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import yaml

from branchtree.branches import BranchObject
from branchtree.core.exceptions import DescriptorLoadError
from branchtree.logging import get_logger

log = get_logger(__name__)

_JSON_SUFFIXES = {".json"}


def resolve_input_path(path: Union[str, Path]) -> Path:
    """Return an absolute, validated path to an existing descriptor file."""
    abs_path = Path(os.path.abspath(path))
    log.debug(f"Resolving descriptor file: {abs_path}")

    if not abs_path.exists():
        log.error(f"Descriptor file does not exist: {abs_path}")
        raise FileNotFoundError(f"Descriptor file not found: {abs_path}")

    if not abs_path.is_file():
        log.error(f"Descriptor path is not a file: {abs_path}")
        raise DescriptorLoadError(f"Descriptor path is not a file: {abs_path}")

    return abs_path


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in _JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DescriptorLoadError(f"Cannot parse {path}: {exc}") from exc


def _pick(entry: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in entry:
            return entry[key]
    return default


def descriptor_from_dict(entry: Any, position: int = 0) -> BranchObject:
    """Build one BranchObject from a mapping; ``position`` is for messages."""
    if not isinstance(entry, dict):
        raise DescriptorLoadError(
            f"Branch entry #{position} must be a mapping, got {type(entry).__name__}"
        )

    path = entry.get("path")
    if not isinstance(path, str) or not path.strip():
        raise DescriptorLoadError(f"Branch entry #{position} has no path")

    parent_path = _pick(entry, "parent_path", "parentPath")
    if parent_path is not None and not isinstance(parent_path, str):
        raise DescriptorLoadError(
            f"Branch entry #{position} ({path}) has a non-string parent path"
        )

    is_root = _pick(entry, "is_root", "isRoot", default=False)
    if not isinstance(is_root, bool):
        raise DescriptorLoadError(
            f"Branch entry #{position} ({path}) has a non-boolean root flag"
        )

    return BranchObject(path=path, parent_path=parent_path, is_root=is_root)


def descriptors_from_data(data: Any) -> List[BranchObject]:
    """Interpret an already-parsed document as a list of descriptors."""
    if data is None:
        return []

    if isinstance(data, dict):
        if "branches" not in data:
            raise DescriptorLoadError("Expected a list of branches or a 'branches' key")
        data = data["branches"] or []

    if not isinstance(data, list):
        raise DescriptorLoadError(
            f"Expected a list of branches, got {type(data).__name__}"
        )

    return [descriptor_from_dict(entry, i) for i, entry in enumerate(data)]


def load_descriptors(path: Union[str, Path]) -> List[BranchObject]:
    """Load every branch descriptor from a YAML or JSON file."""
    abs_path = resolve_input_path(path)
    descriptors = descriptors_from_data(_read_document(abs_path))
    log.debug(f"Loaded {len(descriptors)} branch descriptors from {abs_path}")
    return descriptors


class FileBranchSource:
    """BranchSource backed by a descriptor file, re-read on every query."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_branches(self) -> Iterable[BranchObject]:
        return load_descriptors(self.path)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<FileBranchSource {str(self.path)!r}>"
