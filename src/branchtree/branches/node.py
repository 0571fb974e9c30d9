# src/branchtree/branches/node.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from branchtree.core.exceptions import InvalidArgumentError


@runtime_checkable
class BranchDescriptor(Protocol):
    """
    Read-only view of one branch as reported by the remote system.

    Attributes:
        path: Server path of the branch, unique in a case-insensitive namespace.
        parent_path: Path of the branch this one was created from. Ignored
            when ``is_root`` is set.
        is_root: True when the branch has no parent.
    """

    @property
    def path(self) -> str: ...

    @property
    def parent_path(self) -> Optional[str]: ...

    @property
    def is_root(self) -> bool: ...


@dataclass(frozen=True)
class BranchObject:
    """Plain descriptor used by the file loader and in tests."""

    path: str
    parent_path: Optional[str] = None
    is_root: bool = False


def _fold_char(char: str) -> str:
    upper = char.upper()
    # Full case mappings such as "ß" -> "SS" would merge distinct paths.
    return upper if len(upper) == 1 else char


def fold_path(path: Optional[str]) -> str:
    """
    Key used for every path comparison (ordinal, case-insensitive).

    Each character is upper-cased on its own and only when it maps to a
    single character, so folding never changes the length of a path.
    """
    return "".join(_fold_char(c) for c in path or "")


def paths_equal(left: Optional[str], right: Optional[str]) -> bool:
    return fold_path(left) == fold_path(right)


@dataclass(eq=False)
class BranchNode:
    """
    One branch in a reconstructed branch forest.

    Attributes:
        branch: The wrapped descriptor (shared, never modified here).
        children: Child nodes in the order they were discovered while
            building. Passing ``None`` is a contract violation and raises
            InvalidArgumentError; any other iterable is copied into a list.
    """

    branch: BranchDescriptor
    children: List["BranchNode"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.children is None:
            raise InvalidArgumentError("children")
        if not isinstance(self.children, list):
            self.children = list(self.children)

    # ---------- Descriptor accessors ----------

    @property
    def path(self) -> str:
        return self.branch.path

    @property
    def parent_path(self) -> Optional[str]:
        return self.branch.parent_path

    @property
    def is_root(self) -> bool:
        return self.branch.is_root

    # ---------- Helper methods ----------

    def add_child(self, child: "BranchNode") -> None:
        self.children.append(child)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the subtree to a JSON-friendly dict."""
        result = self._shallow_dict()
        stack = [(self, result)]
        while stack:
            node, entry = stack.pop()
            for child in node.children:
                child_entry = child._shallow_dict()
                entry["children"].append(child_entry)
                stack.append((child, child_entry))
        return result

    def _shallow_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "parent_path": None if self.is_root else self.parent_path,
            "is_root": self.is_root,
            "children": [],
        }

    def __str__(self) -> str:
        return f"{self.path} [{len(self.children)} children]"

    def __repr__(self) -> str:
        return f"<BranchNode {self.path!r} children={len(self.children)}>"


def to_display_string(node: BranchNode) -> str:
    """Human-readable one-line summary, e.g. ``$/Proj/Main [2 children]``."""
    return str(node)
