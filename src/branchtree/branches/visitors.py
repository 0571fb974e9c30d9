# src/branchtree/branches/visitors.py

"""
Depth-first traversal over a branch forest.

A visitor is any callable ``visitor(node, depth)``. The walk is pre-order:
a node is visited before its children, children left to right, and the
starting node sits at depth 0. A visitor returning a truthy value stops the
walk early.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple

from .node import BranchNode, fold_path, paths_equal

BranchVisitor = Callable[[BranchNode, int], Any]
PathMatcher = Callable[[str, str], bool]


def accept_visitor(node: BranchNode, visitor: BranchVisitor, depth: int = 0) -> bool:
    """
    Walk ``node`` and its subtree, calling ``visitor(node, depth)`` on each.

    Returns:
        True when the visitor asked to stop, False when the walk completed.
    """
    for current, level in iter_subtree(node, depth):
        if visitor(current, level):
            return True
    return False


def iter_subtree(node: BranchNode, depth: int = 0) -> Iterator[Tuple[BranchNode, int]]:
    """Yield ``(node, depth)`` for this node and all descendants, pre-order."""
    stack = [(node, depth)]
    while stack:
        current, level = stack.pop()
        yield current, level
        # Reversed so the first child is popped first.
        stack.extend((child, level + 1) for child in reversed(current.children))


# ---------- Path matching strategies ----------

def match_exact_path(node_path: str, target_path: str) -> bool:
    return paths_equal(node_path, target_path)


def match_containing_path(node_path: str, target_path: str) -> bool:
    """
    True when ``target_path`` is the branch itself or lies inside it.

    ``$/Proj/Main/src/app.py`` is contained in ``$/Proj/Main`` but not in
    ``$/Proj/Mai``.
    """
    node_key = fold_path(node_path).rstrip("/")
    target_key = fold_path(target_path).rstrip("/")
    return target_key == node_key or target_key.startswith(node_key + "/")


# ---------- Visitors ----------

class PathSearchVisitor:
    """Stops at the first node whose path satisfies ``matcher``."""

    def __init__(self, target_path: str, matcher: PathMatcher = match_exact_path):
        self.target_path = target_path
        self.matcher = matcher
        self.match: Optional[BranchNode] = None

    @property
    def found(self) -> bool:
        return self.match is not None

    def __call__(self, node: BranchNode, depth: int) -> bool:
        if self.matcher(node.path, self.target_path):
            self.match = node
            return True
        return False


class DepthRecorder:
    """Collects ``(path, depth)`` pairs in visiting order."""

    def __init__(self) -> None:
        self.visits: List[Tuple[str, int]] = []

    def __call__(self, node: BranchNode, depth: int) -> None:
        self.visits.append((node.path, depth))


# ---------- Derived queries ----------

def all_descendants(node: Optional[BranchNode]) -> List[BranchNode]:
    """Every node strictly below ``node`` in pre-order; [] for None or a leaf."""
    if node is None:
        return []
    return [n for n, depth in iter_subtree(node) if depth > 0]


def descendants_of_named(
    root: Optional[BranchNode], target_path: str
) -> List[BranchNode]:
    """
    Find the node at or under ``root`` whose path equals ``target_path`` and
    return its descendants. ``root`` itself is checked before its children.
    """
    if root is None:
        return []

    found: List[BranchNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if paths_equal(node.path, target_path):
            # The match's subtree is returned whole, not searched further.
            found.extend(all_descendants(node))
            continue
        stack.extend(reversed(node.children))
    return found
