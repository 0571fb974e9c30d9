# src/branchtree/branches/builder.py

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol

from branchtree.core.exceptions import InvalidArgumentError, ParentAmbiguityError
from branchtree.logging import get_logger

from .node import BranchDescriptor, BranchNode, fold_path
from .visitors import (
    PathMatcher,
    PathSearchVisitor,
    accept_visitor,
    match_containing_path,
    match_exact_path,
)

log = get_logger(__name__)


class BranchSource(Protocol):
    """Anything that can list the branches known to the remote system."""

    def get_branches(self) -> Iterable[BranchDescriptor]: ...


def index_by_path(nodes: Iterable[BranchNode]) -> Dict[str, List[BranchNode]]:
    """
    Group nodes by case-insensitive path. Duplicate paths are kept, each key
    maps to every node carrying that path in input order.
    """
    index: Dict[str, List[BranchNode]] = {}
    for node in nodes:
        index.setdefault(fold_path(node.path), []).append(node)
    return index


def build_forest(descriptors: Iterable[BranchDescriptor]) -> List[BranchNode]:
    """
    Link a flat list of branch descriptors into a forest.

        descriptors -> [BranchNode (root), ...]

    Every non-root node is attached to the single node whose path equals its
    parent path. A node whose parent is missing (an orphan) is dropped: it is
    neither attached nor returned as a root. A parent path shared by more
    than one node raises ParentAmbiguityError and no forest is returned.

    Returns:
        The root nodes, in input order.
    """
    if descriptors is None:
        raise InvalidArgumentError("descriptors")

    nodes = [BranchNode(branch) for branch in descriptors]
    by_path = index_by_path(nodes)

    orphans = 0
    for node in nodes:
        if node.is_root:
            continue

        # A branch not marked as root can still have no parent on the server.
        candidates = by_path.get(fold_path(node.parent_path), [])
        if not candidates:
            orphans += 1
            log.debug(
                "Dropping orphan branch %s: parent %s not found",
                node.path,
                node.parent_path,
            )
        elif len(candidates) == 1:
            candidates[0].add_child(node)
        else:
            log.error(
                "Ambiguous parent %s for branch %s (%d candidates)",
                node.parent_path,
                node.path,
                len(candidates),
            )
            raise ParentAmbiguityError(node.parent_path, len(candidates))

    roots = [node for node in nodes if node.is_root]
    log.debug(
        "Built branch forest: %d branches, %d roots, %d orphans dropped",
        len(nodes),
        len(roots),
        orphans,
    )
    return roots


def find_root_containing_path(
    descriptors: Iterable[BranchDescriptor],
    target_path: str,
    exact_match: bool = True,
    matcher: Optional[PathMatcher] = None,
) -> Optional[BranchNode]:
    """
    Return the first root whose subtree holds a node matching ``target_path``.

    Args:
        descriptors: Flat branch list, as for build_forest().
        target_path: Server path to look for.
        exact_match: When True a node must carry exactly ``target_path``;
            when False a node also matches if ``target_path`` lies inside it.
        matcher: Optional ``(node_path, target_path) -> bool`` predicate that
            replaces the one selected by ``exact_match``.

    Returns:
        The matching root node, or None.
    """
    if matcher is None:
        matcher = match_exact_path if exact_match else match_containing_path
    return find_root_in_forest(build_forest(descriptors), target_path, matcher)


def find_root_in_forest(
    roots: Iterable[BranchNode],
    target_path: str,
    matcher: PathMatcher = match_exact_path,
) -> Optional[BranchNode]:
    """Search already-built ``roots`` in order; see find_root_containing_path()."""
    for root in roots:
        visitor = PathSearchVisitor(target_path, matcher)
        accept_visitor(root, visitor)
        if visitor.found:
            log.debug(
                "Path %s matched %s under root %s",
                target_path,
                visitor.match.path,
                root.path,
            )
            return root

    log.debug("No root contains path %s", target_path)
    return None


def get_root_branch_for_remote_path(
    source: BranchSource,
    remote_path: str,
    exact_match: bool = True,
) -> Optional[BranchNode]:
    """Query ``source`` for its branches and find the root holding ``remote_path``."""
    return find_root_containing_path(
        list(source.get_branches()), remote_path, exact_match=exact_match
    )
