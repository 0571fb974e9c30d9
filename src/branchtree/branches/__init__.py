# src/branchtree/branches/__init__.py

"""
Public interface for branch hierarchy reconstruction.

Intended usage from other parts of the project and tests:

    from branchtree.branches import (
        BranchObject,
        BranchNode,
        build_forest,
        find_root_containing_path,
        all_descendants,
        descendants_of_named,
    )
"""

from __future__ import annotations

from .node import (
    BranchDescriptor,
    BranchNode,
    BranchObject,
    fold_path,
    paths_equal,
    to_display_string,
)
from .visitors import (
    BranchVisitor,
    DepthRecorder,
    PathMatcher,
    PathSearchVisitor,
    accept_visitor,
    all_descendants,
    descendants_of_named,
    iter_subtree,
    match_containing_path,
    match_exact_path,
)
from .builder import (
    BranchSource,
    build_forest,
    find_root_containing_path,
    find_root_in_forest,
    get_root_branch_for_remote_path,
    index_by_path,
)


__all__ = [
    "BranchDescriptor",
    "BranchNode",
    "BranchObject",
    "fold_path",
    "paths_equal",
    "to_display_string",
    "BranchVisitor",
    "DepthRecorder",
    "PathMatcher",
    "PathSearchVisitor",
    "accept_visitor",
    "all_descendants",
    "descendants_of_named",
    "iter_subtree",
    "match_containing_path",
    "match_exact_path",
    "BranchSource",
    "build_forest",
    "find_root_containing_path",
    "find_root_in_forest",
    "get_root_branch_for_remote_path",
    "index_by_path",
]
