"""branchtree: rebuild branch hierarchies from flat branch listings and walk them."""

from branchtree.branches import (
    BranchNode,
    BranchObject,
    all_descendants,
    build_forest,
    descendants_of_named,
    find_root_containing_path,
)
from branchtree.core.exceptions import (
    BranchTreeError,
    InvalidArgumentError,
    ParentAmbiguityError,
)

__all__ = [
    "BranchNode",
    "BranchObject",
    "all_descendants",
    "build_forest",
    "descendants_of_named",
    "find_root_containing_path",
    "BranchTreeError",
    "InvalidArgumentError",
    "ParentAmbiguityError",
]
