from .exceptions import (
    BranchTreeError,
    DescriptorLoadError,
    InvalidArgumentError,
    ParentAmbiguityError,
)

__all__ = [
    "BranchTreeError",
    "DescriptorLoadError",
    "InvalidArgumentError",
    "ParentAmbiguityError",
]
