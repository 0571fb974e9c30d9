class BranchTreeError(Exception):
    """Base exception for branch hierarchy failures."""


class InvalidArgumentError(BranchTreeError, ValueError):
    """Raised when a required collection argument is missing (None)."""

    def __init__(self, argument: str):
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class ParentAmbiguityError(BranchTreeError):
    """Raised when a parent path matches more than one branch."""

    def __init__(self, parent_path: str, candidates: int):
        super().__init__(
            "Cannot uniquely identify parent branch because more than one "
            f'branch had the path "{parent_path}".'
        )
        self.parent_path = parent_path
        self.candidates = candidates


class DescriptorLoadError(BranchTreeError):
    """Raised when a branch descriptor file cannot be interpreted."""
