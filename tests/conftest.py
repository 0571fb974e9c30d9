import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from branchtree.branches import BranchObject  # noqa: E402


@pytest.fixture
def chain_descriptors():
    """$/A -> $/A/B -> $/A/B/C"""
    return [
        BranchObject("$/A", is_root=True),
        BranchObject("$/A/B", parent_path="$/A"),
        BranchObject("$/A/B/C", parent_path="$/A/B"),
    ]


@pytest.fixture
def two_root_descriptors():
    return [
        BranchObject("$/A", is_root=True),
        BranchObject("$/B", is_root=True),
        BranchObject("$/B/C", parent_path="$/B"),
    ]


@pytest.fixture
def wide_descriptors():
    """
    $/Main
      $/Dev
        $/Feature1
        $/Feature2
      $/Release
        $/Hotfix
    """
    return [
        BranchObject("$/Main", is_root=True),
        BranchObject("$/Dev", parent_path="$/Main"),
        BranchObject("$/Feature1", parent_path="$/Dev"),
        BranchObject("$/Release", parent_path="$/Main"),
        BranchObject("$/Feature2", parent_path="$/Dev"),
        BranchObject("$/Hotfix", parent_path="$/Release"),
    ]
