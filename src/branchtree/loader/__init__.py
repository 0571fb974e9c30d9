# src/branchtree/loader/__init__.py

"""
Public interface for reading branch descriptor snapshots from disk.

    from branchtree.loader import load_descriptors, FileBranchSource
"""

from __future__ import annotations

from .file_loader import (
    FileBranchSource,
    descriptor_from_dict,
    descriptors_from_data,
    load_descriptors,
    resolve_input_path,
)

__all__ = [
    "FileBranchSource",
    "descriptor_from_dict",
    "descriptors_from_data",
    "load_descriptors",
    "resolve_input_path",
]
