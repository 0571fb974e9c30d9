# tests/test_loader.py

from __future__ import annotations

from pathlib import Path

import pytest

from branchtree.branches import BranchObject, build_forest, get_root_branch_for_remote_path
from branchtree.core.exceptions import DescriptorLoadError, ParentAmbiguityError
from branchtree.loader import (
    FileBranchSource,
    descriptor_from_dict,
    descriptors_from_data,
    load_descriptors,
)
from branchtree.utils import mock_file_path


def test_mock_files_exist() -> None:
    assert mock_file_path("tfs_branches.yml").is_file()
    assert mock_file_path("ambiguous_branches.json").is_file()


def test_load_yaml_branches_key() -> None:
    descriptors = load_descriptors(mock_file_path("tfs_branches.yml"))

    assert len(descriptors) == 8
    assert descriptors[0] == BranchObject("$/Project/Main", None, True)
    assert descriptors[1] == BranchObject(
        "$/Project/Development", "$/Project/Main", False
    )


def test_mock_forest_shape() -> None:
    roots = build_forest(load_descriptors(mock_file_path("tfs_branches.yml")))

    assert [r.path for r in roots] == ["$/Project/Main", "$/Legacy/Trunk"]
    main = roots[0]
    assert [c.path for c in main.children] == [
        "$/Project/Development",
        "$/Project/Release-1.0",
    ]


def test_load_json_camel_case_keys() -> None:
    descriptors = load_descriptors(mock_file_path("ambiguous_branches.json"))
    assert descriptors[0].is_root is True
    assert descriptors[1].parent_path == "$/Project/Main"
    with pytest.raises(ParentAmbiguityError):
        build_forest(descriptors)


def test_load_top_level_list(tmp_path: Path) -> None:
    path = tmp_path / "branches.yaml"
    path.write_text(
        "- path: $/A\n  is_root: true\n- path: $/A/B\n  parent_path: $/A\n",
        encoding="utf-8",
    )
    assert [d.path for d in load_descriptors(path)] == ["$/A", "$/A/B"]


def test_empty_file_gives_no_descriptors(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_descriptors(path) == []


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_descriptors(tmp_path / "missing.yml")


def test_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(DescriptorLoadError):
        load_descriptors(tmp_path)


def test_malformed_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(DescriptorLoadError):
        load_descriptors(path)


@pytest.mark.parametrize(
    "data",
    [
        {"not_branches": []},
        "just a string",
        [["$/A"]],
        [{"is_root": True}],
        [{"path": "$/A", "is_root": "yes"}],
        [{"path": "$/A", "parent_path": 5}],
    ],
)
def test_invalid_documents_raise(data) -> None:
    with pytest.raises(DescriptorLoadError):
        descriptors_from_data(data)


def test_descriptor_defaults() -> None:
    assert descriptor_from_dict({"path": "$/A"}) == BranchObject("$/A", None, False)


def test_file_branch_source(tmp_path: Path) -> None:
    path = tmp_path / "branches.json"
    path.write_text(
        '[{"path": "$/A", "isRoot": true},'
        ' {"path": "$/A/B", "parentPath": "$/a"}]',
        encoding="utf-8",
    )
    source = FileBranchSource(path)
    root = get_root_branch_for_remote_path(source, "$/A/B/src", exact_match=False)
    assert root.path == "$/A"


@pytest.mark.parametrize("name", ["latin1.yml", "latin1.json"])
def test_non_utf8_file_raises_load_error(tmp_path: Path, name: str) -> None:
    path = tmp_path / name
    path.write_bytes(b"- path: $/\xff\xfe\n  is_root: true\n")
    with pytest.raises(DescriptorLoadError):
        load_descriptors(path)
