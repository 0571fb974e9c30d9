from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from branchtree.branches import (
    find_root_in_forest,
    match_containing_path,
    match_exact_path,
    to_display_string,
)
from branchtree.cli.utils import EXIT_NOT_FOUND, console, load_forest
from branchtree.config import get_config


def find_command(
    descriptors: Path = typer.Argument(..., exists=True, readable=True),
    remote_path: str = typer.Argument(..., help="Server path to look for"),
    exact: Optional[bool] = typer.Option(
        None,
        "--exact/--containing",
        help="Match the branch path exactly, or any branch containing the path "
        "(default from config: search.exact_match)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging, including load timing",
    ),
):
    """
    Print the root branch whose tree holds REMOTE_PATH.
    """
    if exact is None:
        exact = get_config().exact_match
    matcher = match_exact_path if exact else match_containing_path

    roots = load_forest(descriptors, verbose=verbose)
    root = find_root_in_forest(roots, remote_path, matcher)
    if root is None:
        console.print(f"No root branch contains {remote_path}", highlight=False, markup=False)
        raise typer.Exit(code=EXIT_NOT_FOUND)

    console.print(to_display_string(root), highlight=False, markup=False)
