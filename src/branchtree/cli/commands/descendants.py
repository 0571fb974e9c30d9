from __future__ import annotations

from pathlib import Path

import typer

from branchtree.branches import descendants_of_named, to_display_string
from branchtree.cli.utils import console, load_forest


def descendants_command(
    descriptors: Path = typer.Argument(..., exists=True, readable=True),
    branch_path: str = typer.Argument(..., help="Branch whose descendants to list"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging, including load timing",
    ),
):
    """
    List every branch below BRANCH_PATH, parents before children.
    """
    found = []
    for root in load_forest(descriptors, verbose=verbose):
        found.extend(descendants_of_named(root, branch_path))

    if not found:
        console.print(f"No branches below {branch_path}", highlight=False, markup=False)
        return

    for node in found:
        console.print(to_display_string(node), highlight=False, markup=False)
