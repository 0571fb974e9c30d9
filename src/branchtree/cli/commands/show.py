from __future__ import annotations

from pathlib import Path

import typer

from branchtree.cli.utils import console, load_forest, render_forest, write_json


def show_command(
    descriptors: Path = typer.Argument(..., exists=True, readable=True),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the forest as JSON instead of a tree",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging, including load timing",
    ),
):
    """
    Show the branch forest described by a descriptor file.
    """
    roots = load_forest(descriptors, verbose=verbose)

    if as_json:
        write_json({"roots": [r.to_dict() for r in roots]}, pretty=pretty)
        return

    if not roots:
        console.print("No root branches found.")
        return

    console.print(render_forest(roots))
