
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, List

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from branchtree.branches import BranchNode, build_forest
from branchtree.core.exceptions import BranchTreeError
from branchtree.loader import load_descriptors
from branchtree.logging import log_debug, set_debug

console = Console()
err_console = Console(stderr=True)

EXIT_NOT_FOUND = 1
EXIT_BRANCH_ERROR = 2


def load_forest(path: Path, *, verbose: bool = False) -> List[BranchNode]:
    """
    Load descriptors from ``path`` and link them into a forest.

    ``verbose`` switches the branchtree loggers to DEBUG. Branch errors
    (ambiguous parents, malformed files) are reported on stderr and end the
    command with EXIT_BRANCH_ERROR.
    """
    if verbose:
        set_debug(True)

    t0 = time.perf_counter()

    try:
        descriptors = load_descriptors(path)
        roots = build_forest(descriptors)
    except BranchTreeError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_BRANCH_ERROR) from exc

    log_debug(
        "Loaded %d branches, %d roots in %.3fs",
        len(descriptors),
        len(roots),
        time.perf_counter() - t0,
    )
    return roots


def render_forest(roots: List[BranchNode]) -> Tree:
    """Build a Rich tree with one top-level entry per root branch."""
    forest = Tree("[bold]branches[/bold]", guide_style="dim")
    stack = [(forest, root) for root in reversed(roots)]
    while stack:
        parent, node = stack.pop()
        label = f"[bold]{escape(node.path)}[/bold]" if node.is_root else escape(node.path)
        branch = parent.add(label)
        stack.extend((branch, child) for child in reversed(node.children))
    return forest


def write_json(data: Any, *, pretty: bool) -> None:
    """Write JSON to stdout."""
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    print(payload)
