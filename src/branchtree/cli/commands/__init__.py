
"""
CLI command modules for branchtree.

Each command module defines a single Typer-compatible command function.
"""

from branchtree.cli.commands.descendants import descendants_command
from branchtree.cli.commands.find import find_command
from branchtree.cli.commands.show import show_command

__all__ = [
    "descendants_command",
    "find_command",
    "show_command",
]
