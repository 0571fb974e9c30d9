
"""
CLI package for branchtree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from branchtree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
