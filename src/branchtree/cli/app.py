
from __future__ import annotations

import typer

from branchtree.cli.commands.descendants import descendants_command
from branchtree.cli.commands.find import find_command
from branchtree.cli.commands.show import show_command

app = typer.Typer(
    name="branchtree",
    help="Rebuild and query branch hierarchies from flat branch listings",
    add_completion=False,
)

app.command("show")(show_command)
app.command("find")(find_command)
app.command("descendants")(descendants_command)


def main():
    app()


if __name__ == "__main__":
    main()
