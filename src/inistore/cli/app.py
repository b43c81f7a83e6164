from __future__ import annotations

import typer
from rich.console import Console

from inistore import __version__
from inistore.cli.commands.edit import set_cmd, unset_cmd
from inistore.cli.commands.example import demo_cmd, example_cmd
from inistore.cli.commands.query import dump_cmd, get_cmd, sections_cmd, show_cmd

app = typer.Typer(
    name="inistore",
    help="Parse, query and edit INI files through a flat section:key store.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"inistore {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
) -> None:
    pass


# Register commands
app.command("example")(example_cmd)
app.command("demo")(demo_cmd)
app.command("show")(show_cmd)
app.command("get")(get_cmd)
app.command("sections")(sections_cmd)
app.command("dump")(dump_cmd)
app.command("set")(set_cmd)
app.command("unset")(unset_cmd)
