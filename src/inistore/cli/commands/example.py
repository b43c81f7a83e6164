from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from inistore.cli.ui import get_ui, render_diagnostics
from inistore.cli.utils.files import parse_file, write_file
from inistore.cli.utils.settings import resolve_config
from inistore.core.errors import ExitCode
from inistore.core.sink import ConsoleSink

DEFAULT_EXAMPLE_PATH = Path("example.ini")

# Sample data borrowed from the iniparser project.
EXAMPLE_INI = """\
# This is an example of an ini file

[Pizza]
Ham       = yes ;
Mushrooms = TRUE ;
Capres    = 0 ;
Cheese    = Non ;

[Wine]
Grape     = Cabernet Sauvignon ;
Year      = 1989 ;
Country   = Spain ;
Alcohol   = 12.5 ;
"""


def _flag(v: bool) -> int:
    return 1 if v else 0


def example_cmd(
    path: Path = typer.Argument(DEFAULT_EXAMPLE_PATH, help="Where to write the sample file."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Write the pizza/wine sample INI file."""
    ui = get_ui()
    try:
        written = write_file(path, EXAMPLE_INI, force=force)
    except OSError:
        ui.err_console.print(f"[err]Cannot create file:[/err] [path]{escape(str(path))}[/path]")
        raise typer.Exit(code=int(ExitCode.ERROR))

    if written:
        ui.console.print(f"[ok]Wrote[/ok] [path]{escape(str(path))}[/path]")
    else:
        ui.console.print(
            f"[muted]{escape(str(path))} exists, left untouched (use --force).[/muted]"
        )


def demo_cmd(
    path: Path = typer.Argument(
        DEFAULT_EXAMPLE_PATH, help="INI file to read. Created from the sample if missing."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse the sample file, dump it to stderr and print typed lookups."""
    ui = get_ui(verbose=verbose)
    loaded = resolve_config(ui)

    if not path.exists():
        try:
            write_file(path, EXAMPLE_INI, force=False)
        except OSError:
            ui.err_console.print(f"[err]Cannot create file:[/err] [path]{escape(str(path))}[/path]")
            raise typer.Exit(code=int(ExitCode.ERROR))

    parsed = parse_file(ui, path, loaded.parse)
    store = parsed.store
    store.dump(ConsoleSink(ui.err_console))
    render_diagnostics(ui.err_console, parsed.diagnostics, verbose=ui.verbose)

    out = ui.console
    out.print("Pizza:", markup=False)
    out.print(f"Ham:       [{_flag(store.get_boolean('pizza:ham', False))}]", markup=False)
    out.print(f"Mushrooms: [{_flag(store.get_boolean('pizza:mushrooms', False))}]", markup=False)
    out.print(f"Capres:    [{_flag(store.get_boolean('pizza:capres', False))}]", markup=False)
    out.print(f"Cheese:    [{_flag(store.get_boolean('pizza:cheese', False))}]", markup=False)

    out.print("Wine:", markup=False)
    out.print(f"Grape:     [{store.get_string('wine:grape', 'UNDEF')}]", markup=False)
    out.print(f"Year:      [{store.get_int('wine:year', -1)}]", markup=False)
    out.print(f"Country:   [{store.get_string('wine:country', 'UNDEF')}]", markup=False)
    out.print(f"Alcohol:   [{store.get_float('wine:alcohol', -1.0)}]", markup=False)
