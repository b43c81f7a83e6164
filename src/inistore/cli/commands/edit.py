from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from inistore.cli.commands.query import encoding_opt, file_arg
from inistore.cli.ui import UI, get_ui, render_diagnostics
from inistore.cli.utils.files import ParsedFile, parse_file
from inistore.cli.utils.settings import resolve_config
from inistore.core.errors import ExitCode
from inistore.parsers.common import SECTION_SEP, check_entry
from inistore.parsers.ini_parser import dumps_ini


def _write_back(ui: UI, parsed: ParsedFile, encoding: str) -> None:
    # comments, layout and original key case are not preserved
    try:
        parsed.path.write_text(dumps_ini(parsed.store), encoding=encoding)
    except OSError:
        ui.err_console.print(
            f"[err]Cannot write to file:[/err] [path]{escape(str(parsed.path))}[/path]"
        )
        raise typer.Exit(code=int(ExitCode.ERROR))


def set_cmd(
    path: Path = file_arg(),
    key: str = typer.Argument(..., help='Entry key, e.g. "pizza:cheese". A bare name declares a section.'),
    value: Optional[str] = typer.Argument(None, help="New value. Omit to declare a section."),
    encoding: Optional[str] = encoding_opt(),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Set an entry and rewrite the file."""
    ui = get_ui(verbose=verbose)
    loaded = resolve_config(ui, encoding=encoding)
    parsed = parse_file(ui, path, loaded.parse)
    render_diagnostics(ui.err_console, parsed.diagnostics, verbose=ui.verbose)

    entry = key.lower()
    if not entry:
        raise typer.BadParameter("entry key must not be empty", param_hint="KEY")
    if value is not None and SECTION_SEP not in entry:
        raise typer.BadParameter(
            'use "section:key" to set a value (":key" for the root section)', param_hint="KEY"
        )
    try:
        check_entry(entry, value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    parsed.store.set_entry(entry, value)
    _write_back(ui, parsed, loaded.parse.encoding)
    ui.console.print(f"[ok]Set[/ok] {escape(entry)}")


def unset_cmd(
    path: Path = file_arg(),
    key: str = typer.Argument(..., help="Entry key to remove."),
    encoding: Optional[str] = encoding_opt(),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Remove an entry (if present) and rewrite the file."""
    ui = get_ui(verbose=verbose)
    loaded = resolve_config(ui, encoding=encoding)
    parsed = parse_file(ui, path, loaded.parse)
    render_diagnostics(ui.err_console, parsed.diagnostics, verbose=ui.verbose)

    if not parsed.store.find_entry(key):
        ui.console.print(f"[muted]{escape(key.lower())} not present, nothing to do.[/muted]")
        return

    parsed.store.unset_entry(key)
    _write_back(ui, parsed, loaded.parse.encoding)
    ui.console.print(f"[ok]Removed[/ok] {escape(key.lower())}")
