from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from rich.text import Text

from inistore.cli.ui import (
    get_ui,
    render_diagnostics,
    render_entries_table,
    render_sections,
)
from inistore.cli.utils.files import exit_for_diagnostics, parse_file
from inistore.cli.utils.settings import resolve_config
from inistore.core.errors import ExitCode
from inistore.core.models import OutputFormat, ValueType
from inistore.core.sink import StreamSink
from inistore.core.store import IniStore, parse_bool


def file_arg() -> Any:
    return typer.Argument(..., dir_okay=False, help="INI file to read.")


def encoding_opt() -> Any:
    return typer.Option(None, "--encoding", help="File encoding (default from config: utf-8).")


def strict_opt() -> Any:
    return typer.Option(
        None, "--strict/--no-strict", help="Exit 2 if the file has malformed lines."
    )


def show_cmd(
    path: Path = file_arg(),
    encoding: Optional[str] = encoding_opt(),
    strict: Optional[bool] = strict_opt(),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Show every entry as a table."""
    ui = get_ui(verbose=verbose)
    loaded = resolve_config(ui, encoding=encoding, strict=strict)

    parsed = parse_file(ui, path, loaded.parse)
    render_entries_table(ui.console, parsed.store, title=f"{path} ({len(parsed.store)})")
    render_diagnostics(ui.console, parsed.diagnostics, verbose=ui.verbose)
    exit_for_diagnostics(parsed, loaded.parse)


def sections_cmd(
    path: Path = file_arg(),
    encoding: Optional[str] = encoding_opt(),
) -> None:
    """List sections in first-seen order."""
    ui = get_ui()
    loaded = resolve_config(ui, encoding=encoding)
    parsed = parse_file(ui, path, loaded.parse)
    render_sections(ui.console, parsed.store)


def _typed_default(value_type: ValueType, raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        if value_type is ValueType.INT:
            return int(raw)
        if value_type is ValueType.FLOAT:
            return float(raw)
    except ValueError:
        raise typer.BadParameter(f"{raw!r} is not a valid {value_type.value}", param_hint="--default")
    if value_type is ValueType.BOOL:
        flag = parse_bool(raw)
        if flag is None:
            raise typer.BadParameter(f"{raw!r} is not a valid bool", param_hint="--default")
        return flag
    return raw


def _lookup(store: IniStore, key: str, value_type: ValueType, default: Any) -> Any:
    if value_type is ValueType.INT:
        return store.get_int(key, default)
    if value_type is ValueType.FLOAT:
        return store.get_float(key, default)
    if value_type is ValueType.BOOL:
        return store.get_boolean(key, default)
    return store.get_string(key, default)


def get_cmd(
    path: Path = file_arg(),
    key: str = typer.Argument(..., help='Entry key, e.g. "pizza:ham".'),
    value_type: ValueType = typer.Option(ValueType.STRING, "--type", "-t", help="Read the value as this type."),
    default: Optional[str] = typer.Option(None, "--default", "-d", help="Printed when missing or mistyped."),
    encoding: Optional[str] = encoding_opt(),
) -> None:
    """Print one value. Exit 1 when it is missing (or mistyped) and no default is given."""
    ui = get_ui()
    fallback = _typed_default(value_type, default)
    loaded = resolve_config(ui, encoding=encoding)
    parsed = parse_file(ui, path, loaded.parse)

    value = _lookup(parsed.store, key, value_type, fallback)
    if value is None:
        ui.err_console.print(Text(f"No {value_type.value} value for {key}", style="warn"))
        raise typer.Exit(code=int(ExitCode.ERROR))

    if isinstance(value, bool):
        value = "true" if value else "false"
    typer.echo(value)


def dump_cmd(
    path: Path = file_arg(),
    output_format: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="text ([section:key]=value lines), json or yaml."
    ),
    sort_keys: Optional[bool] = typer.Option(
        None, "--sort-keys/--no-sort-keys", help="Sort entries instead of file order."
    ),
    encoding: Optional[str] = encoding_opt(),
    strict: Optional[bool] = strict_opt(),
) -> None:
    """Write every entry to stdout."""
    ui = get_ui()
    loaded = resolve_config(
        ui,
        encoding=encoding,
        strict=strict,
        output_format=output_format,
        sort_keys=sort_keys,
    )
    out_cfg = loaded.output

    parsed = parse_file(ui, path, loaded.parse)
    store = parsed.store
    if out_cfg.sort_keys:
        ordered = IniStore()
        for k in sorted(store):
            ordered.set_entry(k, store[k])
        store = ordered

    if out_cfg.format is OutputFormat.JSON:
        typer.echo(json.dumps(store.to_dict(), indent=2, ensure_ascii=False))
    elif out_cfg.format is OutputFormat.YAML:
        typer.echo(
            yaml.safe_dump(store.to_dict(), sort_keys=False, allow_unicode=True),
            nl=False,
        )
    else:
        store.dump(StreamSink(sys.stdout))

    render_diagnostics(ui.err_console, parsed.diagnostics, verbose=False)
    exit_for_diagnostics(parsed, loaded.parse)
