from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.text import Text

from inistore.cli.ui import UI
from inistore.core.config import LoadedConfig, load_config
from inistore.core.errors import ConfigError, ExitCode
from inistore.core.models import OutputFormat


def resolve_config(
    ui: UI,
    *,
    encoding: Optional[str] = None,
    strict: Optional[bool] = None,
    output_format: Optional[OutputFormat] = None,
    sort_keys: Optional[bool] = None,
) -> LoadedConfig:
    cli_overrides = {
        "parse": {"encoding": encoding, "strict": strict},
        "output": {
            "format": output_format.value if output_format else None,
            "sort_keys": sort_keys,
        },
    }
    try:
        loaded = load_config(start_dir=Path.cwd(), cli_overrides=cli_overrides)
    except ConfigError as e:
        ui.err_console.print("[err]Invalid configuration:[/err]")
        ui.err_console.print(Text(str(e)))
        raise typer.Exit(code=int(ExitCode.ERROR))

    if ui.verbose:
        ui.err_console.print("[bold]Config sources:[/bold]")
        ui.err_console.print(Text(f"  global: {loaded.global_path or '-'}"))
        ui.err_console.print(Text(f"  repo:   {loaded.repo_path or '-'}"))
    return loaded
