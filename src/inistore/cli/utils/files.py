from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

import typer
from rich.markup import escape
from rich.text import Text

from inistore.cli.ui import UI
from inistore.core.errors import ExitCode
from inistore.core.models import Diagnostic, ParseConfig
from inistore.core.sink import MemorySink
from inistore.core.store import IniStore
from inistore.parsers.ini_parser import IniParser, read_lines


def write_file(path: Path, content: str, *, force: bool) -> bool:
    if path.exists() and not force:
        return False
    path.write_text(content, encoding="utf-8")
    return True


@dataclass(frozen=True)
class ParsedFile:
    path: Path
    store: IniStore
    diagnostics: List[Diagnostic]


def parse_file(ui: UI, path: Path, cfg: ParseConfig) -> ParsedFile:
    """
    Parse `path` for a command. Diagnostics are collected, not printed;
    unreadable files end the command with ExitCode.ERROR.
    """
    sink = MemorySink()
    parser = IniParser(sink=sink)
    try:
        parser.parse(read_lines(path, cfg.encoding))
    except (OSError, UnicodeDecodeError) as e:
        ui.err_console.print(f"[err]Cannot parse file:[/err] [path]{escape(str(path))}[/path]")
        if ui.verbose:
            ui.err_console.print(Text(str(e), style="muted"))
        raise typer.Exit(code=int(ExitCode.ERROR))
    return ParsedFile(path=path, store=parser.store, diagnostics=parser.diagnostics)


def exit_for_diagnostics(parsed: ParsedFile, cfg: ParseConfig) -> None:
    if parsed.diagnostics and cfg.strict:
        raise typer.Exit(code=int(ExitCode.DIAGNOSTICS))
