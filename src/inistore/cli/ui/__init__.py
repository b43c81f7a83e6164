from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

from inistore.cli.ui.formatters import (
    render_diagnostics,
    render_entries_table,
    render_sections,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
        "path": "cyan",
        "section": "bold magenta",
        "key": "bold",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    return UI(
        console=Console(theme=THEME),
        err_console=Console(theme=THEME, stderr=True),
        verbose=verbose,
    )


__all__ = [
    "UI",
    "get_ui",
    "render_diagnostics",
    "render_entries_table",
    "render_sections",
]
