from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from inistore.core.models import Diagnostic
from inistore.core.store import IniStore
from inistore.parsers.common import split_entry_key

ROOT_LABEL = "(root)"


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def section_label(section: str) -> str:
    return section or ROOT_LABEL


# ----------------------------
# Entries
# ----------------------------

def render_entries_table(
    console: Console,
    store: IniStore,
    *,
    title: Optional[str] = None,
    max_value_len: int = 120,
) -> None:
    if not len(store):
        console.print("[muted]No entries.[/muted]")
        return

    table = Table(title=title or f"Entries ({len(store)})", show_lines=False)
    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value")

    for entry, value in store.items():
        section, key = split_entry_key(entry)
        # Text() keeps values like "[x]" from being read as markup
        shown = Text("<none>", style="muted") if value is None else Text(
            _short(value, max_value_len)
        )
        table.add_row(Text(section_label(section)), Text(key or ""), shown)

    console.print(table)


def render_sections(console: Console, store: IniStore) -> None:
    table = Table(title=f"Sections ({store.section_count()})", show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Section", style="section")
    table.add_column("Keys", justify="right", no_wrap=True)

    for idx in range(store.section_count()):
        name = store.section_name(idx) or ""
        table.add_row(
            str(idx), Text(section_label(name)), str(len(store.section_keys(name)))
        )

    console.print(table)


# ----------------------------
# Diagnostics
# ----------------------------

def render_diagnostics(
    console: Console,
    diagnostics: Sequence[Diagnostic],
    *,
    max_items: int = 25,
    verbose: bool = False,
) -> None:
    if not diagnostics:
        return

    console.print(f"[warn]⚠️  {len(diagnostics)} malformed line(s) skipped.[/warn]")

    if not verbose:
        console.print("[muted]Run with --verbose to see details.[/muted]")
        return

    shown = list(diagnostics)[:max_items]
    for d in shown:
        msg = Text(f"- line {d.line}: {d.message} ")
        msg.append(_short(d.text, 80), style="muted")
        console.print(msg)

    if len(diagnostics) > len(shown):
        console.print(f"[muted]… and {len(diagnostics) - len(shown)} more[/muted]")
