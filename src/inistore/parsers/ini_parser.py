from __future__ import annotations

import io
import os
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from inistore.core.models import Diagnostic, DiagnosticKind
from inistore.core.sink import DiagnosticSink, SinkLike, as_sink
from inistore.core.store import IniStore
from inistore.parsers.common import (
    COMMENT_PREFIXES,
    check_entry,
    join_entry_key,
    needs_quotes,
    normalize_name,
    split_entry_key,
    unquote,
)
from inistore.parsers.types import ParsedKV

PathLike = Union[str, "os.PathLike[str]"]


def read_lines(path: PathLike, encoding: Optional[str] = "utf-8") -> Iterator[str]:
    """
    Yield lines from a file, one at a time.
    OSError / UnicodeDecodeError propagate to the caller unchanged.
    """
    with open(path, "r", encoding=encoding) as fp:
        yield from fp


class IniParser:
    """
    Best-effort INI reader.

    Malformed lines are reported to the sink (and kept in `diagnostics`)
    and skipped; parsing always runs to the end of the input. Repeated
    parse() calls accumulate into the same store.
    """

    def __init__(self, store: Optional[IniStore] = None, sink: SinkLike = None) -> None:
        self._sink: DiagnosticSink = as_sink(sink)
        self.store = store if store is not None else IniStore(sink=self._sink)
        self.diagnostics: List[Diagnostic] = []

    def _report(self, kind: DiagnosticKind, lineno: int, text: str) -> None:
        diag = Diagnostic(kind=kind, line=lineno, text=text)
        self.diagnostics.append(diag)
        self._sink.emit(diag.message)

    def _section(self, line: str, lineno: int) -> str:
        end = line.find("]")
        if end == -1:
            self._report(DiagnosticKind.MALFORMED_SECTION, lineno, line)
            return ""
        return normalize_name(line[1:end])

    def _key_value(self, line: str, lineno: int, section: str) -> Optional[ParsedKV]:
        key, sep, val = line.partition("=")
        if not sep:
            self._report(DiagnosticKind.MALFORMED_KEY_VALUE, lineno, line)
            return None
        return ParsedKV(
            key=join_entry_key(section, normalize_name(key)),
            value=unquote(val),
            line=lineno,
        )

    def entries(self, lines: Iterable[str]) -> Iterator[ParsedKV]:
        """Yield normalized entries without touching the store."""
        section = ""
        for lineno, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                continue

            if line.startswith("["):
                section = self._section(line, lineno)
                continue

            kv = self._key_value(line, lineno, section)
            if kv is not None:
                yield kv

    def parse(self, lines: Iterable[str]) -> IniStore:
        for kv in self.entries(lines):
            self.store.set_entry(kv.key, kv.value)
        return self.store


def parse_lines(
    lines: Iterable[str],
    store: Optional[IniStore] = None,
    sink: SinkLike = None,
) -> IniStore:
    return IniParser(store=store, sink=sink).parse(lines)


def loads(text: str, store: Optional[IniStore] = None, sink: SinkLike = None) -> IniStore:
    """Parse INI text held in a string."""
    # same line breaks as read_lines: \n, \r and \r\n only
    return parse_lines(io.StringIO(text, newline=None), store=store, sink=sink)


def load(
    path: PathLike,
    encoding: Optional[str] = "utf-8",
    store: Optional[IniStore] = None,
    sink: SinkLike = None,
) -> IniStore:
    """
    Parse an INI file.

    Raises:
        OSError: the file cannot be opened or read.
        UnicodeDecodeError: the file is not valid in `encoding`.
    """
    return parse_lines(read_lines(path, encoding), store=store, sink=sink)


# ----------------------------
# Write-back
# ----------------------------


def _format_value(value: str) -> str:
    return f'"{value}"' if needs_quotes(value) else value


def dump_ini(store: IniStore, file: TextIO) -> None:
    """
    Serialize a store as grouped INI text.

    Root keys go first without a header, then one [section] block per
    section in first-seen order. Comments and original layout are not kept.

    Raises:
        ValueError: an entry would not read back unchanged (see check_entry).
            Nothing is written in that case.
    """
    groups: Dict[str, List[Tuple[str, str]]] = {"": []}
    items = list(store.items())
    for entry, value in items:
        check_entry(entry, value)

    for entry, value in items:
        section, key = split_entry_key(entry)
        bucket = groups.setdefault(section, [])
        # None values have no INI spelling; only their section header survives
        if key is not None and value is not None:
            bucket.append((key, value))

    root = groups.pop("")
    for key, value in root:
        print(f"{key} = {_format_value(value)}", file=file)

    first = not root
    for section, pairs in groups.items():
        if not first:
            print(file=file)
        print(f"[{section}]", file=file)
        for key, value in pairs:
            print(f"{key} = {_format_value(value)}", file=file)
        first = False


def dumps_ini(store: IniStore) -> str:
    with io.StringIO() as buf:
        dump_ini(store, buf)
        return buf.getvalue()
