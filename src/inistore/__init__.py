"""Parse INI text into a flat, case-insensitive section:key store."""

__version__ = "0.1.0"

from inistore.core.sink import ConsoleSink, DiagnosticSink, MemorySink, StreamSink
from inistore.core.store import IniStore
from inistore.parsers.ini_parser import (
    IniParser,
    dump_ini,
    dumps_ini,
    load,
    loads,
    parse_lines,
    read_lines,
)

__all__ = [
    "__version__",
    "ConsoleSink",
    "DiagnosticSink",
    "IniParser",
    "IniStore",
    "MemorySink",
    "StreamSink",
    "dump_ini",
    "dumps_ini",
    "load",
    "loads",
    "parse_lines",
    "read_lines",
]
