import io
import sys

import pytest
from rich.console import Console

from inistore.core.sink import (
    ConsoleSink,
    DiagnosticSink,
    MemorySink,
    StreamSink,
    as_sink,
)


def test_memory_sink_collects_lines():
    sink = MemorySink()
    sink.emit("one")
    sink.emit("two")
    assert sink.lines == ["one", "two"]
    assert sink.getvalue() == "one\ntwo\n"


def test_stream_sink_appends_newline():
    buf = io.StringIO()
    StreamSink(buf).emit("[pizza:ham]=yes")
    assert buf.getvalue() == "[pizza:ham]=yes\n"


def test_console_sink_prints_verbatim():
    buf = io.StringIO()
    sink = ConsoleSink(Console(file=buf, width=20))
    sink.emit("[bold]x[/bold] :smile: " + "y" * 40)
    assert buf.getvalue() == "[bold]x[/bold] :smile: " + "y" * 40 + "\n"


def test_as_sink():
    mem = MemorySink()
    assert as_sink(mem) is mem
    assert isinstance(as_sink(None), ConsoleSink)
    assert isinstance(as_sink(io.StringIO()), StreamSink)
    assert isinstance(as_sink(sys.stdout), StreamSink)

    with pytest.raises(TypeError):
        as_sink(42)  # type: ignore[arg-type]


def test_custom_sink_satisfies_protocol():
    class Upper:
        def __init__(self):
            self.seen = []

        def emit(self, line):
            self.seen.append(line.upper())

    sink = Upper()
    assert isinstance(sink, DiagnosticSink)
    assert as_sink(sink) is sink
