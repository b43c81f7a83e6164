from __future__ import annotations

from typing import List, Optional, Protocol, TextIO, Union, runtime_checkable

from rich.console import Console


@runtime_checkable
class DiagnosticSink(Protocol):
    """
    Destination for parse warnings and dump output, one line at a time.
    Passed explicitly to parsers and stores; there is no process-wide sink.
    """
    def emit(self, line: str) -> None: ...


class ConsoleSink:
    """Writes lines to a rich Console (stderr unless told otherwise)."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def emit(self, line: str) -> None:
        # entries look like rich markup ("[pizza:ham]=yes"), print them verbatim
        self.console.print(
            line, markup=False, highlight=False, emoji=False, soft_wrap=True
        )


class StreamSink:
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def emit(self, line: str) -> None:
        self.stream.write(line + "\n")


class MemorySink:
    """Collects lines in memory. Handy for tests and for rendering later."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def getvalue(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


SinkLike = Union[DiagnosticSink, TextIO, None]


def default_sink() -> DiagnosticSink:
    return ConsoleSink()


def as_sink(obj: SinkLike) -> DiagnosticSink:
    """
    Accept None (-> default stderr console), an existing sink,
    or anything with a .write(str) method (files, StringIO, sys.stdout).
    """
    if obj is None:
        return default_sink()
    if isinstance(obj, DiagnosticSink):
        return obj
    if hasattr(obj, "write"):
        return StreamSink(obj)  # type: ignore[arg-type]
    raise TypeError(f"not a sink or text stream: {obj!r}")
