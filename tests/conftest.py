from __future__ import annotations

from pathlib import Path

import pytest

from numcat.core.errors import OpenError
from numcat.services.input_resolver import LineSource
from numcat.services.interfaces import OutputSink


class RecordingSink(OutputSink):
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.warnings: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


class FlakyStream:
    """Text stream that yields ``lines`` and then fails with an I/O error."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.closed = False

    def readline(self) -> str:
        if self._lines:
            return self._lines.pop(0)
        raise OSError(5, "Input/output error")

    def close(self) -> None:
        self.closed = True


class StubResolver:
    """Resolver serving in-memory streams; unknown names fail to open."""

    def __init__(self, streams: dict) -> None:
        self.streams = streams
        self.opened: list[str] = []

    def open(self, name: str) -> LineSource:
        if name not in self.streams:
            raise OpenError(name, FileNotFoundError(2, "No such file or directory"))
        self.opened.append(name)
        return LineSource(name, self.streams[name])


@pytest.fixture
def write_input(tmp_path: Path):
    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
