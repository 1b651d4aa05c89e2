from __future__ import annotations

import logging
import sys
from typing import IO, Iterator

from numcat.core.config import STDIN_TOKEN
from numcat.core.errors import OpenError, ReadError
from numcat.services.interfaces import InputResolver

logger = logging.getLogger("numcat.resolver")


def strip_terminator(raw: str) -> str:
    """Drop a trailing ``\\n`` or ``\\r\\n``; a lone ``\\r`` is kept as content."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


class LineSource:
    """Single-pass iterator over the lines of an opened input.

    Byte streams are decoded one line at a time, so a bad byte only fails the
    line it sits on. Use it as a context manager: the underlying handle is
    released on exit unless the stream is borrowed (standard input).
    """

    def __init__(
        self,
        name: str,
        stream: IO[bytes] | IO[str],
        *,
        owned: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        self.name = name
        self.encoding = encoding
        self._stream = stream
        self._owned = owned

    def __enter__(self) -> LineSource:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owned and not self._stream.closed:
            self._stream.close()

    def _read_line(self) -> str:
        raw = self._stream.readline()
        if isinstance(raw, bytes):
            return raw.decode(self.encoding)
        return raw

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                raw = self._read_line()
            except (OSError, UnicodeDecodeError) as e:
                raise ReadError(self.name, e) from e
            if not raw:
                return
            yield strip_terminator(raw)


class DefaultInputResolver(InputResolver):
    """Maps input names to line sources: ``-`` is standard input, anything else a file path."""

    def __init__(
        self, stdin: IO[bytes] | IO[str] | None = None, *, encoding: str = "utf-8"
    ) -> None:
        self._stdin = stdin
        self.encoding = encoding

    def _stdin_stream(self) -> IO[bytes] | IO[str] | None:
        if self._stdin is not None:
            return self._stdin
        if sys.stdin is None:
            return None
        return getattr(sys.stdin, "buffer", sys.stdin)

    def open(self, name: str) -> LineSource:
        if name == STDIN_TOKEN:
            stream = self._stdin_stream()
            if stream is None:
                raise OpenError(name, OSError("standard input is not available"))
            return LineSource(name, stream, owned=False, encoding=self.encoding)
        try:
            handle = open(name, "rb")
        except (OSError, ValueError) as e:
            # ValueError covers names the OS cannot represent, e.g. embedded NUL
            raise OpenError(name, e) from e
        logger.debug("Opened %s", name)
        return LineSource(name, handle, encoding=self.encoding)
