from __future__ import annotations

import click

from numcat.services.interfaces import OutputSink

NUMBER_WIDTH = 6


def format_line(count: int, line: str, show_line: bool) -> str:
    """Render one output line, prefixed with its number when ``show_line`` is set."""
    if show_line:
        return f"{count:>{NUMBER_WIDTH}}\t{line}"
    return line


class ConsoleSink(OutputSink):
    """Writes lines to standard output and warnings to standard error."""

    def write_line(self, text: str) -> None:
        # color=True keeps escape sequences from the input intact
        click.echo(text, color=True)

    def warn(self, message: str) -> None:
        click.echo(message, err=True)
