"""Service implementations for input resolution and output formatting."""

from .formatter import ConsoleSink, format_line
from .input_resolver import DefaultInputResolver, LineSource

__all__ = [
    "ConsoleSink",
    "format_line",
    "DefaultInputResolver",
    "LineSource",
]
