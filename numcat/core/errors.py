"""Error types raised while concatenating inputs.

``OpenError`` is recoverable and reported per input; ``ReadError`` and
``ConfigError`` abort the whole run.
"""

from __future__ import annotations


def describe_cause(cause: BaseException) -> str:
    """Short human-readable reason for an underlying exception."""
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)


class CatError(Exception):
    """Base class for all numcat errors."""


class OpenError(CatError):
    """An input name could not be turned into a readable line source."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to open {name}: {self.reason}")

    @property
    def reason(self) -> str:
        return describe_cause(self.cause)


class ReadError(CatError):
    """Reading from an already opened input failed."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to read {name}: {self.reason}")

    @property
    def reason(self) -> str:
        return describe_cause(self.cause)


class ConfigError(CatError):
    """The run configuration could not be built."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"Invalid configuration: {cause}")
