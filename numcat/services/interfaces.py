from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from numcat.services.input_resolver import LineSource


class InputResolver(Protocol):
    def open(self, name: str) -> LineSource: ...


class OutputSink(ABC):
    @abstractmethod
    def write_line(self, text: str) -> None: ...

    @abstractmethod
    def warn(self, message: str) -> None: ...
