from __future__ import annotations

from dataclasses import dataclass, field

from numcat.core.errors import OpenError


@dataclass
class RunReport:
    processed: list[str] = field(default_factory=list)
    failures: list[OpenError] = field(default_factory=list)
    lines_written: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures
