from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from numcat.core.errors import ConfigError

STDIN_TOKEN = "-"


def _ensure_names(inputs: Sequence[str]) -> tuple[str, ...]:
    if isinstance(inputs, (str, bytes)):
        raise ConfigError(
            TypeError(f"inputs must be a sequence of names, got a single value {inputs!r}")
        )
    names = tuple(inputs)
    bad = [n for n in names if not isinstance(n, str)]
    if bad:
        raise ConfigError(TypeError(f"input names must be strings, got {bad!r}"))
    return names


@dataclass(frozen=True)
class CatConfig:
    inputs: tuple[str, ...] = (STDIN_TOKEN,)
    number_all: bool = False
    number_nonblank: bool = False

    def validated(self) -> CatConfig:
        names = _ensure_names(self.inputs)
        if not names:
            names = (STDIN_TOKEN,)
        return replace(
            self,
            inputs=names,
            number_all=bool(self.number_all),
            number_nonblank=bool(self.number_nonblank),
        )
