"""Core configuration, error types, and domain models."""

from .config import STDIN_TOKEN, CatConfig
from .errors import CatError, ConfigError, OpenError, ReadError
from .models import RunReport

__all__ = [
    "STDIN_TOKEN",
    "CatConfig",
    "CatError",
    "ConfigError",
    "OpenError",
    "ReadError",
    "RunReport",
]
