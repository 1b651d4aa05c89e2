"""Orchestration layer driving inputs through resolution and formatting."""

from .runner import CatRunner

__all__ = ["CatRunner"]
