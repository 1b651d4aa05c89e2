"""numcat: concatenate text inputs to standard output with optional line numbers."""

__version__ = "0.1.0"
