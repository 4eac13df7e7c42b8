"""Instruct functions to override returns and arguments, check how they were called, and amalgamate headers."""

__version__ = "0.1.0"