"""Command-line calculator for the four basic arithmetic operations."""

__version__ = "1.0.0"
