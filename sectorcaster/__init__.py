"""Sector-based software renderer with a pygame viewer and a built-in demo level."""

__version__ = "0.1.0"