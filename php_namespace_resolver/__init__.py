"""Resolve, import and sort PHP namespace use statements."""

__version__ = "1.0.0"
