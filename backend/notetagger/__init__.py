"""Automatic tag suggestions for data-structures and algorithms notes."""

__version__ = "0.1.0"
