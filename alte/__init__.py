"""Pieces of a lightweight text editor: rope buffer, themes, language detection and layout helpers."""

__version__ = "0.1.0"