"""Colours, themes, style sheets and writing statistics for a Markdown editor."""

__version__ = "2.1.5"