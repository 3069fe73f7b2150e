"""Paperscope - arXiv Atom feed parsing and search."""

__version__ = "0.1.0"
