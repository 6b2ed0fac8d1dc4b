"""Render jsonresume documents to HTML and PDF through pluggable themes."""

__version__ = "0.1.0"
