"""Diagnostics for Hugo sites authored with R Markdown."""

__version__ = "0.1.0"
