"""Markdown wiki generator for PowerShell comment-based help."""

__version__ = "1.0.0"
