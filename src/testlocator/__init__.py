"""Discover and validate test directories and files in a project tree."""

__version__ = "0.1.0"
