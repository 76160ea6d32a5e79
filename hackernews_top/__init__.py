"""Fetch, validate and rank the current Hacker News top posts."""

__version__ = "0.1.0"
