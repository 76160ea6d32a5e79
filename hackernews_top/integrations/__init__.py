"""Clients for external services."""

from hackernews_top.integrations.http_client import HttpxTextFetcher, TextFetcher

__all__ = ["HttpxTextFetcher", "TextFetcher"]
