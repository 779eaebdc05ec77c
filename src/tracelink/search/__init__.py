"""Trace search and dependency graph URL helpers."""

from .url import encoded_length, get_ddg_url, get_search_url, stringify_query

__all__ = ["encoded_length", "get_ddg_url", "get_search_url", "stringify_query"]
