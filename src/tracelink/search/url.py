"""
Search URL Construction.

Builds the URLs the vertex menu links to: the trace search page, which
accepts any number of repeated ``traceID`` parameters, and the dependency
graph page focused on a service/operation pair.

Query strings are serialized with sorted keys and repeated keys for list
values (``traceID=a&traceID=b``), matching how the search page parses them.
"""

from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import parse_qs, quote, urlencode, urlsplit

SEARCH_PATH = "/search"
DDG_PATH = "/deep-dependencies"


def encoded_length(value: str) -> int:
    """Length of a query value once percent-encoded."""
    return len(quote(value, safe=""))


def _pairs(query: Mapping[str, Any]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for key in sorted(query):
        value = query[key]
        if value is None:
            continue
        if isinstance(value, (set, frozenset)):
            value = sorted(value)
        if isinstance(value, (list, tuple)):
            pairs.extend((key, str(item)) for item in value)
        elif isinstance(value, bool):
            pairs.append((key, "1" if value else "0"))
        else:
            pairs.append((key, str(value)))
    return pairs


def stringify_query(query: Optional[Mapping[str, Any]]) -> str:
    """Serialize a query mapping into a URL query string (without ``?``)."""
    if not query:
        return ""
    return urlencode(_pairs(query), quote_via=quote, safe="")


def prefix_url(path: str, prefix: str = "") -> str:
    return f"{prefix.rstrip('/')}{path}"


def get_search_url(query: Optional[Mapping[str, Any]] = None, prefix: str = "") -> str:
    """
    Build a trace search URL.

    Args:
        query: Search parameters, e.g. ``{"traceID": [...], "lookback": "1h"}``.
        prefix: Scheme and host (or path prefix) the search page lives under.

    Returns:
        str: ``<prefix>/search`` or ``<prefix>/search?<query>``.
    """
    search_url = prefix_url(SEARCH_PATH, prefix)
    query_string = stringify_query(query)
    if not query_string:
        return search_url
    return f"{search_url}?{query_string}"


def get_ddg_url(args: Mapping[str, Any], base_url: Optional[str] = None) -> str:
    """Build the dependency graph URL that focuses a service/operation pair."""
    query_string = stringify_query(args)
    path = base_url or DDG_PATH
    if not query_string:
        return path
    return f"{path}?{query_string}"


def trace_ids_from_url(url: str) -> List[str]:
    """Extract the ``traceID`` values from a search URL, in order."""
    params = parse_qs(urlsplit(url).query)
    return list(params.get("traceID", []))
