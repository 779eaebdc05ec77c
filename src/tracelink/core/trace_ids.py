"""
Trace ID Selection for vertex "View traces" links.

A vertex usually sits on several paths, each with its own list of trace IDs.
The link to the trace search page can only carry so many IDs, both by count
(MAX_LINKED_TRACES) and by URL length (MAX_LENGTH), so rather than taking
everything from the first path we take a fair share from every path.

Selection runs in explicit stages:
1. Cleaning: drop empty IDs, then drop every ID already claimed earlier in
   the fair selection order. Cleaned groups are disjoint.
2. Budgeting: each budget yields a candidate count independently; the
   smaller one wins.
3. Quota slicing: the winning count is split evenly across groups and each
   group keeps its quota from the tail of its list.

The fair selection order walks the groups round-robin, taking IDs from the
tail of each. Quota slicing with count ``n`` keeps exactly the first ``n``
IDs of that order.
"""

import logging
import webbrowser
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..config import MAX_LENGTH, MAX_LINKED_TRACES, MIN_LENGTH, PARAM_NAME_LENGTH
from ..search import url as search_url

logger = logging.getLogger(__name__)

Groups = Sequence[Optional[Sequence[Optional[str]]]]


def fair_order(groups: Sequence[Sequence[str]]) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(group_index, trace_id)`` in fair selection order.

    Depth 0 is the last ID of every group, depth 1 the second to last, and
    so on; within a depth, groups are visited in order.
    """
    longest = max((len(group) for group in groups), default=0)
    for depth in range(longest):
        for idx, group in enumerate(groups):
            if depth < len(group):
                yield idx, group[-1 - depth]


def clean_groups(groups: Optional[Groups]) -> List[List[str]]:
    """
    Drop falsy and repeated trace IDs.

    An ID that occurs more than once is kept only where the fair selection
    order reaches it first, so a duplicate never takes up another group's
    quota. Running this on already-clean groups returns them unchanged.
    """
    filtered = [[tid for tid in (group or ()) if tid] for group in (groups or ())]

    seen = set()
    kept_reversed: List[List[str]] = [[] for _ in filtered]
    for idx, tid in fair_order(filtered):
        if tid in seen:
            continue
        seen.add(tid)
        kept_reversed[idx].append(tid)

    return [kept[::-1] for kept in kept_reversed]


def count_budget_limit(groups: Sequence[Sequence[str]], max_traces: int = MAX_LINKED_TRACES) -> int:
    """Number of IDs the count budget allows from cleaned groups."""
    total = sum(len(group) for group in groups)
    return max(0, min(max_traces, total))


def length_budget_limit(
    groups: Sequence[Sequence[str]],
    max_length: int = MAX_LENGTH,
    min_length: int = MIN_LENGTH,
) -> int:
    """
    Number of IDs the URL length budget allows from cleaned groups.

    Each ID costs PARAM_NAME_LENGTH plus its encoded length. IDs are counted
    in fair selection order and counting stops at the first ID that does not
    fit, so the result is always a prefix of that order.
    """
    budget = max_length - min_length
    used = 0
    count = 0
    for _, tid in fair_order(groups):
        cost = PARAM_NAME_LENGTH + search_url.encoded_length(tid)
        if used + cost > budget:
            break
        used += cost
        count += 1
    return count


def allocate_quotas(sizes: Sequence[int], limit: int) -> List[int]:
    """
    Split ``limit`` slots fairly across groups of the given sizes.

    Every group with IDs gets an equal share. A group smaller than its share
    gives up what it cannot use and the leftover is split again among the
    rest. Slots left over by integer division go one each to the earliest
    groups that still have IDs.

    Example:
        allocate_quotas([35, 35, 1], 35) == [17, 17, 1]
    """
    quotas = [0] * len(sizes)
    remaining = max(limit, 0)
    open_groups = [idx for idx, size in enumerate(sizes) if size > 0]

    while remaining and open_groups:
        share = remaining // len(open_groups)
        if share == 0:
            for idx in open_groups[:remaining]:
                quotas[idx] += 1
            break

        still_open = []
        for idx in open_groups:
            take = min(share, sizes[idx] - quotas[idx])
            quotas[idx] += take
            remaining -= take
            if quotas[idx] < sizes[idx]:
                still_open.append(idx)
        open_groups = still_open

    return quotas


def truncate_groups(groups: Sequence[Sequence[str]], limit: int) -> List[List[str]]:
    """Keep each group's quota of IDs from the tail of the group."""
    quotas = allocate_quotas([len(group) for group in groups], limit)
    return [list(group[len(group) - quota:]) if quota else [] for group, quota in zip(groups, quotas)]


def select_trace_ids(
    groups: Optional[Groups],
    max_traces: int = MAX_LINKED_TRACES,
    max_length: int = MAX_LENGTH,
    min_length: int = MIN_LENGTH,
) -> List[str]:
    """
    Select the trace IDs to embed in a single search link.

    Args:
        groups: Trace ID lists, one per path element, in provider order.
        max_traces: Count budget.
        max_length: Total URL length budget.
        min_length: Length of the URL before any trace ID is appended.

    Returns:
        List[str]: Distinct, non-empty trace IDs within both budgets.
    """
    cleaned = clean_groups(groups)
    total = sum(len(group) for group in cleaned)

    by_count = count_budget_limit(cleaned, max_traces)
    by_length = length_budget_limit(cleaned, max_length, min_length)
    limit = min(by_count, by_length)

    if limit < total:
        logger.debug(
            f"Truncating {total} trace IDs to {limit} "
            f"(count budget {by_count}, length budget {by_length}, {len(cleaned)} groups)"
        )

    selected: List[str] = []
    seen = set()
    for group in truncate_groups(cleaned, limit):
        for tid in group:
            if tid not in seen:
                seen.add(tid)
                selected.append(tid)
    return selected


def build_trace_link(
    vertex_key: str,
    groups: Optional[Groups],
    get_search_url: Callable[[Dict[str, Any]], str] = search_url.get_search_url,
    open_url: Optional[Callable[[str], Any]] = None,
    search_context: Optional[Mapping[str, Any]] = None,
    min_length: Optional[int] = None,
) -> Optional[str]:
    """
    Build the trace search link for a vertex and open it.

    Args:
        vertex_key: Key of the vertex the link is built for.
        groups: Trace ID lists of the vertex's path elements. ``None`` or
            empty means the vertex has none, and nothing happens.
        get_search_url: Turns the search query into a URL.
        open_url: Navigation side effect; defaults to opening a new browser tab.
        search_context: Extra search parameters carried alongside ``traceID``.
        min_length: Length reserved for the URL without trace IDs. Defaults
            to the URL ``get_search_url`` builds from ``search_context`` alone.

    Returns:
        Optional[str]: The opened URL, or None if there was nothing to link.
    """
    if not groups:
        logger.debug(f"No path elements for {vertex_key}, not opening a trace link")
        return None

    context = dict(search_context or {})
    context.pop("traceID", None)
    if min_length is None:
        min_length = len(get_search_url(context or None))

    trace_ids = select_trace_ids(groups, min_length=min_length)
    url = get_search_url({**context, "traceID": trace_ids})

    opener = open_url or webbrowser.open_new_tab
    opener(url)
    return url
