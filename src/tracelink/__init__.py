"""
Tracelink - Trace links for dependency graph vertices.

Tracelink builds the "View traces" link of a dependency graph vertex: it
merges the trace IDs of every path through the vertex, keeps a fair share
from each path under a count and URL-length budget, and opens a single
trace-search URL.

Key Components:
- core: Trace ID selection, hover state machine, data types
- node: Per-vertex action surface (menu actions, hover wiring)
- graph: Path element provider backed by JSON
- search: Trace search URL construction

Usage:
    from tracelink import build_trace_link

    url = build_trace_link("svc\\top", [["a", "b"], ["c"]], open_url=print)
"""

__version__ = "0.1.0"

from .core.hover import HoverStateMachine, ManualScheduler, ThreadingScheduler
from .core.trace_ids import build_trace_link, select_trace_ids
from .core.types import CheckedStatus, Direction, PathElem, TracePath, ViewModifier
from .node.content import NodeContent

__all__ = [
    "__version__",
    "build_trace_link",
    "select_trace_ids",
    "HoverStateMachine",
    "ManualScheduler",
    "ThreadingScheduler",
    "NodeContent",
    "PathElem",
    "TracePath",
    "CheckedStatus",
    "Direction",
    "ViewModifier",
]
