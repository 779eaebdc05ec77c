"""
tracelink Core Module.

Trace Links:
    - select_trace_ids: Fair, budgeted trace ID selection
    - build_trace_link: Selection plus URL construction and navigation

Hover:
    - HoverStateMachine: Debounced hovered flag of one vertex
    - ThreadingScheduler, ManualScheduler: Timer sources

Types & Settings:
    - PathElem, TracePath: Path element models
    - ViewModifier, Direction, CheckedStatus: Shared enums
    - Settings: Runtime settings from .tracelink/config.yaml
"""

from .exceptions import (
    InvalidPathElemsError,
    PathElemsNotFoundError,
    TraceLinkError,
    VertexNotFoundError,
)
from .hover import HoverPhase, HoverStateMachine, ManualScheduler, ThreadingScheduler
from .settings import Settings
from .trace_ids import build_trace_link, select_trace_ids
from .types import CheckedStatus, Direction, PathElem, TracePath, ViewModifier

__all__ = [
    "TraceLinkError",
    "PathElemsNotFoundError",
    "InvalidPathElemsError",
    "VertexNotFoundError",
    "HoverPhase",
    "HoverStateMachine",
    "ManualScheduler",
    "ThreadingScheduler",
    "Settings",
    "build_trace_link",
    "select_trace_ids",
    "CheckedStatus",
    "Direction",
    "PathElem",
    "TracePath",
    "ViewModifier",
]
