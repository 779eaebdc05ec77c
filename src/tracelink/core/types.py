"""
Core type definitions for tracelink.

Path elements arrive as JSON from the dependency graph model, so the models
accept the camelCase field names used there (``memberOf``, ``traceIDs``)
while exposing snake_case attributes.
"""

from enum import IntEnum, StrEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ViewModifier(StrEnum):
    """Visual modifiers a vertex can toggle on the shared graph view."""
    HOVERED = "hovered"
    FOCUSED = "focused"
    EMPHASIZED = "emphasized"
    PATH_HOVERED = "path_hovered"
    PATH_FOCUSED = "path_focused"


class Direction(IntEnum):
    """Traversal direction relative to the focal vertex."""
    UPSTREAM = -1
    DOWNSTREAM = 1


class CheckedStatus(StrEnum):
    """How much of a vertex's next generation is currently visible."""
    EMPTY = "empty"
    FULL = "full"
    PARTIAL = "partial"


class TracePath(BaseModel):
    """
    A path through the dependency graph and the traces that followed it.
    """
    trace_ids: List[str] = Field(default_factory=list, alias="traceIDs")
    focal_idx: Optional[int] = Field(default=None, alias="focalIdx")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PathElem(BaseModel):
    """
    One vertex's position on one path.

    Only ``member_of.trace_ids`` is consumed when building trace links; the
    remaining fields describe the vertex for listing and display.
    """
    member_of: TracePath = Field(alias="memberOf")
    service: Optional[str] = None
    operation: Optional[str] = None
    distance: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def trace_ids(self) -> List[str]:
        return self.member_of.trace_ids
