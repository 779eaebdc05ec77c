"""Per-vertex action surface of the dependency graph view."""

from .content import NodeContent

__all__ = ["NodeContent"]
