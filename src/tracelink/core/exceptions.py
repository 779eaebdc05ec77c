"""
Exception hierarchy for tracelink.

The link builder and hover machine never raise for missing data; these
errors are reserved for the edges of the system: loading path elements
from disk and resolving vertices named on the command line.
"""

from pathlib import Path
from typing import Union


class TraceLinkError(Exception):
    """Base class for all tracelink errors."""


class PathElemsNotFoundError(TraceLinkError):
    """Raised when a path elements file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Path elements file not found: {self.path}")


class InvalidPathElemsError(TraceLinkError):
    """Raised when a path elements file cannot be parsed or validated."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid path elements in {self.path}: {reason}")


class VertexNotFoundError(TraceLinkError):
    """Raised when no vertex key matches the requested name."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Vertex not found: {key}")
