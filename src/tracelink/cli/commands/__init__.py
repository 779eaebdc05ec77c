"""
CLI Commands Package.

Each command is implemented in its own module for maintainability.
"""

from . import limits
from . import link
from . import vertices

__all__ = [
    "limits",
    "link",
    "vertices",
]
