"""Path element providers."""

from .path_elems import PathElemIndex, load_path_elems

__all__ = ["PathElemIndex", "load_path_elems"]
