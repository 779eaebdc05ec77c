"""
Path element provider backed by a JSON document.

The graph view normally supplies path elements from its in-memory model.
For the CLI and for tests they are read from a file shaped like:

    {
      "vertices": {
        "<vertex key>": [
          {"memberOf": {"traceIDs": ["...", "..."]}, "service": "...", "operation": "..."},
          ...
        ]
      }
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from ..core.exceptions import InvalidPathElemsError, PathElemsNotFoundError
from ..core.types import PathElem

logger = logging.getLogger(__name__)


class PathElemDocument(BaseModel):
    vertices: Dict[str, List[PathElem]] = Field(default_factory=dict)


class PathElemIndex:
    """
    Lookup of path elements by vertex key.
    """

    def __init__(self, vertices: Optional[Mapping[str, List[PathElem]]] = None):
        self._vertices: Dict[str, List[PathElem]] = dict(vertices or {})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: str = "<dict>") -> "PathElemIndex":
        try:
            document = PathElemDocument.model_validate(data)
        except ValidationError as e:
            logger.error(f"Failed to validate path elements from {source}: {e}")
            raise InvalidPathElemsError(source, f"{e.error_count()} validation error(s)") from e
        return cls(document.vertices)

    def get_visible_path_elems(self, vertex_key: str) -> Optional[List[PathElem]]:
        """Path elements of a vertex, or None if the vertex is unknown."""
        return self._vertices.get(vertex_key)

    def keys(self) -> List[str]:
        return list(self._vertices)

    def has_vertex(self, vertex_key: str) -> bool:
        return vertex_key in self._vertices

    def find_keys(self, fragment: str) -> List[str]:
        """Vertex keys containing ``fragment``, case-insensitively."""
        needle = fragment.lower()
        return [key for key in self._vertices if needle in key.lower()]

    def trace_count(self, vertex_key: str) -> int:
        """Number of distinct, non-empty trace IDs through a vertex."""
        ids = set()
        for elem in self._vertices.get(vertex_key, []):
            ids.update(tid for tid in elem.trace_ids if tid)
        return len(ids)


def load_path_elems(path: Union[str, Path]) -> PathElemIndex:
    """
    Load a PathElemIndex from a JSON file.

    Raises:
        PathElemsNotFoundError: If the file does not exist.
        InvalidPathElemsError: If the file is not valid JSON or does not match
            the expected shape.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise PathElemsNotFoundError(file_path)

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse {file_path}: {e}")
        raise InvalidPathElemsError(file_path, str(e)) from e

    if not isinstance(data, dict):
        raise InvalidPathElemsError(file_path, "expected a JSON object")

    return PathElemIndex.from_dict(data, source=str(file_path))
