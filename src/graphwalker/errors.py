from __future__ import annotations

from typing import Any


class _Missing:
    """Marker for a path that did not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class GraphError(Exception):
    """Base class for graphwalker errors."""


class PathNotFoundError(GraphError, LookupError):
    """Raised when a path does not resolve and no default was given."""

    def __init__(
        self,
        path: str,
        root: object,
        *,
        segment: str | None = None,
        depth: int | None = None,
    ) -> None:
        self.path = path
        self.root = root
        self.segment = segment
        self.depth = depth
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        root_desc = f"{type(self.root).__name__} at 0x{id(self.root):x}"
        if self.segment is None:
            return f"path {self.path!r} not found in {root_desc}"
        return (
            f"path {self.path!r} not found in {root_desc}: "
            f"segment {self.segment!r} (position {self.depth}) is missing"
        )

    def __reduce__(self):
        return (
            _rebuild_path_not_found,
            (self.path, self.root, self.segment, self.depth, str(self)),
        )


def _rebuild_path_not_found(
    path: str,
    root: object,
    segment: str | None,
    depth: int | None,
    message: str,
) -> PathNotFoundError:
    error = PathNotFoundError(path, root, segment=segment, depth=depth)
    error.args = (message,)
    return error


__all__ = ["MISSING", "GraphError", "PathNotFoundError"]
