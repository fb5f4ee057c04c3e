from __future__ import annotations

from dataclasses import dataclass

from .paths import SEPARATOR


def _join(prefix: str, segment: str) -> str:
    if not prefix:
        return segment
    return f"{prefix}{SEPARATOR}{segment}"


@dataclass(frozen=True)
class PathRef:
    path: str = ""

    def __getattr__(self, segment: str) -> PathRef:
        if segment.startswith("_"):
            raise AttributeError(segment)
        return PathRef(path=_join(self.path, segment))

    def __getitem__(self, key: int | str) -> PathRef:
        if isinstance(key, bool):
            raise TypeError("Boolean keys are not supported in paths")
        if isinstance(key, int):
            if key < 0:
                raise ValueError("Negative indices are not supported in paths")
            return PathRef(path=_join(self.path, str(key)))
        if not isinstance(key, str):
            raise TypeError(f"Path keys must be str or int, got {type(key).__name__}")
        if not key:
            raise ValueError("String keys in paths cannot be empty")
        if SEPARATOR in key:
            raise ValueError(f"String keys in paths cannot contain {SEPARATOR!r}")
        return PathRef(path=_join(self.path, key))

    def __str__(self) -> str:
        return self.path


P = PathRef()


def as_path(path: str | PathRef) -> str:
    if isinstance(path, str):
        return path
    if isinstance(path, PathRef):
        return path.path
    raise TypeError(f"path must be str or PathRef, got {type(path).__name__}")


__all__ = ["P", "PathRef", "as_path"]
