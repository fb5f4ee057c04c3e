"""Path parsing and per-segment resolution over nested containers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..config import GRAPHWALKER_CONFIG, GraphWalkerConfig
from ..errors import MISSING

SEPARATOR = "."

_PATH_CACHE: dict[str, tuple[str, ...]] = {}


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a segment or a whole path.

    ``found`` is authoritative: a found value may itself be ``None``.
    ``depth`` is the number of segments consumed before the walk stopped.
    """

    found: bool
    value: Any = MISSING
    depth: int = 0


_NOT_FOUND = Resolution(found=False)


def parse_path(path: str, *, config: GraphWalkerConfig | None = None) -> tuple[str, ...]:
    """Split ``path`` on ``.`` into segment tokens.

    The empty path has no segments and addresses the root itself.
    """

    if not path:
        return ()

    cached = _PATH_CACHE.get(path)
    if cached is not None:
        return cached

    segments = tuple(path.split(SEPARATOR))
    cache_size = (config or GRAPHWALKER_CONFIG).path_cache_size
    if cache_size:
        if len(_PATH_CACHE) >= cache_size:
            _PATH_CACHE.clear()
        _PATH_CACHE[path] = segments
    return segments


def clear_path_cache() -> None:
    _PATH_CACHE.clear()


def parse_index(segment: str) -> int | None:
    """Return ``segment`` as a list index if it is a canonical non-negative integer."""

    if not segment or not segment.isascii() or not segment.isdigit():
        return None
    if len(segment) > 1 and segment[0] == "0":
        return None
    return int(segment)


def is_positional(value: object) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


def step(
    current: Any,
    segment: str,
    *,
    config: GraphWalkerConfig | None = None,
) -> Resolution:
    """Advance one segment into ``current``.

    Never raises for absence; an unsupported container shape is simply
    not found.
    """

    if current is MISSING:
        return _NOT_FOUND

    settings = config or GRAPHWALKER_CONFIG

    if isinstance(current, Mapping):
        if segment in current:
            return Resolution(found=True, value=current[segment])
        if settings.coerce_int_keys:
            index = parse_index(segment)
            if index is not None and index in current:
                return Resolution(found=True, value=current[index])
        return _NOT_FOUND

    if is_positional(current):
        index = parse_index(segment)
        if index is None or index >= len(current):
            return _NOT_FOUND
        return Resolution(found=True, value=current[index])

    if settings.allow_attributes and segment and not segment.startswith("_"):
        try:
            value = getattr(current, segment, MISSING)
        except Exception:
            return _NOT_FOUND
        if value is not MISSING:
            return Resolution(found=True, value=value)

    return _NOT_FOUND


def resolve_path(
    root: Any,
    path: str,
    *,
    config: GraphWalkerConfig | None = None,
) -> Resolution:
    """Resolve ``path`` against ``root`` segment by segment.

    Stops at the first missing segment; the returned ``depth`` is the
    position of that segment, or the segment count when found.
    """

    current = root
    segments = parse_path(path, config=config)
    for depth, segment in enumerate(segments):
        outcome = step(current, segment, config=config)
        if not outcome.found:
            return Resolution(found=False, depth=depth)
        current = outcome.value
    return Resolution(found=True, value=current, depth=len(segments))


def get_path(root: Any, path: str) -> Any:
    """Return the value at ``path`` or ``MISSING``."""

    return resolve_path(root, path).value


__all__ = [
    "MISSING",
    "SEPARATOR",
    "Resolution",
    "clear_path_cache",
    "get_path",
    "is_positional",
    "parse_index",
    "parse_path",
    "resolve_path",
    "step",
]
