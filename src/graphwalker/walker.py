"""Read-only path access over a nested object graph."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .config import GRAPHWALKER_CONFIG, GraphWalkerConfig
from .errors import MISSING, PathNotFoundError
from .query.dsl import PathRef, as_path
from .query.paths import parse_path, resolve_path, step
from .runtime.logging import get_logger

PathLike = str | PathRef

_NO_DEFAULT = object()

_DEFAULT_COLOR = {"graphwalker_action_color": "yellow"}
_MISSING_COLOR = {"graphwalker_action_color": "red"}


def _normalize_paths(args: tuple[Any, ...]) -> list[str]:
    """Collapse ``f("a", "b")`` and ``f(["a", "b"])`` into one list of paths."""

    if len(args) == 1 and not isinstance(args[0], (str, PathRef, Mapping)):
        candidates = args[0]
        if not isinstance(candidates, Iterable):
            raise TypeError(
                f"expected path strings or an iterable of them, got {type(candidates).__name__}"
            )
        return [as_path(p) for p in candidates]
    return [as_path(p) for p in args]


class GraphWalker:
    """Wraps a root value and answers path queries against it.

    The root is held by reference and never modified.
    """

    __slots__ = ("_obj", "_config")

    def __init__(self, obj: Any, *, config: GraphWalkerConfig | None = None) -> None:
        self._obj = obj
        self._config = config

    @property
    def obj(self) -> Any:
        return self._obj

    @property
    def config(self) -> GraphWalkerConfig:
        return self._config or GRAPHWALKER_CONFIG

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self._obj).__name__} at 0x{id(self._obj):x})"

    def resolve(self, path: PathLike, default: Any = _NO_DEFAULT) -> Any:
        """Return the value at ``path``.

        ``default`` is returned only when the path is absent; a present
        ``None`` is returned as is. Without a default an absent path raises
        ``PathNotFoundError``.
        """

        expr = as_path(path)
        outcome = resolve_path(self._obj, expr, config=self.config)
        if outcome.found:
            return outcome.value

        if default is not _NO_DEFAULT:
            get_logger().debug(
                "resolve: %r missing, using default", expr, extra=_DEFAULT_COLOR
            )
            return default

        segments = parse_path(expr, config=self.config)
        segment = segments[outcome.depth] if outcome.depth < len(segments) else None
        get_logger().debug(
            "resolve: %r missing at segment %r", expr, segment, extra=_MISSING_COLOR
        )
        raise PathNotFoundError(expr, self._obj, segment=segment, depth=outcome.depth)

    tap = resolve

    def probe(self, path: PathLike) -> bool:
        return resolve_path(self._obj, as_path(path), config=self.config).found

    def collect(self, *paths: Any) -> list[Any]:
        """Resolve several paths at once, preserving input order.

        Accepts paths as separate arguments, a single iterable of paths, or a
        single mapping of path to default. Absent paths yield ``MISSING``
        (or the mapped default) instead of raising.
        """

        if len(paths) == 1 and isinstance(paths[0], Mapping):
            return [
                self.resolve(path, default) for path, default in paths[0].items()
            ]

        results: list[Any] = []
        for expr in _normalize_paths(paths):
            outcome = resolve_path(self._obj, expr, config=self.config)
            if not outcome.found:
                get_logger().debug("collect: %r missing", expr, extra=_MISSING_COLOR)
            results.append(outcome.value if outcome.found else MISSING)
        return results

    def _has_property(self, name: str) -> bool:
        return step(self._obj, name, config=self.config).found

    def has_all_properties(self, *names: Any) -> bool:
        """True if every name is a key directly on the root (names are not split on ``.``)."""

        return all(self._has_property(name) for name in _normalize_paths(names))

    def has_any_properties(self, *names: Any) -> bool:
        return any(self._has_property(name) for name in _normalize_paths(names))

    def has_all_graphs(self, *paths: Any) -> bool:
        return all(self.probe(path) for path in _normalize_paths(paths))

    def has_any_graphs(self, *paths: Any) -> bool:
        return any(self.probe(path) for path in _normalize_paths(paths))


def walk(obj: Any, *, config: GraphWalkerConfig | None = None) -> GraphWalker:
    return GraphWalker(obj, config=config)


__all__ = ["GraphWalker", "PathLike", "walk"]
