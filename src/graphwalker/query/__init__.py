from .dsl import P, PathRef, as_path
from .paths import (
    MISSING,
    Resolution,
    clear_path_cache,
    get_path,
    parse_path,
    resolve_path,
    step,
)

__all__ = [
    "MISSING",
    "P",
    "PathRef",
    "Resolution",
    "as_path",
    "clear_path_cache",
    "get_path",
    "parse_path",
    "resolve_path",
    "step",
]
