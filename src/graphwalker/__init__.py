"""
graphwalker: read-only dotted-path access into nested object graphs.

This package uses a src-layout. Import the package as `graphwalker`.
"""

from importlib.metadata import version

__version__ = version("graphwalker")

from .config import GRAPHWALKER_CONFIG, GraphWalkerConfig
from .errors import MISSING, GraphError, PathNotFoundError
from .query import P, PathRef, Resolution, parse_path, resolve_path, step
from .runtime import configure_logging, get_logger
from .walker import GraphWalker, walk

__all__ = [
    "__version__",
    "GRAPHWALKER_CONFIG",
    "GraphError",
    "GraphWalker",
    "GraphWalkerConfig",
    "MISSING",
    "P",
    "PathNotFoundError",
    "PathRef",
    "Resolution",
    "configure_logging",
    "get_logger",
    "parse_path",
    "resolve_path",
    "step",
    "walk",
]
