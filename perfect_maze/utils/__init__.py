"""Shared utilities: exceptions and logging."""

from __future__ import annotations

from .exceptions import GenerationError, MazeError, PathNotFoundError
from .maze_logging import configure_logging, get_logger

__all__ = [
    "GenerationError",
    "MazeError",
    "PathNotFoundError",
    "configure_logging",
    "get_logger",
]
