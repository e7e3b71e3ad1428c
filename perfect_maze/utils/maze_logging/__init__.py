"""
Logging utilities for perfect_maze.

Usage:
    >>> from perfect_maze.utils.maze_logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
    >>> logger.debug("Carving passages...")
"""

from __future__ import annotations

from .logger import (
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    configure_quiet_logging,
    get_logger,
)

__all__ = [
    "MazeFormatter",
    "MazeLogger",
    "configure_development_logging",
    "configure_logging",
    "configure_quiet_logging",
    "get_logger",
]
