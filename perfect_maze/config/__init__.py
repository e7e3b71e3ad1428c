"""Maze configuration."""

from __future__ import annotations

from .maze_config import DEFAULT_SIZE, MazeAlgorithm, MazeConfig, coerce_config

__all__ = [
    "DEFAULT_SIZE",
    "MazeAlgorithm",
    "MazeConfig",
    "coerce_config",
]
