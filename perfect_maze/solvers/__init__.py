"""Path solvers over generated mazes."""

from __future__ import annotations

from .path_solver import PathResult, RandomizedPathSolver

__all__ = [
    "PathResult",
    "RandomizedPathSolver",
]
