"""
Perfect maze generation.

Examples
--------
>>> from perfect_maze.generation import PerfectMazeGenerator, verify_perfect_maze
>>> from perfect_maze.geometry import Grid
>>> grid = PerfectMazeGenerator(Grid(10, 10), "prim").generate(rng=7)
>>> verify_perfect_maze(grid)["is_perfect"]
True
"""

from __future__ import annotations

from .maze_generator import PerfectMazeGenerator, generate_maze, random_shuffle, verify_perfect_maze

__all__ = [
    "PerfectMazeGenerator",
    "generate_maze",
    "random_shuffle",
    "verify_perfect_maze",
]
