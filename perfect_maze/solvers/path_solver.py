"""
Randomized depth-first path solver.

Walks from a start cell through open walls only, choosing uniformly among
unvisited reachable neighbors and backtracking at dead ends. The result is a
simple path (no repeated cells), not necessarily the shortest one; in a
perfect maze the two coincide since the path between two cells is unique.
The solver only reads wall state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from perfect_maze.utils.exceptions import PathNotFoundError
from perfect_maze.utils.maze_logging import get_logger
from perfect_maze.utils.rng import RandomLike, choose, make_rng

if TYPE_CHECKING:
    from perfect_maze.geometry import Cell, Grid

logger = get_logger(__name__)


@dataclass
class PathResult:
    """
    Outcome of a path search.

    Attributes:
        found: Whether the end cell was reached
        path: Cells from start to end inclusive; empty when not found
        visited_count: Number of distinct cells explored
        backtracks: Number of dead-end retreats taken
    """

    found: bool
    path: list[Cell] = field(default_factory=list)
    visited_count: int = 0
    backtracks: int = 0

    def __len__(self) -> int:
        return len(self.path)

    def __bool__(self) -> bool:
        return self.found

    @property
    def positions(self) -> list[tuple[int, int]]:
        """(row, col) of each cell on the path."""
        return [cell.position for cell in self.path]


class RandomizedPathSolver:
    """
    Depth-first search with random neighbor order and backtracking.

    Args:
        grid: Grid the cells belong to
        rng: numpy Generator, integer seed, or None for fresh entropy
    """

    def __init__(self, grid: Grid, rng: RandomLike = None):
        self.grid = grid
        self.rng = make_rng(rng)

    def find_path(self, start: Cell, end: Cell) -> PathResult:
        """
        Search for a path without raising.

        Returns:
            PathResult with ``found`` False if the search ran out of cells
        """
        path: list[Cell] = [start]
        visited: set[Cell] = {start}
        current = start
        backtracks = 0

        while current is not end:
            candidates = [n for n in self.grid.reachable_neighbors(current) if n not in visited]
            if candidates:
                current = choose(candidates, self.rng)
                visited.add(current)
                path.append(current)
                continue

            path.pop()
            backtracks += 1
            if not path:
                return PathResult(found=False, visited_count=len(visited), backtracks=backtracks)
            current = path[-1]

        logger.debug(
            f"Path {start.position} -> {end.position}: {len(path)} cells, "
            f"{len(visited)} visited, {backtracks} backtracks"
        )
        return PathResult(found=True, path=path, visited_count=len(visited), backtracks=backtracks)

    def solve(self, start: Cell, end: Cell) -> list[Cell]:
        """
        Find a path from ``start`` to ``end``.

        Returns:
            Cells from start to end inclusive, each consecutive pair joined
            by an open wall

        Raises:
            PathNotFoundError: If ``end`` cannot be reached from ``start``
        """
        result = self.find_path(start, end)
        if not result.found:
            logger.warning(f"No path from {start.position} to {end.position} after visiting {result.visited_count} cells")
            raise PathNotFoundError(start.position, end.position, result.visited_count)
        return result.path
