"""
Perfect Maze Generation

Randomized spanning-tree algorithms that open walls of a Grid until every
cell is reachable from every other through exactly one path.

All algorithms produce perfect mazes with two properties:
1. Fully Connected: a path exists between any two cells
2. No Loops: exactly rows * cols - 1 walls are open

Implemented Algorithms:
- Recursive Backtracking (DFS): long winding corridors, few branches
- Prim: grows from a random frontier, many short dead ends
- Kruskal: merges random regions with union-find, fairly uniform texture

Every algorithm draws from an explicit numpy Generator, so a seed fully
determines the maze.
"""

from __future__ import annotations

import time
from collections.abc import Mapping, MutableSequence
from typing import TYPE_CHECKING, Any, TypeVar

from scipy.sparse.csgraph import connected_components

from perfect_maze.config import MazeAlgorithm, MazeConfig, coerce_config
from perfect_maze.geometry import DisjointSet, Grid
from perfect_maze.utils.exceptions import GenerationError
from perfect_maze.utils.maze_logging import get_logger
from perfect_maze.utils.rng import RandomLike, choose, make_rng

if TYPE_CHECKING:
    import numpy as np

    from perfect_maze.geometry import Cell, Wall

logger = get_logger(__name__)

T = TypeVar("T")


def random_shuffle(items: MutableSequence[T], rng: np.random.Generator) -> MutableSequence[T]:
    """
    Fisher-Yates shuffle in place.

    For n from len(items) down to 2, swap position n - 1 with a uniformly
    random position in [0, n - 1].
    """
    for n in range(len(items), 1, -1):
        k = int(rng.integers(n))
        items[n - 1], items[k] = items[k], items[n - 1]
    return items


class PerfectMazeGenerator:
    """
    Perfect maze generator using classic randomized algorithms.

    Operates on a freshly constructed grid (all walls closed) and opens a
    spanning tree of its walls.

    Algorithms:
    - Recursive Backtracking: DFS with an explicit stack
    - Prim: random frontier of walls around the visited region
    - Kruskal: shuffled walls filtered by a union-find cycle test
    """

    def __init__(self, grid: Grid, algorithm: MazeAlgorithm | str = MazeAlgorithm.RECURSIVE):
        """
        Initialize maze generator.

        Args:
            grid: Grid whose walls will be opened
            algorithm: Algorithm to use for generation
        """
        self.grid = grid
        self.algorithm = MazeAlgorithm(algorithm)

    def generate(self, rng: RandomLike = None) -> Grid:
        """
        Generate a perfect maze on the grid.

        Args:
            rng: numpy Generator, integer seed, or None for fresh entropy

        Returns:
            The same grid, with a spanning tree of walls opened
        """
        rng = make_rng(rng)
        start_time = time.perf_counter()
        logger.debug(f"Generating {self.grid.rows}x{self.grid.cols} maze with {self.algorithm.value}")

        if self.algorithm == MazeAlgorithm.RECURSIVE:
            self._recursive_backtracking(rng)
        elif self.algorithm == MazeAlgorithm.PRIM:
            self._prim(rng)
        elif self.algorithm == MazeAlgorithm.KRUSKAL:
            self._kruskal(rng)
        else:
            raise ValueError(f"Unknown algorithm: {self.algorithm}")

        elapsed = time.perf_counter() - start_time
        logger.debug(
            f"{self.algorithm.value} opened {len(self.grid.open_walls())} of {len(self.grid.walls)} walls "
            f"in {elapsed:.4f}s"
        )
        return self.grid

    def _recursive_backtracking(self, rng: np.random.Generator) -> None:
        """
        Recursive Backtracking (Depth-First Search) algorithm.

        Algorithm:
        1. Start at random cell, mark as visited
        2. While the current cell has unvisited neighbors:
           - Choose one at random and open the wall to it
           - Push current on the stack, move to the neighbor
        3. Backtrack when stuck (pop stack); stop when the stack is empty

        The stack is explicit so large grids do not hit the recursion limit.
        """
        cell = self.grid.random_cell(rng)
        visited: set[Cell] = {cell}
        stack: list[Cell] = []

        while True:
            unvisited = [wall for _, wall in cell.walls() if wall.other(cell) not in visited]
            if unvisited:
                wall = choose(unvisited, rng)
                wall.open()
                stack.append(cell)
                cell = wall.other(cell)
                visited.add(cell)
            elif stack:
                cell = stack.pop()
            else:
                return

    def _prim(self, rng: np.random.Generator) -> None:
        """
        Randomized Prim's algorithm.

        The frontier holds walls touching the visited region. A wall drawn
        from it is opened only if it leads to an unvisited cell, whose walls
        then join the frontier. Walls between two visited cells are dropped.
        """
        cell = self.grid.random_cell(rng)
        visited: set[Cell] = {cell}
        frontier: list[Wall] = [wall for _, wall in cell.walls()]

        while frontier:
            # Swap a random wall to the end for O(1) removal
            k = int(rng.integers(len(frontier)))
            frontier[k], frontier[-1] = frontier[-1], frontier[k]
            wall = frontier.pop()

            if wall.cell1 in visited and wall.cell2 in visited:
                continue

            wall.open()
            unvisited = wall.cell2 if wall.cell1 in visited else wall.cell1
            visited.add(unvisited)
            frontier.extend(w for _, w in unvisited.walls())

    def _kruskal(self, rng: np.random.Generator) -> None:
        """
        Randomized Kruskal's algorithm.

        Walls are visited in shuffled order; each one is opened unless its
        cells are already connected. The grid's own wall list keeps its
        construction order.
        """
        walls = random_shuffle(list(self.grid.walls), rng)
        components: DisjointSet[Cell] = DisjointSet()

        for wall in walls:
            if not components.joined(wall.cell1, wall.cell2):
                wall.open()
                components.join(wall.cell1, wall.cell2)


def verify_perfect_maze(grid: Grid) -> dict[str, Any]:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: the open-wall graph has a single component
    2. Acyclicity: exactly (n - 1) open walls for n cells

    Args:
        grid: Maze grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - component_count: Number of connected regions
        - open_walls: Number of open walls
        - expected_open_walls: Open walls of a spanning tree
        - total_cells: Total number of cells
        - total_walls: Total number of walls
    """
    total_cells = grid.num_cells
    open_walls = len(grid.open_walls())
    component_count, _ = connected_components(grid.get_adjacency_matrix(), directed=False)
    component_count = int(component_count)

    is_connected = component_count == 1
    # A graph is a forest iff it has exactly n - c edges
    is_no_loops = open_walls == total_cells - component_count

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "component_count": component_count,
        "open_walls": open_walls,
        "expected_open_walls": total_cells - 1,
        "total_cells": total_cells,
        "total_walls": len(grid.walls),
    }


def generate_maze(
    config: MazeConfig | Mapping[str, Any] | int | None = None,
    rng: RandomLike = None,
) -> Grid:
    """
    High-level function to build, generate and verify a maze grid.

    Args:
        config: Maze configuration (see ``coerce_config``)
        rng: Generator or seed; defaults to the config's seed

    Returns:
        Generated grid

    Raises:
        GenerationError: If the result is not a perfect maze

    Example:
        >>> grid = generate_maze({"rows": 5, "cols": 8, "algo": "kruskal"}, rng=42)
        >>> len(grid.open_walls())
        39
    """
    config = coerce_config(config)
    grid = Grid(config.rows, config.cols)
    generator = PerfectMazeGenerator(grid, config.algo)
    generator.generate(rng if rng is not None else config.seed)

    verification = verify_perfect_maze(grid)
    if not verification["is_perfect"]:
        raise GenerationError(config.algo.value, verification)

    return grid
