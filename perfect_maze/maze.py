"""
Maze: a generated grid together with a path solver.

Examples
--------
>>> from perfect_maze import Maze
>>> maze = Maze(10)                                   # 10x10, recursive backtracker
>>> maze = Maze({"rows": 10, "cols": 30, "algo": "prim"})
>>> path = maze.solve(maze.cell(0, 0), maze.cell(9, 29))
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from perfect_maze.config import MazeAlgorithm, MazeConfig, coerce_config
from perfect_maze.generation import PerfectMazeGenerator, verify_perfect_maze
from perfect_maze.geometry import Cell, Grid, Orientation, Wall
from perfect_maze.solvers import PathResult, RandomizedPathSolver
from perfect_maze.utils.exceptions import GenerationError
from perfect_maze.utils.maze_logging import get_logger
from perfect_maze.utils.rng import RandomLike, make_rng

logger = get_logger(__name__)


class Maze:
    """
    A perfect maze generated once at construction.

    The same random generator feeds generation and, unless overridden per
    call, every solve. Seeding it (``rng`` or ``config.seed``) makes the
    maze and its solutions reproducible.

    Args:
        config: MazeConfig, mapping of options, integer size or None
        rng: numpy Generator or seed; takes precedence over ``config.seed``
        verify: Check the perfect-maze invariant after generation
    """

    def __init__(
        self,
        config: MazeConfig | Mapping[str, Any] | int | None = None,
        *,
        rng: RandomLike = None,
        verify: bool = False,
    ):
        self.config = coerce_config(config)
        self.rng = make_rng(rng if rng is not None else self.config.seed)
        self.grid = Grid(self.config.rows, self.config.cols)
        self._generate(verify)

    @classmethod
    def from_size(cls, size: int, algo: MazeAlgorithm | str = MazeAlgorithm.RECURSIVE, **kwargs: Any) -> Maze:
        """Square maze of ``size`` x ``size`` cells."""
        return cls(MazeConfig(rows=size, cols=size, algo=algo), **kwargs)

    @classmethod
    def from_config(cls, config: MazeConfig | Mapping[str, Any], **kwargs: Any) -> Maze:
        return cls(coerce_config(config), **kwargs)

    def _generate(self, verify: bool) -> None:
        PerfectMazeGenerator(self.grid, self.config.algo).generate(self.rng)
        if verify:
            verification = self.verify()
            if not verification["is_perfect"]:
                raise GenerationError(self.config.algo.value, verification)

    def __iter__(self) -> Iterator[Cell]:
        return self.grid.iter_cells()

    def __len__(self) -> int:
        return self.grid.num_cells

    def __repr__(self) -> str:
        return f"Maze(rows={self.rows}, cols={self.cols}, algo={self.algorithm.value!r})"

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def algorithm(self) -> MazeAlgorithm:
        return self.config.algo

    @property
    def cells(self) -> list[list[Cell]]:
        return self.grid.cells

    @property
    def walls(self) -> list[Wall]:
        return self.grid.walls

    def cell(self, row: int, col: int) -> Cell:
        return self.grid.cell(row, col)

    def group_walls(self) -> dict[Orientation, list[Wall]]:
        """Walls split into VERTICAL ('|') and HORIZONTAL ('-'), construction order kept."""
        return self.grid.group_walls()

    def find_path(self, start: Cell, end: Cell, rng: RandomLike = None) -> PathResult:
        """Search for a path, reporting failure in the result instead of raising."""
        return RandomizedPathSolver(self.grid, self.rng if rng is None else rng).find_path(start, end)

    def solve(self, start: Cell, end: Cell, rng: RandomLike = None) -> list[Cell]:
        """
        Find a path between two cells of this maze.

        Args:
            start: First cell of the path
            end: Last cell of the path
            rng: Generator or seed for this search; defaults to the maze's own

        Returns:
            Cells from start to end inclusive

        Raises:
            PathNotFoundError: If the cells are not connected
        """
        return RandomizedPathSolver(self.grid, self.rng if rng is None else rng).solve(start, end)

    def verify(self) -> dict[str, Any]:
        """Perfect-maze diagnostics (see ``verify_perfect_maze``)."""
        return verify_perfect_maze(self.grid)

    def regenerate(self, rng: RandomLike = None) -> None:
        """Close every wall and carve a new maze with the same configuration."""
        if rng is not None:
            self.rng = make_rng(rng)
        logger.debug(f"Regenerating {self!r}")
        self.grid.close_all_walls()
        self._generate(verify=False)
