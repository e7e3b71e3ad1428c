"""
Grid and wall model for rectangular mazes.

A Grid owns rows x cols cells and one Wall for every pair of horizontally or
vertically adjacent cells. Each wall is registered in the direction slots of
both of its cells, so it can be reached from either side. Walls start closed;
generation algorithms open a subset of them, after which the open walls form
a spanning tree over the cells (a perfect maze).

Topology never changes after construction. Only the ``closed`` flag of the
walls is mutated, and only while a maze is being generated.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np
from scipy import sparse

if TYPE_CHECKING:
    from numpy.random import Generator


class Direction(Enum):
    """Direction from a cell towards one of its four possible neighbors."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def offset(self) -> tuple[int, int]:
        """(row, col) step taken when moving in this direction."""
        return _OFFSET[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSET = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Orientation(str, Enum):
    """Drawing orientation of a wall segment."""

    VERTICAL = "|"  # cells share a row
    HORIZONTAL = "-"  # cells share a column


@dataclass(eq=False)
class Cell:
    """
    A cell (room) of the maze.

    Cells compare and hash by identity. Each of the four direction slots holds
    the wall bordering the cell on that side, or None on the grid edge.

    Attributes:
        row: Row index in grid
        col: Column index in grid
        up: Wall towards row - 1
        down: Wall towards row + 1
        left: Wall towards col - 1
        right: Wall towards col + 1
    """

    row: int
    col: int
    up: Wall | None = field(default=None, repr=False)
    down: Wall | None = field(default=None, repr=False)
    left: Wall | None = field(default=None, repr=False)
    right: Wall | None = field(default=None, repr=False)

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def wall(self, direction: Direction) -> Wall | None:
        """Wall on the given side, or None if the cell is on that grid edge."""
        return getattr(self, direction.value)

    def walls(self) -> Iterator[tuple[Direction, Wall]]:
        """Yield (direction, wall) for every existing side, in Direction order."""
        for direction in Direction:
            wall = getattr(self, direction.value)
            if wall is not None:
                yield direction, wall

    def neighbors(self) -> list[Cell]:
        """All adjacent cells, whether or not the wall between is open."""
        return [wall.other(self) for _, wall in self.walls()]

    def open_neighbors(self) -> dict[Direction, Cell]:
        """Map each direction with an open wall to the cell behind it."""
        return {direction: wall.other(self) for direction, wall in self.walls() if not wall.closed}

    def reachable_neighbors(self) -> list[Cell]:
        """Cells that can be visited from this one through its open walls."""
        return [wall.other(self) for _, wall in self.walls() if not wall.closed]


def _precedes(a: Cell, b: Cell) -> bool:
    """Row-major ordering of cells."""
    return a.row < b.row or (a.row == b.row and a.col < b.col)


@dataclass(eq=False)
class Wall:
    """
    A wall (door) between two adjacent cells.

    ``cell1`` always precedes ``cell2`` in row-major order, whatever order the
    cells are given in.
    """

    cell1: Cell
    cell2: Cell
    closed: bool = True

    def __post_init__(self):
        if abs(self.cell1.row - self.cell2.row) + abs(self.cell1.col - self.cell2.col) != 1:
            raise ValueError(f"Cells {self.cell1.position} and {self.cell2.position} are not adjacent")
        if not _precedes(self.cell1, self.cell2):
            self.cell1, self.cell2 = self.cell2, self.cell1

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"Wall({self.cell1.position} {self.orientation.value} {self.cell2.position}, {state})"

    @property
    def orientation(self) -> Orientation:
        """VERTICAL ('|') between cells of the same row, HORIZONTAL ('-') otherwise."""
        return Orientation.VERTICAL if self.cell1.row == self.cell2.row else Orientation.HORIZONTAL

    @property
    def is_open(self) -> bool:
        return not self.closed

    def open(self) -> None:
        self.closed = False

    def other(self, cell: Cell) -> Cell:
        """The endpoint that is not ``cell``."""
        return self.cell2 if cell is self.cell1 else self.cell1


class Grid:
    """
    Rectangular grid of cells connected by walls.

    Cells are stored row-major in ``cells[row][col]``. Walls are kept in
    construction order: for each cell in row-major order, its up wall (if
    any) followed by its left wall (if any).
    """

    def __init__(self, rows: int, cols: int):
        """
        Initialize grid with every wall closed.

        Args:
            rows: Number of rows (>= 1)
            cols: Number of columns (>= 1)
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self.cells: list[list[Cell]] = [[Cell(r, c) for c in range(cols)] for r in range(rows)]
        self.walls: list[Wall] = []
        self._initialize_walls()

    def _initialize_walls(self):
        for r in range(self.rows):
            for c in range(self.cols):
                cell = self.cells[r][c]
                if r >= 1:
                    above = self.cells[r - 1][c]
                    wall = Wall(cell, above)
                    self.walls.append(wall)
                    cell.up = wall
                    above.down = wall
                if c >= 1:
                    before = self.cells[r][c - 1]
                    wall = Wall(cell, before)
                    self.walls.append(wall)
                    cell.left = wall
                    before.right = wall

    def __iter__(self) -> Iterator[Cell]:
        return self.iter_cells()

    def __len__(self) -> int:
        return self.num_cells

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"

    @property
    def num_cells(self) -> int:
        return self.rows * self.cols

    def iter_cells(self) -> Iterator[Cell]:
        """Lazily yield every cell in row-major order. Each call starts over."""
        for row in self.cells:
            yield from row

    def all_cells(self) -> list[Cell]:
        return list(self.iter_cells())

    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If (row, col) lies outside the grid
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self.cells[row][col]

    def random_cell(self, rng: Generator) -> Cell:
        """Uniformly random cell."""
        return self.cells[int(rng.integers(self.rows))][int(rng.integers(self.cols))]

    def neighbors(self, cell: Cell) -> list[Cell]:
        """All adjacent cells, regardless of wall state."""
        return cell.neighbors()

    def reachable_neighbors(self, cell: Cell) -> list[Cell]:
        """Adjacent cells connected to ``cell`` through open walls."""
        return cell.reachable_neighbors()

    def wall_between(self, a: Cell, b: Cell) -> Wall | None:
        """The wall shared by two cells, or None if they are not adjacent."""
        for _, wall in a.walls():
            if wall.other(a) is b:
                return wall
        return None

    def open_walls(self) -> list[Wall]:
        return [wall for wall in self.walls if not wall.closed]

    def group_walls(self) -> dict[Orientation, list[Wall]]:
        """
        Split walls by orientation.

        Returns:
            Mapping with both orientations as keys; each list keeps the
            construction order of its walls
        """
        groups: dict[Orientation, list[Wall]] = {Orientation.VERTICAL: [], Orientation.HORIZONTAL: []}
        for wall in self.walls:
            groups[wall.orientation].append(wall)
        return groups

    def close_all_walls(self) -> None:
        """Restore the freshly constructed state before regenerating."""
        for wall in self.walls:
            wall.closed = True

    def cell_index(self, cell: Cell) -> int:
        """Row-major index of a cell: row * cols + col."""
        return cell.row * self.cols + cell.col

    def get_adjacency_matrix(self) -> sparse.csr_matrix:
        """
        Get adjacency matrix of the open-wall graph.

        Returns:
            Symmetric sparse matrix A of shape (N, N) with A[i, j] = 1 when an
            open wall joins cells i and j (row-major indices)
        """
        n_cells = self.num_cells
        opened = self.open_walls()
        rows = np.empty(2 * len(opened), dtype=np.int64)
        cols = np.empty(2 * len(opened), dtype=np.int64)
        for k, wall in enumerate(opened):
            i, j = self.cell_index(wall.cell1), self.cell_index(wall.cell2)
            rows[2 * k], cols[2 * k] = i, j
            rows[2 * k + 1], cols[2 * k + 1] = j, i
        data = np.ones(len(rows), dtype=np.int8)
        return sparse.csr_matrix((data, (rows, cols)), shape=(n_cells, n_cells))
