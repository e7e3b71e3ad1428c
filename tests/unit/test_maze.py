"""
Unit tests for the Maze facade: construction forms, iteration, wall
grouping and solving.
"""

import numpy as np
import pytest

from perfect_maze import Maze, MazeAlgorithm, MazeConfig, Orientation, PathNotFoundError


class TestConstruction:
    """Test the accepted construction forms."""

    def test_default_construction(self):
        maze = Maze()

        assert maze.rows == 20
        assert maze.cols == 20
        assert maze.algorithm is MazeAlgorithm.RECURSIVE
        assert len(maze) == 400
        assert maze.verify()["is_perfect"]

    def test_integer_shorthand(self):
        maze = Maze(10, rng=0)

        assert (maze.rows, maze.cols) == (10, 10)

    def test_mapping_config(self):
        maze = Maze({"rows": 10, "cols": 30, "algo": "prim"}, rng=0)

        assert (maze.rows, maze.cols) == (10, 30)
        assert maze.algorithm is MazeAlgorithm.PRIM
        assert len(maze.walls) == 10 * 29 + 30 * 9

    def test_from_size(self):
        maze = Maze.from_size(7, algo="kruskal", rng=0)

        assert (maze.rows, maze.cols) == (7, 7)
        assert maze.algorithm is MazeAlgorithm.KRUSKAL

    def test_from_config(self):
        config = MazeConfig(rows=4, cols=9, algo=MazeAlgorithm.PRIM, seed=3)
        maze = Maze.from_config(config)

        assert maze.config is config

    def test_verified_construction(self, algorithm):
        maze = Maze({"rows": 9, "cols": 4, "algo": algorithm}, rng=21, verify=True)

        assert len([w for w in maze.walls if w.is_open]) == 35

    def test_invalid_algorithm(self):
        with pytest.raises(ValueError):
            Maze({"algo": "wilsons"})

    def test_repr(self):
        assert repr(Maze(3, rng=0)) == "Maze(rows=3, cols=3, algo='recursive')"


class TestReproducibility:
    """Test seeding through rng and config.seed."""

    def test_seed_reproduces_maze_and_path(self, algorithm):
        config = {"rows": 8, "cols": 8, "algo": algorithm, "seed": 17}
        maze1, maze2 = Maze(config), Maze(config)

        assert [w.closed for w in maze1.walls] == [w.closed for w in maze2.walls]
        path1 = maze1.solve(maze1.cell(0, 0), maze1.cell(7, 7))
        path2 = maze2.solve(maze2.cell(0, 0), maze2.cell(7, 7))
        assert [c.position for c in path1] == [c.position for c in path2]

    def test_rng_overrides_config_seed(self):
        maze1 = Maze({"rows": 10, "seed": 1}, rng=2)
        maze2 = Maze({"rows": 10, "seed": 2})

        assert [w.closed for w in maze1.walls] == [w.closed for w in maze2.walls]

    def test_shared_generator(self):
        rng = np.random.default_rng(5)
        maze = Maze(6, rng=rng)

        assert maze.rng is rng


class TestIteration:
    """Test iteration over the maze's cells."""

    def test_row_major_and_restartable(self):
        maze = Maze({"rows": 3, "cols": 5}, rng=0)
        positions = [c.position for c in maze]

        assert positions == [(r, c) for r in range(3) for c in range(5)]
        assert [c.position for c in maze] == positions

    def test_cells_are_grid_cells(self):
        maze = Maze(4, rng=0)

        assert maze.cell(2, 3) is maze.cells[2][3]
        assert all(a is b for a, b in zip(maze, maze.grid))


class TestGroupWalls:
    """Test wall grouping through the facade."""

    def test_group_walls(self):
        maze = Maze({"rows": 4, "cols": 6}, rng=0)
        groups = maze.group_walls()

        assert set(groups) == {Orientation.VERTICAL, Orientation.HORIZONTAL}
        assert len(groups[Orientation.VERTICAL]) == 4 * 5
        assert len(groups[Orientation.HORIZONTAL]) == 6 * 3
        assert all(w.orientation is Orientation.VERTICAL for w in groups[Orientation.VERTICAL])


class TestSolve:
    """Test solving through the facade."""

    def test_solve_corner_to_corner(self, algorithm):
        maze = Maze({"rows": 10, "cols": 30, "algo": algorithm}, rng=3)
        start, end = maze.cell(0, 0), maze.cell(9, 29)
        path = maze.solve(start, end)

        assert path[0] is start
        assert path[-1] is end
        for a, b in zip(path, path[1:]):
            assert b in a.reachable_neighbors()

    def test_solve_same_cell(self):
        maze = Maze(1)
        only = maze.cell(0, 0)

        assert maze.solve(only, only) == [only]
        assert maze.walls == []

    def test_per_call_rng(self):
        maze = Maze(5, rng=0)

        assert maze.solve(maze.cell(0, 0), maze.cell(4, 4), rng=1)[-1] is maze.cell(4, 4)

    def test_find_path(self):
        maze = Maze(5, rng=0)
        result = maze.find_path(maze.cell(0, 0), maze.cell(4, 0))

        assert result.found
        assert result.positions[-1] == (4, 0)

    def test_regenerated_maze_is_perfect(self):
        maze = Maze({"rows": 6, "cols": 6, "algo": "prim"}, rng=4)
        before = [w.closed for w in maze.walls]

        maze.regenerate(rng=5)

        assert maze.verify()["is_perfect"]
        assert [w.closed for w in maze.walls] != before

    def test_broken_maze_raises(self):
        maze = Maze(3, rng=0)
        maze.grid.close_all_walls()

        with pytest.raises(PathNotFoundError):
            maze.solve(maze.cell(0, 0), maze.cell(2, 2))
