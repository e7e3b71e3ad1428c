from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("perfect-maze")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import MazeAlgorithm, MazeConfig, coerce_config  # noqa: E402
from .generation import PerfectMazeGenerator, generate_maze, verify_perfect_maze  # noqa: E402
from .geometry import Cell, Direction, DisjointSet, Grid, Orientation, Wall  # noqa: E402
from .maze import Maze  # noqa: E402
from .solvers import PathResult, RandomizedPathSolver  # noqa: E402
from .utils import GenerationError, MazeError, PathNotFoundError, configure_logging, get_logger  # noqa: E402

__all__ = [
    "Cell",
    "Direction",
    "DisjointSet",
    "GenerationError",
    "Grid",
    "Maze",
    "MazeAlgorithm",
    "MazeConfig",
    "MazeError",
    "Orientation",
    "PathNotFoundError",
    "PathResult",
    "PerfectMazeGenerator",
    "RandomizedPathSolver",
    "Wall",
    "coerce_config",
    "configure_logging",
    "generate_maze",
    "get_logger",
    "verify_perfect_maze",
]
