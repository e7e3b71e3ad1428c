"""
Configuration for maze construction.

A maze is described by its size and the generation algorithm. Besides the
canonical ``MazeConfig(rows=..., cols=..., algo=...)`` form, a bare integer
is accepted as shorthand for a square maze of that size.

Falsy sizes fall back to defaults: ``rows`` of 0 or None becomes 20 and
``cols`` of 0 or None becomes ``rows``. Negative sizes are rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from perfect_maze.utils.maze_logging import get_logger

logger = get_logger(__name__)

DEFAULT_SIZE = 20


class MazeAlgorithm(str, Enum):
    """Available perfect maze generation algorithms."""

    RECURSIVE = "recursive"
    PRIM = "prim"
    KRUSKAL = "kruskal"


class MazeConfig(BaseModel):
    """
    Validated maze configuration.

    Attributes:
        rows: Number of rows
        cols: Number of columns (defaults to ``rows``)
        algo: Generation algorithm
        seed: Seed for the random generator, None for fresh entropy
    """

    rows: int = Field(DEFAULT_SIZE, ge=1, description="Number of rows")
    cols: int = Field(DEFAULT_SIZE, ge=1, description="Number of columns")
    algo: MazeAlgorithm = Field(MazeAlgorithm.RECURSIVE, description="Generation algorithm")
    seed: int | None = Field(None, ge=0, description="Random seed for reproducible mazes")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def resolve_defaults(cls, data: Any) -> Any:
        """Expand the integer shorthand and replace falsy sizes with defaults."""
        if isinstance(data, int) and not isinstance(data, bool):
            data = {"rows": data}
        if not isinstance(data, Mapping):
            return data

        data = dict(data)
        if not data.get("rows"):
            if "rows" in data:
                logger.debug(f"rows={data['rows']!r} falls back to {DEFAULT_SIZE}")
            data["rows"] = DEFAULT_SIZE
        if not data.get("cols"):
            data["cols"] = data["rows"]
        if not data.get("algo"):
            data["algo"] = MazeAlgorithm.RECURSIVE
        return data

    @field_validator("algo", mode="before")
    @classmethod
    def normalize_algorithm_name(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, MazeAlgorithm):
            return v.strip().lower()
        return v

    @classmethod
    def from_size(cls, size: int, **kwargs: Any) -> MazeConfig:
        """Square maze shorthand: ``from_size(10)`` is a 10x10 maze."""
        return cls(rows=size, **kwargs)

    @property
    def num_cells(self) -> int:
        return self.rows * self.cols

    @property
    def num_walls(self) -> int:
        """Walls in a grid of this size, open or closed."""
        return self.rows * (self.cols - 1) + self.cols * (self.rows - 1)


def coerce_config(config: MazeConfig | Mapping[str, Any] | int | None = None) -> MazeConfig:
    """
    Build a MazeConfig from any accepted form.

    Args:
        config: An existing config, a mapping of options, an integer size or
            None for all defaults

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: For negative sizes, unknown algorithms or
            unknown options
    """
    if isinstance(config, MazeConfig):
        return config
    if config is None:
        return MazeConfig()
    return MazeConfig.model_validate(config)
