"""
Maze geometry: the cell/wall grid graph and the disjoint-set used to grow
spanning trees over it.
"""

from __future__ import annotations

from .grid import Cell, Direction, Grid, Orientation, Wall
from .union_find import DisjointSet

__all__ = [
    "Cell",
    "Direction",
    "DisjointSet",
    "Grid",
    "Orientation",
    "Wall",
]
