"""
Exception classes for perfect_maze with structured, actionable messages.

Every error carries the component that raised it, an optional suggested
action, an error code and a block of diagnostic values, so a failure deep in
generation or solving still reports enough context to reproduce it.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze errors with context and suggestions.

    Attributes:
        component: Name of the component that raised the error
        suggested_action: Hint for resolving the problem
        error_code: Stable machine-readable identifier
        diagnostic_data: Extra values describing the failure
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "perfect_maze"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class PathNotFoundError(MazeError):
    """
    Raised when the solver exhausts its path stack before reaching the goal.

    A generated maze is always a spanning tree, so this only happens when
    generation was bypassed or the two cells belong to different grids.
    """

    def __init__(
        self,
        start: tuple[int, int],
        end: tuple[int, int],
        visited_count: int,
        component: str | None = None,
    ):
        self.start = start
        self.end = end
        self.visited_count = visited_count

        super().__init__(
            message=f"Cannot find a way from {start} to {end}",
            component=component or "RandomizedPathSolver",
            suggested_action="Make sure the grid was generated and both cells belong to it",
            error_code="PATH_NOT_FOUND",
            diagnostic_data={
                "start": start,
                "end": end,
                "visited_cells": visited_count,
            },
        )


class GenerationError(MazeError):
    """Raised when a generated grid fails perfect-maze verification."""

    def __init__(self, algorithm: str, verification: dict[str, Any]):
        self.algorithm = algorithm
        self.verification = verification

        super().__init__(
            message=f"Generated maze is not perfect (algorithm '{algorithm}')",
            component="PerfectMazeGenerator",
            suggested_action="Generate on a freshly constructed grid with all walls closed",
            error_code="IMPERFECT_MAZE",
            diagnostic_data=verification,
        )
