"""
Pytest configuration and shared fixtures for the perfect_maze test suite.
"""

from collections import deque

import pytest

from perfect_maze import Grid, MazeAlgorithm, PerfectMazeGenerator

ALL_ALGORITHMS = [MazeAlgorithm.RECURSIVE, MazeAlgorithm.PRIM, MazeAlgorithm.KRUSKAL]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (large grids)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths and names."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


def reachable_from(cell):
    """Breadth-first set of cells reachable through open walls."""
    seen = {cell}
    queue = deque([cell])
    while queue:
        current = queue.popleft()
        for neighbor in current.reachable_neighbors():
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


@pytest.fixture(params=ALL_ALGORITHMS, ids=lambda a: a.value)
def algorithm(request):
    """Each generation algorithm in turn."""
    return request.param


@pytest.fixture
def closed_grid():
    """Freshly constructed 4x6 grid, every wall closed."""
    return Grid(4, 6)


@pytest.fixture
def generated_grid(algorithm):
    """8x11 grid generated with a fixed seed by each algorithm."""
    return PerfectMazeGenerator(Grid(8, 11), algorithm).generate(rng=1234)


@pytest.fixture
def reachable():
    """Breadth-first reachability helper."""
    return reachable_from
