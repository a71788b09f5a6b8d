"""Pytest configuration and fixtures for latcolor tests."""

import pytest

from latcolor import build_lattice_graph

# Shapes covering single vertices, paths, squares and rectangles
LATTICE_SHAPES = [
    (1, 1),
    (1, 2),
    (2, 1),
    (1, 7),
    (7, 1),
    (2, 2),
    (3, 3),
    (4, 6),
    (6, 4),
    (5, 9),
    (17, 30),
]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "graph: lattice graph construction")
    config.addinivalue_line("markers", "coloring: greedy BFS coloring tests")
    config.addinivalue_line("markers", "export: VTK export tests")
    config.addinivalue_line("markers", "cli: command-line interface tests")


@pytest.fixture(params=LATTICE_SHAPES, ids=lambda s: f"{s[0]}x{s[1]}")
def lattice(request):
    """Lattice graph for each shape in ``LATTICE_SHAPES``."""
    return build_lattice_graph(*request.param)
