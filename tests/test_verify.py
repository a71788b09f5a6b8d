"""Tests for the verification utilities."""

import numpy as np
import pytest

from latcolor import (
    ColoringError,
    GraphStructureError,
    LatticeColoring,
    LatticeGraph,
    build_lattice_graph,
    check_coloring,
    check_graph,
    color_lattice,
)

# Graph checks


def test_check_graph_passes():
    """check_graph returns silently on lattice graphs."""
    check_graph(build_lattice_graph(4, 5))


def test_asymmetric_graph_raises():
    """An edge without its reverse is rejected."""
    graph = LatticeGraph(neighbours=[1], offsets=[0, 1, 1], shape=(1, 2))

    with pytest.raises(GraphStructureError, match="no reverse edge"):
        check_graph(graph)


def test_self_loop_raises():
    """A vertex listed as its own neighbor is rejected."""
    graph = LatticeGraph(neighbours=[0], offsets=[0, 1], shape=(1, 1))

    with pytest.raises(GraphStructureError, match="own neighbour"):
        check_graph(graph)


def test_duplicate_neighbour_raises():
    """Repeated entries in a neighbor list are rejected."""
    graph = LatticeGraph(neighbours=[1, 1, 0, 0], offsets=[0, 2, 4], shape=(1, 2))

    with pytest.raises(GraphStructureError, match="duplicate"):
        check_graph(graph)


def test_decreasing_offsets_raise():
    """Offsets must not decrease."""
    graph = LatticeGraph(neighbours=[1, 0], offsets=[0, 2, 1, 2], shape=(1, 3))

    with pytest.raises(GraphStructureError, match="non-decreasing"):
        check_graph(graph)


def test_out_of_range_neighbour_raises():
    """Neighbor indices must address existing vertices."""
    graph = LatticeGraph(neighbours=[5, 0], offsets=[0, 1, 2], shape=(1, 2))

    with pytest.raises(GraphStructureError, match="must lie in"):
        check_graph(graph)


def test_graph_structure_error_is_value_error():
    """GraphStructureError can be caught as ValueError."""
    graph = LatticeGraph(neighbours=[0], offsets=[0, 1], shape=(1, 1))

    with pytest.raises(ValueError):
        check_graph(graph)


# Coloring checks


@pytest.mark.coloring
def test_check_coloring_passes():
    """check_coloring returns silently on BFS colorings."""
    check_coloring(color_lattice(6, 9))


@pytest.mark.coloring
def test_monochromatic_edge_raises():
    """Adjacent vertices with one color are reported."""
    graph = build_lattice_graph(1, 2)
    coloring = LatticeColoring(graph, colors=np.array([0, 0]), num_colors=1)

    with pytest.raises(ColoringError, match="share color 0"):
        check_coloring(coloring)


@pytest.mark.coloring
def test_unassigned_vertex_raises():
    """Vertices left at the sentinel are reported."""
    graph = build_lattice_graph(1, 3)
    coloring = LatticeColoring(graph, colors=np.array([0, 1, -1]), num_colors=2)

    with pytest.raises(ColoringError, match="uncolored, starting with vertex 2"):
        check_coloring(coloring)


@pytest.mark.coloring
def test_color_id_gap_raises():
    """Allocated ids must all be used, starting at 0."""
    graph = build_lattice_graph(1, 2)
    coloring = LatticeColoring(graph, colors=np.array([0, 2]), num_colors=3)

    with pytest.raises(ColoringError, match="not exactly"):
        check_coloring(coloring)


@pytest.mark.coloring
def test_wrong_length_raises():
    """One color per vertex is required."""
    graph = build_lattice_graph(2, 2)
    coloring = LatticeColoring(graph, colors=np.array([0, 1]), num_colors=2)

    with pytest.raises(ColoringError, match="4 vertices"):
        check_coloring(coloring)


@pytest.mark.coloring
def test_coloring_error_is_assertion_error():
    """ColoringError integrates with plain assert-based test suites."""
    graph = build_lattice_graph(1, 2)
    coloring = LatticeColoring(graph, colors=np.array([1, 1]), num_colors=2)

    with pytest.raises(AssertionError):
        check_coloring(coloring)
