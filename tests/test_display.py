"""Tests for pretty-printing."""

from latcolor import build_lattice_graph, color_lattice
from latcolor._display import usage_str


def test_graph_repr():
    assert repr(build_lattice_graph(2, 3)) == (
        "LatticeGraph(shape=(2, 3), vertices=6, edges=7)"
    )


def test_graph_str():
    """Small lattices are drawn with their edges."""
    assert str(build_lattice_graph(2, 3)) == (
        "LatticeGraph(2×3, 6 vertices, 7 edges, max degree 3)\n"
        "●─●─●\n"
        "│ │ │\n"
        "●─●─●"
    )


def test_graph_str_single_vertex():
    assert str(build_lattice_graph(1, 1)) == (
        "LatticeGraph(1×1, 1 vertices, 0 edges, max degree 0)\n●"
    )


def test_graph_str_large():
    """Large lattices only show the header."""
    assert str(build_lattice_graph(20, 30)) == (
        "LatticeGraph(20×30, 600 vertices, 1150 edges, max degree 4)"
    )


def test_coloring_str_column():
    """A single column draws vertical edges only."""
    assert str(color_lattice(3, 1)) == (
        "LatticeColoring(3×1, 2 colors)\n"
        "  usage: [2, 1]\n"
        "0\n"
        "│\n"
        "1\n"
        "│\n"
        "0"
    )


def test_usage_str():
    """Statistics keep the trailing separator inside the brackets."""
    assert usage_str(color_lattice(3, 3)) == "colors_used = 2\nused = [5, 4, ]"
    assert usage_str(color_lattice(1, 1)) == "colors_used = 1\nused = [1, ]"
