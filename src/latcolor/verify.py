"""Verification utilities for lattice graphs and their colorings."""

import numpy as np

from latcolor.coloring import UNASSIGNED, LatticeColoring
from latcolor.graph import LatticeGraph


class GraphStructureError(ValueError):
    """Raised when a graph violates the undirected CSR invariants.

    Graphs from [`build_lattice_graph`][latcolor.build_lattice_graph]
    always pass; this is meant for hand-built graphs.
    """


class ColoringError(AssertionError):
    """Raised when a coloring is incomplete or not proper.

    Colorings from [`color_bfs`][latcolor.color_bfs] of a connected graph
    always pass.
    """


def check_graph(graph: LatticeGraph) -> None:
    """Check that a graph is a valid undirected CSR adjacency.

    Offsets must be non-decreasing,
    and every adjacency must be symmetric, without self loops or repeats.

    Raises:
        GraphStructureError: On the first violated invariant.
    """
    if np.any(np.diff(graph.offsets) < 0):
        raise GraphStructureError("offsets must be non-decreasing")

    n = graph.size
    if len(graph.neighbours) and (
        graph.neighbours.min() < 0 or graph.neighbours.max() >= n
    ):
        msg = f"neighbour indices must lie in [0, {n})"
        raise GraphStructureError(msg)

    sources = np.repeat(np.arange(n), graph.degrees)
    if np.any(sources == graph.neighbours):
        i = int(sources[sources == graph.neighbours][0])
        msg = f"vertex {i} is its own neighbour"
        raise GraphStructureError(msg)

    pairs = set(zip(sources.tolist(), graph.neighbours.tolist(), strict=True))
    if len(pairs) != len(sources):
        raise GraphStructureError("neighbour lists contain duplicate entries")
    for i, k in pairs:
        if (k, i) not in pairs:
            msg = f"edge ({i}, {k}) has no reverse edge ({k}, {i})"
            raise GraphStructureError(msg)


def check_coloring(coloring: LatticeColoring) -> None:
    """Check that every vertex is colored and no edge joins equal colors.

    Also checks that the used color ids are exactly ``0..num_colors - 1``.

    Raises:
        ColoringError: If the coloring is incomplete, improper,
            or its color ids have gaps.
    """
    colors = coloring.colors
    graph = coloring.graph

    if len(colors) != graph.size:
        raise ColoringError(
            f"Coloring has {len(colors)} entries "
            f"but the graph has {graph.size} vertices."
        )

    unassigned = np.flatnonzero(colors == UNASSIGNED)
    if len(unassigned):
        raise ColoringError(
            f"{len(unassigned)} vertices are uncolored, "
            f"starting with vertex {int(unassigned[0])}."
        )

    edges = graph.edges()
    clashes = edges[colors[edges[:, 0]] == colors[edges[:, 1]]]
    if len(clashes):
        i, k = (int(v) for v in clashes[0])
        raise ColoringError(
            f"Adjacent vertices {i} and {k} share color {int(colors[i])}."
        )

    used = np.unique(colors)
    expected = np.arange(coloring.num_colors)
    if not np.array_equal(used, expected):
        raise ColoringError(
            f"Color ids {used.tolist()} are not exactly 0..{coloring.num_colors - 1}."
        )
