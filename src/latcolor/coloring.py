"""Greedy breadth-first vertex coloring of lattice graphs.

Vertices are visited in BFS order from vertex 0.
Each visited vertex gets the smallest existing color
not held by any of its already-colored neighbors,
or a new color if every existing one is taken.
Colors are never revisited, so the result is a proper coloring
but not necessarily one with the fewest colors.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from latcolor._display import coloring_repr, coloring_str
from latcolor.graph import LatticeGraph, build_lattice_graph

# Color of a vertex the traversal has not reached
UNASSIGNED = -1


@dataclass(frozen=True, repr=False)
class LatticeColoring:
    """Result of coloring a lattice graph.

    Attributes:
        graph: The lattice that was colored.
        colors: Color id of every vertex, shape ``(N,)``.
            Ids are ``0..num_colors - 1``.
        num_colors: Number of colors allocated.
    """

    graph: LatticeGraph
    colors: NDArray[np.int32]
    num_colors: int

    def __post_init__(self) -> None:
        """Freeze the colors."""
        colors = np.array(self.colors, dtype=np.int32)
        colors.setflags(write=False)
        object.__setattr__(self, "colors", colors)

    def color_usage(self) -> NDArray[np.int64]:
        """Number of vertices holding each color, shape ``(num_colors,)``."""
        assigned = self.colors[self.colors != UNASSIGNED]
        return np.bincount(assigned, minlength=self.num_colors)

    def as_grid(self) -> NDArray[np.int32]:
        """Colors laid out on the lattice, shape ``(ni, nj)``."""
        return self.colors.reshape(self.graph.shape)

    def __str__(self) -> str:
        """Render the colored lattice."""
        return coloring_str(self)

    def __repr__(self) -> str:
        """Return compact single-line representation."""
        return coloring_repr(self)


def color_lattice(ni: int, nj: int) -> LatticeColoring:
    """Build the ``ni`` by ``nj`` lattice and color it in one step.

    Args:
        ni: Number of rows.
        nj: Number of columns.

    Returns:
        A [`LatticeColoring`][latcolor.LatticeColoring] of the lattice.
    """
    return color_bfs(build_lattice_graph(ni, nj))


def color_bfs(graph: LatticeGraph) -> LatticeColoring:
    """Greedy coloring in breadth-first order starting from vertex 0.

    Neighbors are enqueued whenever they are unvisited,
    so a vertex may sit in the queue several times;
    repeats are skipped when popped.
    The visiting order, and therefore the coloring,
    depends only on the neighbor order of the graph.

    Vertices unreachable from vertex 0 keep the color ``UNASSIGNED``.
    Lattice graphs are connected, so this never happens for them.

    Args:
        graph: Graph to color, with at least one vertex.

    Returns:
        A [`LatticeColoring`][latcolor.LatticeColoring]
        with ``num_colors >= 1``.
    """
    n = graph.size
    offsets = graph.offsets.tolist()
    neighbours = graph.neighbours.tolist()

    colors = [UNASSIGNED] * n
    visited = [False] * n
    queue = deque([0])
    num_colors = 1

    while queue:
        i = queue.popleft()
        if visited[i]:
            continue
        visited[i] = True

        # Smallest existing color that no neighbor holds
        for c in range(num_colors):
            if _is_feasible(i, c, offsets, neighbours, colors):
                colors[i] = c
                break
        else:
            colors[i] = num_colors
            num_colors += 1

        for k in neighbours[offsets[i] : offsets[i + 1]]:
            if not visited[k]:
                queue.append(k)

    return LatticeColoring(
        graph=graph,
        colors=np.array(colors, dtype=np.int32),
        num_colors=num_colors,
    )


def is_feasible(
    graph: LatticeGraph,
    i: int,
    c: int,
    colors: NDArray[np.int32] | list[int],
) -> bool:
    """Whether vertex ``i`` can take color ``c`` under a partial coloring.

    Uncolored neighbors never block a color,
    so a vertex with no colored neighbors accepts any color.

    Args:
        graph: The graph being colored.
        i: Vertex to check.
        c: Candidate color.
        colors: Current color of every vertex, ``UNASSIGNED`` where uncolored.

    Returns:
        False if some neighbor of ``i`` holds ``c``, True otherwise.
    """
    for k in graph.neighbours_of(i):
        if colors[k] == c:
            return False
    return True


def _is_feasible(
    i: int,
    c: int,
    offsets: list[int],
    neighbours: list[int],
    colors: list[int],
) -> bool:
    """`is_feasible` on plain lists, used in the coloring loop."""
    for j in range(offsets[i], offsets[i + 1]):
        if colors[neighbours[j]] == c:
            return False
    return True
