"""Pretty-printing for LatticeGraph and LatticeColoring."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from latcolor.coloring import LatticeColoring
    from latcolor.graph import LatticeGraph

# Lattices larger than this are summarized without a drawing
_SMALL_ROWS = 16
_SMALL_COLS = 24


# LatticeGraph display


def graph_repr(graph: LatticeGraph) -> str:
    """Compact single-line representation."""
    return (
        f"LatticeGraph(shape={graph.shape}, "
        f"vertices={graph.size}, edges={graph.num_edges})"
    )


def graph_str(graph: LatticeGraph) -> str:
    """Full string representation with header and drawing."""
    header = (
        f"LatticeGraph({graph.ni}×{graph.nj}, {graph.size} vertices, "
        f"{graph.num_edges} edges, max degree {graph.max_degree})"
    )
    if not _is_small(graph):
        return header
    labels = [["●"] * graph.nj for _ in range(graph.ni)]
    return f"{header}\n{_render(labels)}"


# LatticeColoring display


def coloring_repr(coloring: LatticeColoring) -> str:
    """Compact single-line representation."""
    ni, nj = coloring.graph.shape
    c = coloring.num_colors
    return f"LatticeColoring({ni}×{nj}, {c} {'color' if c == 1 else 'colors'})"


def coloring_str(coloring: LatticeColoring) -> str:
    """Full string representation with color usage and the colored lattice.

    Each vertex is drawn as its color id.
    """
    header = f"{coloring_repr(coloring)}\n  usage: {list(map(int, coloring.color_usage()))}"
    if not _is_small(coloring.graph):
        return header
    grid = coloring.as_grid()
    width = len(str(max(coloring.num_colors - 1, 0)))
    labels = [[f"{int(c):>{width}}" for c in row] for row in grid]
    return f"{header}\n{_render(labels)}"


def usage_str(coloring: LatticeColoring) -> str:
    """Color statistics in the ``colors_used`` / ``used`` report format."""
    used = "".join(f"{int(count)}, " for count in coloring.color_usage())
    return f"colors_used = {coloring.num_colors}\nused = [{used}]"


# Rendering helpers


def _is_small(graph: LatticeGraph) -> bool:
    return graph.ni <= _SMALL_ROWS and graph.nj <= _SMALL_COLS


def _render(labels: list[list[str]]) -> str:
    """Draw a grid of vertex labels joined by lattice edges.

    Horizontal edges are ``─``, vertical edges ``│``.
    """
    width = max((len(label) for row in labels for label in row), default=1)
    lines = []
    for r, row in enumerate(labels):
        if r > 0:
            lines.append(" ".join(f"{'│':^{width}}" for _ in row))
        lines.append("─".join(f"{label:^{width}}" for label in row))
    return "\n".join(line.rstrip() for line in lines)
