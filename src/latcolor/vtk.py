"""Export a colored lattice as a legacy VTK unstructured grid.

Each vertex becomes a point at ``(i // nj, i % nj, 0)``,
each undirected edge a line cell (VTK cell type 3),
and the vertex colors a per-point scalar field named ``Color``.
See https://vtk.org/wp-content/uploads/2015/04/file-formats.pdf
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TextIO

from latcolor.coloring import LatticeColoring

DEFAULT_TITLE = "some rectangular colored grid"

# VTK_LINE
_LINE_CELL_TYPE = 3


def vtk_str(coloring: LatticeColoring, *, title: str = DEFAULT_TITLE) -> str:
    """Render the colored lattice as a VTK ASCII document.

    Args:
        coloring: Coloring to export, together with its graph.
        title: Single-line title written after the version header.

    Returns:
        The whole file contents.
    """
    _check_title(title)
    return "".join(_vtk_chunks(coloring, title))


def write_vtk(
    coloring: LatticeColoring,
    file: str | os.PathLike | TextIO,
    *,
    title: str = DEFAULT_TITLE,
) -> None:
    """Write the colored lattice as a VTK ASCII file.

    Args:
        coloring: Coloring to export, together with its graph.
        file: Destination path or an open text stream.
        title: Single-line title written after the version header.
    """
    _check_title(title)
    if isinstance(file, (str, os.PathLike)):
        with open(file, "w", encoding="ascii") as stream:
            stream.writelines(_vtk_chunks(coloring, title))
    else:
        file.writelines(_vtk_chunks(coloring, title))


def _vtk_chunks(coloring: LatticeColoring, title: str) -> Iterator[str]:
    """Yield the file section by section."""
    graph = coloring.graph
    n = graph.size
    edges = graph.edges()
    num_cells = len(edges)

    yield (
        "# vtk DataFile Version 2.0\n"
        f"{title}\n"
        "ASCII\n"
        "DATASET UNSTRUCTURED_GRID\n\n"
    )

    yield f"POINTS {n} float\n"
    yield "".join(f"{x} {y} {z}\n" for x, y, z in graph.points().tolist())

    yield f"\nCELLS {num_cells} {3 * num_cells}\n"
    yield "".join(f"2 {i} {k}\n" for i, k in edges.tolist())

    yield f"\nCELL_TYPES {num_cells}\n"
    yield f"{_LINE_CELL_TYPE}\n" * num_cells

    yield (
        f"\n\nPOINT_DATA {n}\n"
        "SCALARS Color float 1\n"
        "LOOKUP_TABLE default\n"
    )
    yield "".join(f"{c}\n" for c in coloring.colors.tolist())


def _check_title(title: str) -> None:
    if "\n" in title:
        msg = f"VTK title must be a single line, got {title!r}"
        raise ValueError(msg)
    if not title.isascii():
        msg = f"VTK title must be ASCII, got {title!r}"
        raise ValueError(msg)
