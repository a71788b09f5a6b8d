"""latcolor - Greedy breadth-first coloring of 2-D lattice graphs.

The lattice is stored in compressed sparse row form,
colored greedily in BFS order from vertex 0,
and can be exported as a VTK unstructured grid for visualization.
"""

from latcolor.coloring import (
    UNASSIGNED,
    LatticeColoring,
    color_bfs,
    color_lattice,
    is_feasible,
)
from latcolor.graph import (
    INDEX_MAX,
    IndexOverflowError,
    LatticeGraph,
    build_lattice_graph,
)
from latcolor.verify import (
    ColoringError,
    GraphStructureError,
    check_coloring,
    check_graph,
)
from latcolor.vtk import vtk_str, write_vtk

__all__ = [
    "INDEX_MAX",
    "UNASSIGNED",
    "ColoringError",
    "GraphStructureError",
    "IndexOverflowError",
    "LatticeColoring",
    "LatticeGraph",
    "build_lattice_graph",
    "check_coloring",
    "check_graph",
    "color_bfs",
    "color_lattice",
    "is_feasible",
    "vtk_str",
    "write_vtk",
]
