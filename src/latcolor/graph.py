"""Compressed adjacency for 2-D rectilinear lattice graphs.

The lattice has ``ni`` rows and ``nj`` columns.
Vertex ``I`` sits at row ``i``, column ``j`` with ``I = j + i * nj``.
Neighbor lists are stored CSR-style:
a flat ``neighbours`` array grouped by vertex,
plus an ``offsets`` table of length ``N + 1``.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import cached_property

import numpy as np
from numpy.typing import NDArray

from latcolor._display import graph_repr, graph_str

# Vertex indices are stored as int32
INDEX_MAX = int(np.iinfo(np.int32).max)


class IndexOverflowError(OverflowError):
    """Raised when a lattice has more vertices than an int32 index can address."""


@dataclass(frozen=True, repr=False)
class LatticeGraph:
    """Undirected lattice graph in compressed sparse row form.

    Attributes:
        neighbours: Concatenated neighbor lists, shape ``(2 * num_edges,)``.
        offsets: Start of each vertex's neighbor group, shape ``(N + 1,)``.
            Vertex ``i``'s neighbors are ``neighbours[offsets[i]:offsets[i + 1]]``.
        shape: Lattice dimensions ``(ni, nj)``.
    """

    neighbours: NDArray[np.int32]
    offsets: NDArray[np.int64]
    shape: tuple[int, int]

    def __post_init__(self) -> None:
        """Validate CSR consistency and freeze the arrays."""
        neighbours = np.array(self.neighbours, dtype=np.int32)
        offsets = np.array(self.offsets, dtype=np.int64)
        neighbours.setflags(write=False)
        offsets.setflags(write=False)
        object.__setattr__(self, "neighbours", neighbours)
        object.__setattr__(self, "offsets", offsets)

        ni, nj = self.shape
        if len(self.offsets) != ni * nj + 1:
            msg = (
                f"offsets must have length ni * nj + 1 = {ni * nj + 1}, "
                f"got {len(self.offsets)}"
            )
            raise ValueError(msg)
        if self.offsets[0] != 0 or self.offsets[-1] != len(self.neighbours):
            msg = (
                "offsets must start at 0 and end at len(neighbours) "
                f"= {len(self.neighbours)}, got {self.offsets[0]} and {self.offsets[-1]}"
            )
            raise ValueError(msg)

    # Properties

    @property
    def ni(self) -> int:
        """Number of rows."""
        return self.shape[0]

    @property
    def nj(self) -> int:
        """Number of columns."""
        return self.shape[1]

    @property
    def size(self) -> int:
        """Number of vertices."""
        return len(self.offsets) - 1

    @property
    def num_edges(self) -> int:
        """Number of undirected edges."""
        return len(self.neighbours) // 2

    @cached_property
    def degrees(self) -> NDArray[np.int32]:
        """Degree of every vertex."""
        return np.diff(self.offsets).astype(np.int32)

    @property
    def max_degree(self) -> int:
        """Largest vertex degree (0 for a single vertex)."""
        return int(self.degrees.max()) if self.size > 0 else 0

    # Accessors

    def neighbours_of(self, i: int) -> NDArray[np.int32]:
        """Neighbors of vertex ``i`` in left, right, down, up order."""
        return self.neighbours[self.offsets[i] : self.offsets[i + 1]]

    def coordinates(self, i: int) -> tuple[int, int]:
        """Row and column of vertex ``i``."""
        return i // self.nj, i % self.nj

    def edges(self) -> NDArray[np.int32]:
        """Each undirected edge once as ``(i, k)`` with ``i > k``.

        Edges appear in CSR scan order,
        i.e. grouped by ``i`` and ordered as in ``neighbours_of(i)``.
        """
        sources = np.repeat(np.arange(self.size, dtype=np.int32), self.degrees)
        keep = sources > self.neighbours
        return np.stack([sources[keep], self.neighbours[keep]], axis=1)

    def points(self) -> NDArray[np.int32]:
        """Grid coordinates ``(i // nj, i % nj, 0)`` of every vertex."""
        idx = np.arange(self.size, dtype=np.int32)
        return np.stack(
            [idx // self.nj, idx % self.nj, np.zeros_like(idx)], axis=1
        )

    def todense(self) -> NDArray:
        """Dense adjacency matrix with 1s at connected pairs."""
        result = np.zeros((self.size, self.size), dtype=np.int8)
        sources = np.repeat(np.arange(self.size), self.degrees)
        result[sources, self.neighbours] = 1
        return result

    # Display

    def __str__(self) -> str:
        """Render the lattice with its edges."""
        return graph_str(self)

    def __repr__(self) -> str:
        """Return compact single-line representation."""
        return graph_repr(self)


def build_lattice_graph(ni: int, nj: int) -> LatticeGraph:
    """Build the 4-neighbor lattice graph with ``ni`` rows and ``nj`` columns.

    Neighbors of vertex ``I = j + i * nj`` are listed in the fixed order
    left (``I - 1``), right (``I + 1``), down (``I + nj``), up (``I - nj``),
    skipping those outside the grid.
    This order determines the BFS traversal of the colorer,
    so changing it changes the resulting colors.

    Args:
        ni: Number of rows, at least 1.
        nj: Number of columns, at least 1.

    Returns:
        The lattice as a [`LatticeGraph`][latcolor.LatticeGraph].

    Raises:
        ValueError: If a dimension is not positive.
        IndexOverflowError: If ``ni * nj`` exceeds ``INDEX_MAX``.
    """
    # Python ints, so the product below cannot wrap around
    ni, nj = operator.index(ni), operator.index(nj)
    if ni < 1 or nj < 1:
        msg = f"Lattice dimensions must be positive, got ni={ni}, nj={nj}"
        raise ValueError(msg)
    if ni * nj > INDEX_MAX:
        msg = f"ni * nj = {ni * nj} exceeds the largest vertex index {INDEX_MAX}"
        raise IndexOverflowError(msg)

    n = ni * nj
    idx = np.arange(n, dtype=np.int64)
    i, j = idx // nj, idx % nj

    # One column per direction, in neighbor order: left, right, down, up
    candidates = np.stack([idx - 1, idx + 1, idx + nj, idx - nj], axis=1)
    present = np.stack([j > 0, j < nj - 1, i < ni - 1, i > 0], axis=1)

    # Row-major boolean indexing keeps each vertex's group contiguous and ordered
    neighbours = candidates[present].astype(np.int32)
    offsets = np.zeros(n + 1, dtype=np.int64)
    np.cumsum(present.sum(axis=1), out=offsets[1:])

    return LatticeGraph(
        neighbours=neighbours,
        offsets=offsets,
        shape=(ni, nj),
    )
