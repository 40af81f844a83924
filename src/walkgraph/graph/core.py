from __future__ import annotations

import logging
import operator
from typing import (
    TYPE_CHECKING,
    Generic,
    Iterable,
    List,
    Optional,
    Sequence,
    TextIO,
    Tuple,
    TypeVar,
)

import numpy as np
import graphblas as gb
from graphblas import Matrix

from ..exceptions import IndexOutOfBoundsError, InvalidArgumentError, LabelNotFoundError

if TYPE_CHECKING:
    from ..fifo import LinkedQueue
    from .traversal import Traversal

logger = logging.getLogger(__name__)

E = TypeVar("E")


class Graph(Generic[E]):
    """
    Fixed-size directed graph with labeled vertices.

    Structure:
      - Vertices are 0..size-1; the count is fixed at construction.
      - Edges: dense numpy BOOL matrix, edges[i, j] True means i -> j.
        No weights, no multiplicity; self-loops are allowed.
      - Labels: one caller-chosen value per vertex, None until assigned.
        Traversals resolve their origin by label, first match in index
        order wins.

    Traversal bookkeeping (visited flags, discovery parents, tree edges)
    is kept per instance and rebuilt on every traversal call; the same
    data is also returned as a :class:`~walkgraph.graph.traversal.Traversal`
    value by ``breadth_first_search`` / ``depth_first_search``.

    Not thread-safe; callers sharing an instance must serialize access.
    """

    __slots__ = (
        "_size",
        "_edges",           # np.ndarray[bool], shape (size, size)
        "_labels",          # list[E | None]
        "_visited",         # np.ndarray[bool], shape (size,)
        "_bfs_parent",      # np.ndarray[int64], -1 = no parent
        "_dfs_parent",
        "_bfs_tree_edges",  # list[tuple[E, E]]
        "_dfs_tree_edges",
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 0:
            raise InvalidArgumentError(f"Graph size must be non-negative, got {size}")

        self._size = size
        self._edges = np.zeros((size, size), dtype=bool)
        self._labels: List[Optional[E]] = [None] * size

        self._visited = np.zeros(size, dtype=bool)
        self._bfs_parent = np.full(size, -1, dtype=np.int64)
        self._dfs_parent = np.full(size, -1, dtype=np.int64)
        self._bfs_tree_edges: List[Tuple[E, E]] = []
        self._dfs_tree_edges: List[Tuple[E, E]] = []

        logger.debug("Created graph with %d vertices", size)

    @classmethod
    def from_edges(
        cls,
        size: int,
        edges: Iterable[Tuple[int, int]],
        labels: Optional[Sequence[E]] = None,
    ) -> Graph[E]:
        """
        Build a Graph from (source, target) index pairs.

        labels (optional): assigned to vertices 0, 1, ... in order; a
        sequence longer than ``size`` fails like any out-of-range set_label.
        """
        graph: Graph[E] = cls(size)

        pairs = np.asarray(list(edges))
        if pairs.size == 0:
            pairs = np.empty((0, 2), dtype=np.int64)
        elif pairs.ndim != 2 or pairs.shape[1] != 2:
            raise InvalidArgumentError(
                f"Edges must be (source, target) pairs, got array of shape {pairs.shape}"
            )
        elif not np.issubdtype(pairs.dtype, np.integer):
            raise TypeError(f"Edge indices must be integers, got {pairs.dtype}")
        out_of_range = (pairs < 0) | (pairs >= graph._size)
        if out_of_range.any():
            bad = int(pairs[out_of_range][0])
            raise IndexOutOfBoundsError(bad, graph._size)
        graph._edges[pairs[:, 0], pairs[:, 1]] = True

        if labels is not None:
            for vertex, label in enumerate(labels):
                graph.set_label(vertex, label)
        return graph

    @classmethod
    def from_matrix(cls, matrix: Matrix, labels: Optional[Sequence[E]] = None) -> Graph[E]:
        """
        Build a Graph from a square GraphBLAS matrix.

        Every stored entry with a non-zero (truthy) value becomes an edge,
        so weighted adjacency matrices can be imported directly.
        """
        if matrix.nrows != matrix.ncols:
            raise InvalidArgumentError(
                f"Adjacency matrix must be square, got {matrix.nrows}x{matrix.ncols}"
            )
        rows, cols, values = matrix.to_coo()
        keep = np.asarray(values).astype(bool)
        edges = zip(rows[keep].tolist(), cols[keep].tolist())
        return cls.from_edges(int(matrix.nrows), edges, labels)

    # ------------------------------------------------------------------ #
    # Size & bounds
    # ------------------------------------------------------------------ #
    def size(self) -> int:
        """Number of vertices."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def _check_vertex_index(self, index: int) -> int:
        idx = operator.index(index)
        if idx < 0 or idx >= self._size:
            raise IndexOutOfBoundsError(idx, self._size)
        return idx

    # ------------------------------------------------------------------ #
    # Labels
    # ------------------------------------------------------------------ #
    def get_label(self, vertex: int) -> Optional[E]:
        """Label of ``vertex``; None if it has not been assigned yet."""
        return self._labels[self._check_vertex_index(vertex)]

    def set_label(self, vertex: int, new_label: E) -> None:
        """Assign or replace the label of ``vertex``. None is rejected."""
        idx = self._check_vertex_index(vertex)
        if new_label is None:
            raise InvalidArgumentError("Label cannot be None.")
        self._labels[idx] = new_label

    @property
    def labels(self) -> List[Optional[E]]:
        """Copy of the label list, indexed by vertex."""
        return list(self._labels)

    def index_of(self, label: E) -> int:
        """
        Resolve ``label`` to a vertex index by linear scan.

        The lowest index carrying an equal label wins; unset labels never
        match. Raises LabelNotFoundError when nothing matches.
        """
        for idx, candidate in enumerate(self._labels):
            if candidate is not None and candidate == label:
                return idx
        raise LabelNotFoundError(label)

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def add_edge(self, source: int, target: int) -> None:
        src = self._check_vertex_index(source)
        dst = self._check_vertex_index(target)
        self._edges[src, dst] = True

    def remove_edge(self, source: int, target: int) -> None:
        src = self._check_vertex_index(source)
        dst = self._check_vertex_index(target)
        self._edges[src, dst] = False

    def is_edge(self, source: int, target: int) -> bool:
        src = self._check_vertex_index(source)
        dst = self._check_vertex_index(target)
        return bool(self._edges[src, dst])

    def neighbors(self, vertex: int) -> List[int]:
        """Targets of all edges leaving ``vertex``, ascending by index."""
        row = self._edges[self._check_vertex_index(vertex)]
        return np.flatnonzero(row).tolist()

    def edge_count(self) -> int:
        return int(np.count_nonzero(self._edges))

    def adjacency(self) -> np.ndarray:
        """Copy of the dense BOOL adjacency matrix (rows = sources)."""
        return self._edges.copy()

    def to_matrix(self) -> Matrix:
        """Export the edge relation as a GraphBLAS Matrix[BOOL] (size x size)."""
        rows, cols = np.nonzero(self._edges)
        return gb.Matrix.from_coo(
            rows,
            cols,
            np.ones(rows.size, dtype=bool),
            dtype=gb.dtypes.BOOL,
            nrows=self._size,
            ncols=self._size,
        )

    # ------------------------------------------------------------------ #
    # Traversal state
    # ------------------------------------------------------------------ #
    def reset_vertices(self) -> None:
        """Mark every vertex unvisited. Called at the start of each traversal."""
        self._visited = np.zeros(self._size, dtype=bool)

    def is_visited(self, vertex: int) -> bool:
        """Whether the most recent traversal reached ``vertex``."""
        return bool(self._visited[self._check_vertex_index(vertex)])

    @property
    def bfs_tree_edges(self) -> List[Tuple[E, E]]:
        """(parent, child) label pairs discovered by the last breadth-first run."""
        return list(self._bfs_tree_edges)

    @property
    def dfs_tree_edges(self) -> List[Tuple[E, E]]:
        """(parent, child) label pairs discovered by the last depth-first run."""
        return list(self._dfs_tree_edges)

    # ------------------------------------------------------------------ #
    # Traversals (thin delegating methods, see .traversal)
    # ------------------------------------------------------------------ #
    def breadth_first_search(self, origin: E) -> Traversal[E]:
        """
        Run a breadth-first traversal from the vertex labeled ``origin``.

        Rebuilds the visited flags, BFS parents and BFS tree edges of this
        graph and returns them bundled as a Traversal value.
        """
        from .traversal import breadth_first_search as _bfs  # local import avoids cycles

        self.index_of(origin)  # fail before any bookkeeping is reset
        self._bfs_parent = np.full(self._size, -1, dtype=np.int64)
        self._bfs_tree_edges = []
        self.reset_vertices()

        result = _bfs(self, origin, visited=self._visited, parents=self._bfs_parent)
        self._bfs_tree_edges = list(result.tree_edges)
        return result

    def depth_first_search(self, origin: E) -> Traversal[E]:
        """Depth-first counterpart of :meth:`breadth_first_search`."""
        from .traversal import depth_first_search as _dfs

        self.index_of(origin)
        self._dfs_parent = np.full(self._size, -1, dtype=np.int64)
        self._dfs_tree_edges = []
        self.reset_vertices()

        result = _dfs(self, origin, visited=self._visited, parents=self._dfs_parent)
        self._dfs_tree_edges = list(result.tree_edges)
        return result

    def breadth_first(self, origin: E) -> LinkedQueue[E]:
        """Labels in breadth-first visitation order from ``origin``."""
        return self.breadth_first_search(origin).order

    def depth_first(self, origin: E) -> LinkedQueue[E]:
        """Labels in depth-first (pre-order) visitation order from ``origin``."""
        return self.depth_first_search(origin).order

    # ------------------------------------------------------------------ #
    # Printing
    # ------------------------------------------------------------------ #
    def print_bfs_tree_edges(self, file: Optional[TextIO] = None) -> None:
        from .traversal import format_tree_edges

        print(f"BFS Tree edges: {format_tree_edges(self._bfs_tree_edges)}", file=file)

    def print_dfs_tree_edges(self, file: Optional[TextIO] = None) -> None:
        from .traversal import format_tree_edges

        print(f"DFS Tree edges: {format_tree_edges(self._dfs_tree_edges)}", file=file)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        assigned = sum(label is not None for label in self._labels)
        return (
            f"Graph(size={self._size}, "
            f"edges={self.edge_count()}, "
            f"labeled={assigned})"
        )
