from __future__ import annotations

"""
Breadth-first and depth-first traversal over a :class:`Graph`.

Both searches resolve the origin by label, mark a vertex visited the moment
it is discovered (so self-loops and cycles never cause revisits), scan
neighbors in ascending index order, and record a tree edge for every vertex
reached for the first time. Depth-first uses an explicit stack, never
recursion, so traversal depth is not bounded by the interpreter stack.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, Iterable, List, Literal, Optional, Tuple, TypeVar

import numpy as np

from ..fifo import LinkedQueue

if TYPE_CHECKING:
    from .core import Graph

logger = logging.getLogger(__name__)

E = TypeVar("E")

TraversalKind = Literal["bfs", "dfs"]


@dataclass(frozen=True, slots=True)
class Traversal(Generic[E]):
    """
    Outcome of a single traversal run.

    visit_order    : labels in visitation order (origin first).
    tree_edges     : (parent, child) label pairs in discovery order.
    parent_indices : per vertex index, the index it was discovered from
                     (-1 for the origin and for unreached vertices).
    visited_mask   : per vertex index, whether the run reached it.
    """

    kind: TraversalKind
    origin: E
    visit_order: Tuple[E, ...]
    tree_edges: Tuple[Tuple[E, E], ...]
    parent_indices: np.ndarray
    visited_mask: np.ndarray

    @property
    def order(self) -> LinkedQueue[E]:
        """
        Visitation order as a new LinkedQueue on every access.

        The caller owns the queue; draining it affects neither this result
        nor the graph.
        """
        return LinkedQueue(self.visit_order)

    @property
    def parents(self) -> Dict[E, E]:
        """Child label -> parent label, in discovery order. Labels must be hashable."""
        return {child: parent for parent, child in self.tree_edges}

    def visited(self) -> List[E]:
        """Visitation order as a list."""
        return list(self.visit_order)

    def reached(self, vertex: int) -> bool:
        return bool(self.visited_mask[vertex])

    def format_tree_edges(self) -> str:
        return format_tree_edges(self.tree_edges)


def format_tree_edges(edges: Iterable[Tuple[Any, Any]]) -> str:
    """Render tree edges as ``{ (A,B), (A,D), ... }``."""
    return "{ " + ", ".join(f"({parent},{child})" for parent, child in edges) + " }"


def _prepare(
    graph: Graph[E],
    visited: Optional[np.ndarray],
    parents: Optional[np.ndarray],
) -> Tuple[np.ndarray, np.ndarray]:
    n = graph.size()
    if visited is None:
        visited = np.zeros(n, dtype=bool)
    if parents is None:
        parents = np.full(n, -1, dtype=np.int64)
    return visited, parents


def breadth_first_search(
    graph: Graph[E],
    origin: E,
    *,
    visited: Optional[np.ndarray] = None,
    parents: Optional[np.ndarray] = None,
) -> Traversal[E]:
    """
    Breadth-first traversal of ``graph`` starting at the vertex labeled ``origin``.

    visited / parents (optional) are filled in place; Graph passes its own
    bookkeeping arrays here. Fresh ones are allocated when omitted, leaving
    the graph untouched.

    Raises LabelNotFoundError if no vertex carries ``origin``.
    """
    start = graph.index_of(origin)
    visited, parents = _prepare(graph, visited, parents)

    order: LinkedQueue[E] = LinkedQueue()
    frontier: LinkedQueue[int] = LinkedQueue()
    tree_edges: List[Tuple[E, E]] = []

    visited[start] = True
    order.enqueue(graph.get_label(start))
    frontier.enqueue(start)

    while not frontier.is_empty():
        current = frontier.dequeue()
        current_label = graph.get_label(current)
        for neighbor in graph.neighbors(current):
            if visited[neighbor]:
                continue
            visited[neighbor] = True
            parents[neighbor] = current
            label = graph.get_label(neighbor)
            tree_edges.append((current_label, label))
            order.enqueue(label)
            frontier.enqueue(neighbor)

    logger.debug("BFS from %r reached %d of %d vertices", origin, len(order), graph.size())
    return _result("bfs", graph, start, order, tree_edges, parents, visited)


def depth_first_search(
    graph: Graph[E],
    origin: E,
    *,
    visited: Optional[np.ndarray] = None,
    parents: Optional[np.ndarray] = None,
) -> Traversal[E]:
    """
    Depth-first (pre-order) traversal starting at the vertex labeled ``origin``.

    Peeks the top of the stack and descends into its first unvisited
    neighbor, leaving the parent beneath it; a vertex with nothing left to
    explore is popped. Same arguments and errors as breadth_first_search.
    """
    start = graph.index_of(origin)
    visited, parents = _prepare(graph, visited, parents)

    order: LinkedQueue[E] = LinkedQueue()
    stack: List[int] = []
    tree_edges: List[Tuple[E, E]] = []

    visited[start] = True
    order.enqueue(graph.get_label(start))
    stack.append(start)

    while stack:
        top = stack[-1]
        for neighbor in graph.neighbors(top):
            if not visited[neighbor]:
                break
        else:
            stack.pop()  # backtrack
            continue

        visited[neighbor] = True
        parents[neighbor] = top
        top_label = graph.get_label(top)
        label = graph.get_label(neighbor)
        tree_edges.append((top_label, label))
        order.enqueue(label)
        stack.append(neighbor)

    logger.debug("DFS from %r reached %d of %d vertices", origin, len(order), graph.size())
    return _result("dfs", graph, start, order, tree_edges, parents, visited)


def _result(
    kind: TraversalKind,
    graph: Graph[E],
    start: int,
    order: LinkedQueue[E],
    tree_edges: List[Tuple[E, E]],
    parents: np.ndarray,
    visited: np.ndarray,
) -> Traversal[E]:
    return Traversal(
        kind=kind,
        origin=graph.get_label(start),  # type: ignore[arg-type]
        visit_order=tuple(order),
        tree_edges=tuple(tree_edges),
        parent_indices=parents.copy(),
        visited_mask=visited.copy(),
    )


__all__ = [
    "Traversal",
    "TraversalKind",
    "breadth_first_search",
    "depth_first_search",
    "format_tree_edges",
]
