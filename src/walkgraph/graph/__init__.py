"""
walkgraph.graph
===============

Labeled directed graph and its traversals.

Public API:

- Graph                : fixed-size directed graph (labels, dense adjacency, BFS/DFS).
- Traversal            : value bundling one traversal's order, tree edges and parents.
- breadth_first_search : BFS over any Graph, optionally without touching its bookkeeping.
- depth_first_search   : iterative DFS counterpart.
- format_tree_edges    : render tree edges as ``{ (A,B), ... }``.
"""

from __future__ import annotations

from .core import Graph
from .traversal import (
    Traversal,
    breadth_first_search,
    depth_first_search,
    format_tree_edges,
)

__all__ = [
    "Graph",
    "Traversal",
    "breadth_first_search",
    "depth_first_search",
    "format_tree_edges",
]
