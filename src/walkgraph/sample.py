from __future__ import annotations

"""The nine-vertex demonstration graph used by the ``walkgraph`` command."""

from typing import Final, Tuple

from .graph import Graph

SAMPLE_LABELS: Final[Tuple[str, ...]] = ("A", "B", "C", "D", "E", "F", "G", "H", "I")

SAMPLE_EDGES: Final[Tuple[Tuple[int, int], ...]] = (
    (0, 1),  # A -> B
    (0, 3),  # A -> D
    (0, 4),  # A -> E
    (1, 4),  # B -> E
    (3, 6),  # D -> G
    (4, 5),  # E -> F
    (4, 7),  # E -> H
    (6, 7),  # G -> H
    (5, 2),  # F -> C
    (5, 7),  # F -> H
    (7, 8),  # H -> I
    (2, 1),  # C -> B
    (8, 5),  # I -> F
)


def build_sample_graph() -> Graph[str]:
    """Labels A..I on vertices 0..8 with the edges listed in SAMPLE_EDGES."""
    graph: Graph[str] = Graph(len(SAMPLE_LABELS))
    for vertex, label in enumerate(SAMPLE_LABELS):
        graph.set_label(vertex, label)
    for source, target in SAMPLE_EDGES:
        graph.add_edge(source, target)
    return graph


__all__ = ["SAMPLE_LABELS", "SAMPLE_EDGES", "build_sample_graph"]
