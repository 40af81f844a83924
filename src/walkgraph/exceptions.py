from __future__ import annotations

"""Error hierarchy for walkgraph."""

from typing import Any


class GraphError(Exception):
    """Base exception for walkgraph errors."""
    pass


class IndexOutOfBoundsError(GraphError, IndexError):
    """Raised when a vertex index lies outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Invalid vertex index: {index} (graph has {size} vertices)")
        self.index = index
        self.size = size


class InvalidArgumentError(GraphError, ValueError):
    """Raised for arguments that can never be valid (None label, negative size, ...)."""
    pass


class EmptyContainerError(GraphError, LookupError):
    """Raised when reading from an empty queue."""

    def __init__(self, message: str = "Queue is empty") -> None:
        super().__init__(message)


class LabelNotFoundError(GraphError, LookupError):
    """Raised when no vertex carries the requested label."""

    def __init__(self, label: Any) -> None:
        super().__init__(f"Label not found: {label!r}")
        self.label = label


__all__ = [
    "GraphError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "EmptyContainerError",
    "LabelNotFoundError",
]
