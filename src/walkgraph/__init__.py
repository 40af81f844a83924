try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .exceptions import (
    EmptyContainerError,
    GraphError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    LabelNotFoundError,
)
from .fifo import LinkedQueue
from .graph import Graph, Traversal

__all__ = [
    "__version__",
    "Graph",
    "Traversal",
    "LinkedQueue",
    "GraphError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "EmptyContainerError",
    "LabelNotFoundError",
]
