"""Exception types raised by the MST engine."""

from __future__ import annotations


class MSTError(Exception):
    """Base class for every error raised by this package."""


class EmptyHeapError(MSTError, IndexError):
    """Raised by :meth:`MinHeap.delete_min` when the heap holds no items."""


class EmptyListError(MSTError, IndexError):
    """Raised by :meth:`PartialTreeList.remove` on an empty list."""


class NoMatchError(MSTError, LookupError):
    """No partial tree in the list owns the requested vertex."""


class DisconnectedGraphError(MSTError, ValueError):
    """The graph has more than one component, so no spanning tree exists."""

    def __init__(self, message: str, component_root: object | None = None) -> None:
        super().__init__(message)
        self.component_root = component_root


class GraphFormatError(MSTError, ValueError):
    """Input graph data could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


__all__ = [
    "MSTError",
    "EmptyHeapError",
    "EmptyListError",
    "NoMatchError",
    "DisconnectedGraphError",
    "GraphFormatError",
]
