"""Partial trees and the circular list that queues them during the merge loop."""

from __future__ import annotations

from typing import Iterator, Optional

from .errors import EmptyListError, NoMatchError
from .heap import MinHeap
from .structures import Arc, Vertex


class PartialTree:
    """One connected component: its anchor vertex and its candidate arcs."""

    def __init__(self, root: Vertex) -> None:
        self._root = root
        self._arcs: MinHeap[Arc] = MinHeap()
        self.vertex_count = 1

    @property
    def root(self) -> Vertex:
        return self._root

    @property
    def arcs(self) -> MinHeap[Arc]:
        return self._arcs

    def merge(self, other: "PartialTree") -> None:
        """Absorb ``other``: re-point its root at ours and take over its arcs."""

        other.root.parent = self._root
        self.vertex_count += other.vertex_count
        self._arcs.merge(other.arcs)

    def __repr__(self) -> str:
        return f"PartialTree(root={self._root.name!r}, vertices={self.vertex_count}, arcs={len(self._arcs)})"


class _Node:
    __slots__ = ("tree", "next")

    def __init__(self, tree: PartialTree) -> None:
        self.tree = tree
        self.next: _Node = self


class PartialTreeList:
    """Circular singly linked list of partial trees.

    Only ``rear`` is stored; ``rear.next`` is the front. Appending and
    popping the front are O(1), removing by vertex is a single circuit.
    """

    def __init__(self) -> None:
        self._rear: Optional[_Node] = None
        self._size = 0

    def append(self, tree: PartialTree) -> None:
        node = _Node(tree)
        if self._rear is not None:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def remove(self) -> PartialTree:
        """Remove and return the tree at the front of the list."""

        if self._rear is None:
            raise EmptyListError("remove() on an empty partial tree list")
        front = self._rear.next
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.tree

    def remove_tree_containing(self, vertex: Vertex, compress: bool = False) -> PartialTree:
        """Remove and return the tree whose component contains ``vertex``."""

        if self._rear is None:
            raise NoMatchError(f"no partial tree contains {vertex.name!r}: list is empty")

        target = vertex.get_root(compress)
        prev = self._rear
        for _ in range(self._size):
            node = prev.next
            if node.tree.root.get_root(compress) is target:
                if node is prev:
                    self._rear = None
                else:
                    prev.next = node.next
                    if node is self._rear:
                        self._rear = prev
                self._size -= 1
                return node.tree
            prev = node

        raise NoMatchError(f"no partial tree contains {vertex.name!r}")

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[PartialTree]:
        if self._rear is None:
            return
        node = self._rear.next
        for _ in range(self._size):
            yield node.tree
            node = node.next

    def __repr__(self) -> str:
        return f"PartialTreeList({[tree.root.name for tree in self]})"


__all__ = ["PartialTree", "PartialTreeList"]
