"""Graph data structures shared by the loader and the MST driver."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Union

from .errors import GraphFormatError

Weight = Union[int, float]


@dataclass(eq=False)
class Neighbor:
    """One adjacency entry: the far vertex and the edge weight."""

    vertex: "Vertex"
    weight: Weight

    def __repr__(self) -> str:
        return f"Neighbor({self.vertex.name!r}, {self.weight!r})"


@dataclass(eq=False)
class Vertex:
    """A named graph vertex with a union-find parent pointer.

    ``parent`` starts out pointing at the vertex itself. Merging two
    components re-points the absorbed root at the surviving root, so every
    member's chain of parents ends at the one self-parented vertex of its
    component.
    """

    name: str
    neighbors: List[Neighbor] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.parent: Vertex = self

    def get_root(self, compress: bool = False) -> "Vertex":
        """Follow parent links up to the component root.

        Without ``compress`` the chain is left untouched and the lookup costs
        O(depth). With it, every vertex on the walked chain is re-pointed at
        the root. Roots are identical either way.
        """

        root = self
        while root.parent is not root:
            root = root.parent
        if compress:
            node = self
            while node.parent is not root:
                node.parent, node = root, node.parent
        return root

    def reset_root(self) -> None:
        self.parent = self

    def add_neighbor(self, vertex: "Vertex", weight: Weight) -> None:
        self.neighbors.append(Neighbor(vertex, weight))

    def __repr__(self) -> str:
        return f"Vertex({self.name!r})"


@dataclass(frozen=True)
class Arc:
    """Directed view ``v1 -> v2`` of an undirected weighted edge."""

    v1: Vertex
    v2: Vertex
    weight: Weight

    def endpoints(self) -> tuple[str, str]:
        return self.v1.name, self.v2.name

    def __repr__(self) -> str:
        return f"({self.v1.name}, {self.v2.name}, {self.weight})"

    __str__ = __repr__


class Graph:
    """Ordered collection of vertices with their adjacency lists."""

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self.vertices: List[Vertex] = []
        self._by_name: Dict[str, Vertex] = {}
        for name in names or []:
            self.add_vertex(name)

    def add_vertex(self, name: str) -> Vertex:
        if name in self._by_name:
            raise GraphFormatError(f"duplicate vertex name '{name}'")
        vertex = Vertex(name)
        self.vertices.append(vertex)
        self._by_name[name] = vertex
        return vertex

    def vertex(self, name: str) -> Vertex:
        try:
            return self._by_name[name]
        except KeyError:
            raise GraphFormatError(f"unknown vertex '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def add_edge(self, first: str, second: str, weight: Weight) -> None:
        """Add an undirected edge, stored once in each endpoint's adjacency list."""

        if math.isnan(weight):
            raise GraphFormatError(f"weight on edge {first}-{second} is not a number")
        if weight < 0:
            raise GraphFormatError(f"negative weight {weight} on edge {first}-{second}")
        left = self.vertex(first)
        right = self.vertex(second)
        left.add_neighbor(right, weight)
        right.add_neighbor(left, weight)

    def reset_roots(self) -> None:
        for vertex in self.vertices:
            vertex.reset_root()

    def edge_count(self) -> int:
        return sum(len(vertex.neighbors) for vertex in self.vertices) // 2

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={self.edge_count()})"


__all__ = ["Arc", "Graph", "Neighbor", "Vertex", "Weight"]
