"""MST engine library initialization."""

from .errors import (
    DisconnectedGraphError,
    EmptyHeapError,
    EmptyListError,
    GraphFormatError,
    MSTError,
    NoMatchError,
)
from .heap import MinHeap
from .loader import graph_from_adjacency_matrix, graph_from_dataframe, load_graph, parse_graph_lines
from .partial_tree import PartialTree, PartialTreeList
from .pipeline import MinimumSpanningTree, MSTConfig, MSTResult, MSTStats, minimum_spanning_tree
from .runner import mst_file
from .structures import Arc, Graph, Neighbor, Vertex

__all__ = [
    "Arc",
    "DisconnectedGraphError",
    "EmptyHeapError",
    "EmptyListError",
    "Graph",
    "GraphFormatError",
    "MSTConfig",
    "MSTError",
    "MSTResult",
    "MSTStats",
    "MinHeap",
    "MinimumSpanningTree",
    "Neighbor",
    "NoMatchError",
    "PartialTree",
    "PartialTreeList",
    "Vertex",
    "graph_from_adjacency_matrix",
    "graph_from_dataframe",
    "load_graph",
    "minimum_spanning_tree",
    "mst_file",
    "parse_graph_lines",
]
