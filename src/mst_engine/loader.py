"""Helpers that turn graph files and arrays into :class:`Graph` values."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .errors import GraphFormatError
from .structures import Graph, Weight


def parse_weight(token: str) -> Weight:
    try:
        return int(token)
    except ValueError:
        return float(token)


def parse_graph_lines(lines: Iterable[str]) -> Graph:
    """Parse the plain-text graph format.

    The first non-blank line holds the vertex count ``n``, the next ``n``
    lines hold one vertex name each, and every remaining line is an edge
    ``<name> <name> <weight>``.
    """

    numbered = ((number, line.strip()) for number, line in enumerate(lines, start=1))
    content = [(number, line) for number, line in numbered if line]
    if not content:
        raise GraphFormatError("empty graph file")

    header_line, header = content[0]
    try:
        vertex_count = int(header)
    except ValueError:
        raise GraphFormatError(f"expected vertex count, got '{header}'", header_line) from None
    if vertex_count < 0 or len(content) - 1 < vertex_count:
        raise GraphFormatError(f"expected {vertex_count} vertex names", header_line)

    graph = Graph()
    for number, name in content[1 : vertex_count + 1]:
        if len(name.split()) != 1:
            raise GraphFormatError(f"vertex name must be a single token, got '{name}'", number)
        try:
            graph.add_vertex(name)
        except GraphFormatError as exc:
            raise GraphFormatError(str(exc), number) from None

    for number, line in content[vertex_count + 1 :]:
        parts = line.split()
        if len(parts) != 3:
            raise GraphFormatError(f"expected '<vertex> <vertex> <weight>', got '{line}'", number)
        first, second, raw_weight = parts
        try:
            graph.add_edge(first, second, parse_weight(raw_weight))
        except GraphFormatError as exc:
            raise GraphFormatError(str(exc), number) from None
        except ValueError:
            raise GraphFormatError(f"invalid weight '{raw_weight}'", number) from None
    return graph


def load_graph_text(path: str | Path) -> Graph:
    with open(path, "r", encoding="utf-8") as infile:
        return parse_graph_lines(infile)


def graph_from_dataframe(
    dataframe: pd.DataFrame,
    source_column: str = "source",
    target_column: str = "target",
    weight_column: str = "weight",
) -> Graph:
    """Build a graph from an edge-list frame; vertex order is first appearance."""

    for column in (source_column, target_column, weight_column):
        if column not in dataframe.columns:
            raise GraphFormatError(f"column '{column}' not found in edge list")

    weights = pd.to_numeric(dataframe[weight_column], errors="coerce")
    if weights.isna().any():
        bad_row = int(weights[weights.isna()].index[0])
        raise GraphFormatError(f"non-numeric weight in row {bad_row}")

    for column in (source_column, target_column):
        missing = dataframe[column].isna()
        if missing.any():
            bad_row = int(dataframe.index[missing][0])
            raise GraphFormatError(f"missing '{column}' vertex in row {bad_row}")

    sources = dataframe[source_column].astype(str).str.strip()
    targets = dataframe[target_column].astype(str).str.strip()

    graph = Graph()
    for source, target, weight in zip(sources.tolist(), targets.tolist(), weights.tolist()):
        for name in (source, target):
            if name not in graph:
                graph.add_vertex(name)
        graph.add_edge(source, target, weight)
    return graph


def graph_from_adjacency_matrix(matrix: np.ndarray, names: Sequence[str] | None = None) -> Graph:
    """Build a graph from a square weight matrix.

    Only the upper triangle (diagonal included) is read; zero means no edge.
    """

    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise GraphFormatError(f"adjacency matrix must be square, got shape {matrix.shape}")
    size = matrix.shape[0]
    if names is None:
        names = [str(index) for index in range(size)]
    if len(names) != size:
        raise GraphFormatError(f"expected {size} vertex names, got {len(names)}")

    graph = Graph(list(names))
    rows, cols = np.nonzero(np.triu(matrix))
    for i, j in zip(rows.tolist(), cols.tolist()):
        graph.add_edge(names[i], names[j], matrix[i, j].item())
    return graph


def load_graph(
    path: str | Path,
    source_column: str = "source",
    target_column: str = "target",
    weight_column: str = "weight",
) -> Graph:
    """Load a graph from ``path``, picking the reader from its suffix."""

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe = pd.read_csv(path, dtype=str)
    elif suffix in {".xls", ".xlsx"}:
        dataframe = pd.read_excel(path, dtype=str)
    else:
        return load_graph_text(path)
    return graph_from_dataframe(dataframe, source_column, target_column, weight_column)


__all__ = [
    "graph_from_adjacency_matrix",
    "graph_from_dataframe",
    "load_graph",
    "load_graph_text",
    "parse_graph_lines",
    "parse_weight",
]
