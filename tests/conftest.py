import pytest

from mst_engine.structures import Graph


def build_graph(names, edges):
    graph = Graph(names)
    for first, second, weight in edges:
        graph.add_edge(first, second, weight)
    return graph


@pytest.fixture
def triangle():
    return build_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])


@pytest.fixture
def two_pairs():
    # two cheap pairs joined by a bridge; the first merged tree gets popped again
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("C", "D", 1), ("B", "C", 2), ("A", "D", 3)],
    )
