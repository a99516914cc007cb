"""Core pipeline for the MST engine."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .errors import DisconnectedGraphError, EmptyHeapError
from .partial_tree import PartialTree, PartialTreeList
from .structures import Arc, Graph, Weight

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class MSTStats:
    """Summary metrics for one MST run."""

    vertex_count: int
    arc_count: int
    discarded_arcs: int
    merges: int
    runtime_seconds: float


@dataclass
class MSTResult:
    """Result bundle returned by :meth:`MinimumSpanningTree.run`."""

    arcs: List[Arc]
    total_weight: Weight
    stats: MSTStats

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [(arc.v1.name, arc.v2.name, arc.weight) for arc in self.arcs],
            columns=["source", "target", "weight"],
        )


@dataclass
class MSTConfig:
    """Configuration parameters for :class:`MinimumSpanningTree`."""

    verbose: bool = False
    use_tqdm: bool | None = None
    compress_paths: bool | None = None
    source_column: str = "source"
    target_column: str = "target"
    weight_column: str = "weight"

    def __post_init__(self) -> None:
        if self.compress_paths is None:
            self.compress_paths = os.getenv("MST_COMPRESS_PATHS", "").strip().lower() in _TRUTHY


class MinimumSpanningTree:
    """Build a minimum spanning tree by repeatedly merging partial trees."""

    def __init__(self, config: MSTConfig | None = None) -> None:
        self.config = config or MSTConfig()
        self._discarded = 0

    def initialize(self, graph: Graph) -> PartialTreeList:
        """Build one single-vertex partial tree per graph vertex, in graph order."""

        graph.reset_roots()
        ptlist = PartialTreeList()
        for vertex in graph:
            tree = PartialTree(vertex)
            for neighbor in vertex.neighbors:
                tree.arcs.insert(Arc(vertex, neighbor.vertex, neighbor.weight))
            ptlist.append(tree)
        return ptlist

    def execute(self, ptlist: PartialTreeList) -> List[Arc]:
        """Merge partial trees until one remains and return the chosen arcs."""

        compress = bool(self.config.compress_paths)
        self._discarded = 0
        selected: List[Arc] = []

        steps: Iterable[int] = range(max(len(ptlist) - 1, 0))
        if len(ptlist) > 1 and self._use_tqdm:
            steps = tqdm(steps, desc="   Merging partial trees", unit="merge")

        for _ in steps:
            ptx = ptlist.remove()
            arc = self._cheapest_outgoing_arc(ptx, compress)
            selected.append(arc)
            pty = ptlist.remove_tree_containing(arc.v2, compress)
            ptx.merge(pty)
            ptlist.append(ptx)

        return selected

    def run(self, graph: Graph) -> MSTResult:
        """Initialize from ``graph``, run the merge loop and summarize the result."""

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- MST Process Started ---")
            print(f"\n1. Building initial partial trees for {len(graph)} vertices...")

        t0 = time.time()
        ptlist = self.initialize(graph)
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Merging partial trees...")
        arcs = self.execute(ptlist)
        if verbose:
            print(f"   Selected {len(arcs)} arcs, discarded {self._discarded} cycle-closing arcs.")
            print(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        total_weight = sum(arc.weight for arc in arcs)
        stats = MSTStats(
            vertex_count=len(graph),
            arc_count=len(arcs),
            discarded_arcs=self._discarded,
            merges=len(arcs),
            runtime_seconds=elapsed,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Vertices: {stats.vertex_count}")
            print(f"   - MST arcs: {stats.arc_count}")
            print(f"   - Total weight: {total_weight}")
            print(f"\n--- MST Process Finished in {elapsed:.2f} seconds ---")

        return MSTResult(arcs=arcs, total_weight=total_weight, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE and self.config.verbose

    def _cheapest_outgoing_arc(self, ptx: PartialTree, compress: bool) -> Arc:
        root = ptx.root.get_root(compress)
        heap = ptx.arcs
        while True:
            try:
                arc = heap.delete_min()
            except EmptyHeapError as exc:
                raise DisconnectedGraphError(
                    f"graph is disconnected: component rooted at {root.name!r} has no outgoing edge",
                    component_root=root,
                ) from exc
            # self-loops and arcs back into the component would close a cycle
            if arc.v2.get_root(compress) is not root:
                return arc
            self._discarded += 1


def minimum_spanning_tree(graph: Graph, config: MSTConfig | None = None) -> List[Arc]:
    """Return the MST arcs of ``graph`` in selection order."""

    return MinimumSpanningTree(config).run(graph).arcs


__all__ = [
    "MSTConfig",
    "MSTResult",
    "MSTStats",
    "MinimumSpanningTree",
    "minimum_spanning_tree",
]
