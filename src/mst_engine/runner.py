"""Convenience helpers for running the MST engine end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .errors import DisconnectedGraphError
from .loader import load_graph
from .pipeline import MinimumSpanningTree, MSTConfig, MSTResult


def mst_file(
    input_path: str | Path,
    config: Optional[MSTConfig] = None,
) -> MSTResult | None:
    """Load the graph at `input_path` and compute its minimum spanning tree."""

    input_path = Path(input_path)
    config = config or MSTConfig()

    try:
        graph = load_graph(
            input_path,
            source_column=config.source_column,
            target_column=config.target_column,
            weight_column=config.weight_column,
        )
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except OSError as exc:
        print(f"ERROR: Could not read '{input_path}': {exc}")
        return None
    except ValueError as exc:
        # GraphFormatError and pandas parser errors alike
        print(f"ERROR: Could not parse graph in '{input_path}': {exc}")
        return None

    try:
        return MinimumSpanningTree(config).run(graph)
    except DisconnectedGraphError as exc:
        print(f"ERROR: {exc}")
        return None
