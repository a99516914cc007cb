"""Command line entry point for the MST engine."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .pipeline import MSTConfig
from .runner import mst_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute the minimum spanning tree of a weighted graph.")
    parser.add_argument("input", type=Path, help="Path to a graph text file or a CSV/Excel edge list")
    parser.add_argument("--source-column", default="source", help="Edge list column holding the first vertex")
    parser.add_argument("--target-column", default="target", help="Edge list column holding the second vertex")
    parser.add_argument("--weight-column", default="weight", help="Edge list column holding the edge weight")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress and timings")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument(
        "--compress-paths",
        dest="compress_paths",
        action="store_true",
        default=None,
        help="Compress union-find root chains while resolving components (env: MST_COMPRESS_PATHS)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = MSTConfig(
        verbose=args.verbose,
        use_tqdm=False if args.disable_tqdm else None,
        compress_paths=args.compress_paths,
        source_column=args.source_column,
        target_column=args.target_column,
        weight_column=args.weight_column,
    )

    result = mst_file(args.input, config)
    if result is None:
        return 1

    frame = result.to_dataframe()
    if not frame.empty:
        print(frame.to_string(index=False))
    print(f"Total weight: {result.total_weight}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
