#!/usr/bin/env python3
"""Generate solved mazes across several sizes and sort metadata by path length."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Tuple

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazesearch.dataset import MazeGenerator
from mazesearch.search.algorithms import Algorithm, algorithm_names


def _parse_size(value: str) -> Tuple[int, int]:
    try:
        rows, cols = (int(part) for part in value.lower().split("x"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Size must look like ROWSxCOLS, got {value!r}") from exc
    return rows, cols


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--sizes",
        type=_parse_size,
        nargs="+",
        default=[(5, 5), (11, 11), (21, 21), (41, 41)],
        help="Maze sizes as ROWSxCOLS",
    )
    parser.add_argument("--per-size", type=int, default=10, help="Mazes generated for each size")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data/maze_suite"),
        help="Directory to write maze files",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        default=None,
        help="Optional path for the length-sorted metadata JSON",
    )
    parser.add_argument(
        "--algorithm",
        choices=algorithm_names(),
        default=Algorithm.BFS.value,
        help="Algorithm used for the reference solutions",
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    metadata_path = args.metadata or (args.output_dir / "mazes.json")
    metadata_path.parent.mkdir(parents=True, exist_ok=True)

    records: List[dict] = []
    total = len(args.sizes) * args.per_size
    for size_index, (rows, cols) in enumerate(args.sizes):
        seed = None if args.seed is None else args.seed + size_index
        generator = MazeGenerator(
            output_dir=args.output_dir,
            rows=rows,
            cols=cols,
            algorithm=args.algorithm,
            seed=seed,
        )
        for _ in range(args.per_size):
            record_dict = generator.create_random_maze().to_dict()
            record_dict["path_length"] = len(record_dict["solution_path"])
            records.append(record_dict)
            print(
                f"[{len(records)}/{total}] generated {record_dict['id']} "
                f"({rows}x{cols}, path length {record_dict['path_length']})"
            )

    records.sort(key=lambda item: (item["path_length"], item["id"]))

    metadata_path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    print(f"Wrote {len(records)} mazes to {metadata_path}")


if __name__ == "__main__":
    main()
