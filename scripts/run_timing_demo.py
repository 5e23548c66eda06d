#!/usr/bin/env python
"""Run the timing pipeline over a few example workloads."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json

import numpy as np

from arbitime.timing.formatter import format_time
from arbitime.timing.logger import log_time
from arbitime.timing.timer import measure


def arange_sum(n: int) -> int:
    """Sum of 1..=n computed with numpy."""
    return int(np.arange(1, n + 1, dtype=np.int64).sum())


def main():
    parser = argparse.ArgumentParser(description="Time example workloads")
    parser.add_argument("--n", type=int, default=1000, help="Workload size (sum of 1..n)")
    parser.add_argument("--blocks", type=int, default=2, help="Number of labelled blocks")
    parser.add_argument("--output", type=str, default=None, help="Optional JSON summary path")
    args = parser.parse_args()

    if args.n < 1:
        parser.error("--n must be positive")
    if args.blocks < 0:
        parser.error("--blocks must be non-negative")

    # Raw duration
    duration, total = measure(lambda: arange_sum(args.n))
    print(f"measure: result={total}, duration={duration} ({duration.nanos}ns)")

    # Formatted message
    message, labeled_total = format_time("Summing numbers", lambda: arange_sum(args.n))
    print(f"format_time: {message} -> {labeled_total}")

    # Multiple labelled blocks, evaluated in order
    pairs = [
        (f"Block {i + 1}", lambda i=i: arange_sum(args.n * (i + 1)))
        for i in range(args.blocks)
    ]
    formatted = format_time(pairs)
    for message, result in formatted:
        print(f"format_time: {message} -> {result}")

    # Logged to stderr
    logged = log_time("Database query", lambda: 42)
    unlabeled = log_time(lambda: arange_sum(args.n))
    block_results = log_time(pairs)
    print(f"log_time: {logged}, {unlabeled}, {block_results}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        summary = {
            "n": args.n,
            "measure_nanos": duration.nanos,
            "measure_result": total,
            "blocks": [
                {"message": message, "result": result}
                for message, result in formatted
            ],
        }
        with open(output_path, "w") as f:
            json.dump(summary, f, indent=2)
        print(f"\nSummary saved to {output_path}")


if __name__ == "__main__":
    main()
