#!/usr/bin/env python3
"""Benchmark script for interpose performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any

ITERATIONS = 100_000


def benchmark_import_time() -> float:
    """Measure import time of interpose package."""
    start = time.perf_counter()
    import interpose  # noqa: F401

    return time.perf_counter() - start


def benchmark_class_declaration() -> float:
    """Measure declaring 1k classes with one decorated method each."""
    from interpose import Decorated, Decorator

    class Passthrough(Decorator):
        def call(self, receiver: Any, /, *args: Any, **kwargs: Any) -> Any:
            return self.undecorated(receiver, *args, **kwargs)

    start = time.perf_counter()
    for _ in range(1000):

        class Owner(Decorated):
            decorate(Passthrough)  # noqa: F821

            def work(self, n: int) -> int:
                return n

    return time.perf_counter() - start


def benchmark_dispatch(chain_length: int) -> float:
    """Measure calls through a decorated method with chain_length decorators."""
    from interpose import Decorator, declare

    class Counter(Decorator):
        def call(self, receiver: Any, /, n: int) -> int:
            return n

    class Owner:
        pass

    with declare(Owner) as decl:
        for _ in range(chain_length):
            decl.decorate(Counter)
        decl.define("work", lambda self, n: n)

    instance = Owner()
    start = time.perf_counter()
    for i in range(ITERATIONS):
        instance.work(i)  # type: ignore[attr-defined]
    return time.perf_counter() - start


def benchmark_plain_call() -> float:
    """Baseline: undecorated method calls."""

    class Owner:
        def work(self, n: int) -> int:
            return n

    instance = Owner()
    start = time.perf_counter()
    for i in range(ITERATIONS):
        instance.work(i)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run interpose benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": "Class Declaration (1k classes)",
            "unit": "seconds",
            "value": benchmark_class_declaration(),
        },
        {
            "name": f"Plain Call ({ITERATIONS // 1000}k calls)",
            "unit": "seconds",
            "value": benchmark_plain_call(),
        },
    ]
    for chain_length in (1, 4):
        results.append(
            {
                "name": f"Dispatch, {chain_length} decorator(s) ({ITERATIONS // 1000}k calls)",
                "unit": "seconds",
                "value": benchmark_dispatch(chain_length),
            }
        )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
