"""Benchmark: CodepointSet range mutation and serialization latency.

Measures per-call latency for ``set_range`` over spans that cover many
whole words, and for ``serialize`` on a sparse and a dense table.
"""
from __future__ import annotations

import json
import sys
import time
from collections.abc import Callable
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from runes.core import MAX_RUNE
from runes.table import CodepointSet

_WARMUP: int = 3
_ITERATIONS: int = 20


def _measure(operation: str, call: Callable[[], object], iterations: int) -> dict[str, object]:
    for _ in range(_WARMUP):
        call()

    latencies: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        call()
        latencies.append((time.perf_counter() - start) * 1000)

    latencies.sort()
    total_seconds = sum(latencies) / 1000
    return {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total_seconds, 4),
        "ops_per_second": round(iterations / total_seconds, 1) if total_seconds else 0.0,
        "avg_latency_ms": round(sum(latencies) / iterations, 4),
        "p50_ms": round(latencies[iterations // 2], 4),
        "p95_ms": round(latencies[int(iterations * 0.95) - 1], 4),
    }


def bench_set_range(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark ``set_range`` over the whole codespace."""
    table = CodepointSet()
    return _measure("set_range", lambda: table.set_range(1, MAX_RUNE - 1), iterations)


def bench_serialize(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark ``serialize`` on a table of scattered short runs."""
    table = CodepointSet()
    for start in range(0, 0x3000, 7):
        table.set_range(start, start + 3)
    table.set_range(0x20000, 0x2A6DF)
    return _measure("serialize", table.serialize, iterations)


def main() -> None:
    results = [bench_set_range(), bench_serialize()]
    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
