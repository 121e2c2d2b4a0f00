"""Benchmarks for piecewise cubic Bezier lookup.

Compares batched lookups against one lookup per query and shows how the
cost scales with the number of queries and segments.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchbezier import Point, curve_lookup, curve_smooth


def time_call(
    func: Callable, *args: Any, warmup: int = 3, iterations: int = 10
) -> tuple[float, float]:
    """Return the mean and standard deviation of the call time in seconds."""
    for _ in range(warmup):
        func(*args)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return float(np.mean(times)), float(np.std(times))


def report(name: str, timing: tuple[float, float]) -> None:
    mean, std = timing
    print(f"{name:<36} {mean * 1e3:9.3f} ms +/- {std * 1e3:.3f} ms")


def make_curve(num_segments: int, seed: int | None = None) -> Point:
    """Smooth curve through anchors at unit spacing with random heights."""
    if seed is not None:
        torch.manual_seed(seed)

    x = torch.arange(num_segments + 1, dtype=torch.get_default_dtype())
    heights = torch.cumsum(torch.rand(num_segments + 1), dim=0)
    return curve_smooth(torch.stack([x, heights], dim=-1))


def lookup_each(x: torch.Tensor, curve: Point) -> list[torch.Tensor]:
    return [curve_lookup(v, curve) for v in x]


class BenchCurveLookup:
    """Benchmarks for curve_lookup."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _time(self, func: Callable, *args: Any) -> tuple[float, float]:
        return time_call(
            func, *args, warmup=self.warmup, iterations=self.iterations
        )

    def bench_batched_vs_loop(
        self, num_queries: int = 200, num_segments: int = 8
    ) -> None:
        """Compare one batched lookup with a Python loop of scalar lookups."""
        curve = make_curve(num_segments, seed=42)
        x = torch.rand(num_queries) * num_segments

        batched = self._time(curve_lookup, x, curve)
        looped = self._time(lookup_each, x, curve)

        report(f"Batched (queries={num_queries})", batched)
        report(f"Loop (queries={num_queries})", looped)
        print(f"  Speedup: {looped[0] / batched[0]:.1f}x")

    def run_all(self) -> None:
        print("=" * 60)
        print("Curve lookup benchmarks")
        print("=" * 60)
        self.bench_batched_vs_loop()

    def run_scaling(self) -> None:
        """Show how lookup time grows with queries and segments."""
        print("=" * 60)
        print("Scaling")
        print("=" * 60)

        for num_queries in (100, 1000, 10000, 100000):
            curve = make_curve(8, seed=0)
            x = torch.rand(num_queries) * 8
            timing = self._time(curve_lookup, x, curve)
            report(f"queries={num_queries}, segments=8", timing)

        for num_segments in (1, 16, 256):
            curve = make_curve(num_segments, seed=0)
            x = torch.rand(10000) * num_segments
            timing = self._time(curve_lookup, x, curve)
            report(f"queries=10000, segments={num_segments}", timing)


if __name__ == "__main__":
    bench = BenchCurveLookup(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
