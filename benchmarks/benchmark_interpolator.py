#!/usr/bin/env python3
"""
Benchmark MultiTapSincInterpolator per-sample cost against K.

Run with: python benchmarks/benchmark_interpolator.py

Copyright (c) 2026 R. Dunbar Poor and sincdelay contributors
MIT License
"""

import time
from dataclasses import dataclass

import numpy as np

from sincdelay import MultiTapSincInterpolator


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""
    name: str
    samples_per_run: int
    times_s: list[float]

    @property
    def mean_time_ms(self) -> float:
        return np.mean(self.times_s) * 1000

    @property
    def ns_per_sample(self) -> float:
        return np.mean(self.times_s) * 1e9 / self.samples_per_run


def run(name: str, line: MultiTapSincInterpolator, samples: np.ndarray, runs: int = 5) -> BenchmarkResult:
    # warm-up: first call compiles the block kernel
    line.process(samples[:64])
    times = []
    for _ in range(runs):
        line.reset()
        t0 = time.perf_counter()
        line.process(samples)
        times.append(time.perf_counter() - t0)
    return BenchmarkResult(name, len(samples), times)


def main():
    samples = np.random.default_rng(0).normal(size=44100)
    results = [run("fixed", MultiTapSincInterpolator(4096, 2, tau1=100.5, tau2=100.5), samples)]
    for k in (0, 1, 2, 4, 8, 16):
        line = MultiTapSincInterpolator(4096, k, tau1=100.5, tau2=110.7, alpha=0.5)
        results.append(run(f"K={k} ({2 * k + 2} taps)", line, samples))

    print(f"{'config':<18} {'mean ms/s':>10} {'ns/sample':>10}")
    for r in results:
        print(f"{r.name:<18} {r.mean_time_ms:>10.2f} {r.ns_per_sample:>10.0f}")


if __name__ == "__main__":
    main()
