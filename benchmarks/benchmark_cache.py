import time

import numpy as np

import cachematrix


def benchmark_inverse(n, iterations=20):
    print(f"\n--- Benchmarking cached inverse (N={n}) ---")

    a_np = np.random.rand(n, n)
    # Make it diagonally dominant to ensure invertibility
    a_np += np.eye(n) * n

    cm = cachematrix.CachedMatrix(a_np)

    start = time.perf_counter()
    cachematrix.resolve_inverse(cm)
    first = time.perf_counter() - start
    print(f"First call (miss):  {first:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        cachematrix.resolve_inverse(cm)
    cached = (time.perf_counter() - start) / iterations
    print(f"Cached call (hit):  {cached:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        np.linalg.inv(a_np)
    raw = (time.perf_counter() - start) / iterations
    print(f"NumPy inv each time: {raw:.6f} s")

    speedup = raw / cached if cached > 0 else 0
    print(f"Speedup:            {speedup:.1f}x")
    print(f"Stats:              {cm.stats.as_dict()}")


if __name__ == "__main__":
    for n in (64, 256, 1024):
        benchmark_inverse(n)
