#!/usr/bin/env python3
"""
optverify Benchmark: validation time against problem size

Each instance is solved with scipy.optimize.linprog (HiGHS) and the returned
solution is verified with optverify.validate.
"""

import time
import numpy as np
from scipy import sparse
from scipy.optimize import linprog

import optverify

print(f"optverify version: {optverify.__version__}")
print()


def generate_lp(n, m, density=0.1, seed=42):
    """Generate a random sparse LP with a feasible point at x = ones."""
    np.random.seed(seed)

    A = sparse.random(m, n, density=density, format='csr', dtype=np.float64)
    A = A + sparse.eye(m, n, format='csr') * 0.1

    x_feas = np.ones(n)
    slack = np.random.rand(m) * 0.5
    b = A @ x_feas + slack

    return {
        'A': A,
        'b': b,
        'csense': 'L' * m,
        'lb': np.zeros(n),
        'ub': np.ones(n) * 10,
        'c': np.random.randn(n),
    }


def solve_scipy(problem):
    """Solve with scipy.optimize.linprog (HiGHS backend)."""
    bounds = list(zip(problem['lb'], problem['ub']))
    result = linprog(
        problem['c'], A_ub=problem['A'], b_ub=problem['b'], bounds=bounds,
        method='highs', options={'presolve': True, 'time_limit': 60},
    )
    return result.x if result.success else None


def benchmark_single(n, m, density=0.1, seed=42):
    """Solve one instance and time its verification."""
    print(f"  Generating LP: n={n}, m={m}, density={density:.1%}")
    problem = generate_lp(n, m, density, seed)

    start = time.perf_counter()
    x = solve_scipy(problem)
    solve_time = time.perf_counter() - start
    if x is None:
        print("    SciPy failed to solve, skipping")
        return None

    start = time.perf_counter()
    result = optverify.validate(problem, x=x, tol=1e-6, verbose=False)
    validate_time = time.perf_counter() - start

    print(f"    solve:    {solve_time*1000:8.1f} ms")
    print(f"    validate: {validate_time*1000:8.1f} ms, status={result.status}, "
          f"obj={result.objective:10.4f}, violated rows={len(result.invalid_constraints)}")
    return solve_time, validate_time


def benchmark_scaling():
    """Benchmark across different problem sizes."""
    print("=" * 70)
    print("Validation Scaling Benchmark")
    print("=" * 70)

    sizes = [
        (100, 50, 0.2),
        (1000, 500, 0.05),
        (5000, 2500, 0.01),
        (10000, 5000, 0.005),
    ]

    rows = []
    for n, m, density in sizes:
        print(f"\nProblem size: {n} vars, {m} constraints")
        timing = benchmark_single(n, m, density)
        if timing is not None:
            rows.append((n, m) + timing)

    print("\n" + "=" * 70)
    print("Summary")
    print("=" * 70)
    print(f"{'n':>8} {'m':>8} {'solve (ms)':>12} {'validate (ms)':>14}")
    print("-" * 70)
    for n, m, solve_time, validate_time in rows:
        print(f"{n:>8} {m:>8} {solve_time*1000:>12.1f} {validate_time*1000:>14.1f}")


def benchmark_batch():
    """Benchmark validate_batch over many small problems."""
    print("\n" + "=" * 70)
    print("Batch Validation Benchmark (many small LPs)")
    print("=" * 70)

    n, m = 50, 25
    for batch_size in [10, 100, 1000]:
        problems = [generate_lp(n, m, density=0.3, seed=42 + i) for i in range(batch_size)]
        solutions = [np.ones(n)] * batch_size

        start = time.perf_counter()
        results = optverify.validate_batch(problems, solutions)
        elapsed = time.perf_counter() - start

        valid = sum(r.is_valid for r in results)
        print(f"  batch {batch_size:>5}: {elapsed*1000:.1f} ms total, "
              f"{elapsed/batch_size*1000:.3f} ms/problem, {valid} valid")


if __name__ == "__main__":
    benchmark_scaling()
    benchmark_batch()
