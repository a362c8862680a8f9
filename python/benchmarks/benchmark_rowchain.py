import argparse
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

# Ensure we can import rowchain from source tree
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rowchain import add, multiply, subtract  # noqa: E402
from rowchain.sparse import RowListMatrix  # noqa: E402


# ---------- Builders ----------


def build_scipy_csr(m: int, n: int, density: float, seed: int) -> Tuple[sp.csr_matrix, int]:
    rs = np.random.RandomState(seed)
    data_rvs = lambda s: rs.randint(1, 100, size=s).astype(np.int64)
    A_coo = sp.random(m, n, density=density, format="coo", random_state=rs, data_rvs=data_rvs)
    return A_coo.tocsr(), int(A_coo.nnz)


def build_rowchain_from_scipy(A_scipy: sp.csr_matrix) -> RowListMatrix:
    coo = A_scipy.tocoo()
    entries = zip(coo.row.tolist(), coo.col.tolist(), coo.data.tolist())
    return RowListMatrix.from_entries(coo.shape, entries)


def to_dense(result: Any) -> np.ndarray:
    if isinstance(result, RowListMatrix):
        return result.toarray()
    return np.asarray(result.toarray(), dtype=np.int64)


# ---------- Timing helpers ----------


def time_op(fn: Callable[[], Any], warmup: int, repeat: int) -> List[float]:
    for _ in range(warmup):
        fn()
    times: List[float] = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def summarize(name: str, times: List[float]) -> Optional[Dict[str, float]]:
    if not times:
        return None
    arr = np.array(times, dtype=np.float64)
    return {
        "name": name,
        "min_ms": float(arr.min() * 1e3),
        "median_ms": float(np.median(arr) * 1e3),
        "mean_ms": float(arr.mean() * 1e3),
    }


class Backend:
    SCIPY = "scipy"
    ROWCHAIN = "rowchain"


def main():
    p = argparse.ArgumentParser(description="rowchain add/sub/mul benchmarks against scipy.sparse")
    p.add_argument("--m", type=int, default=500)
    p.add_argument("--n", type=int, default=500)
    p.add_argument("--k", type=int, default=500, help="Columns of B for mul")
    p.add_argument("--density", type=float, default=0.01)
    p.add_argument("--warmup", type=int, default=1)
    p.add_argument("--repeat", type=int, default=3)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--no_scipy", action="store_true")
    p.add_argument("--validate", action="store_true")
    p.add_argument("--ops", type=str, default="all", help="Comma-separated ops: add, sub, mul")
    args = p.parse_args()

    A_scipy, nnz_a = build_scipy_csr(args.m, args.n, args.density, args.seed)
    B_scipy, nnz_b = build_scipy_csr(args.m, args.n, args.density, args.seed + 101)
    M_scipy, _ = build_scipy_csr(args.n, args.k, args.density, args.seed + 202)
    A = build_rowchain_from_scipy(A_scipy)
    B = build_rowchain_from_scipy(B_scipy)
    M = build_rowchain_from_scipy(M_scipy)

    wanted = {op.strip().lower() for op in (args.ops.split(",") if args.ops else [])}
    if "all" in wanted or not wanted:
        wanted = {"add", "sub", "mul"}

    cases = {
        "add": (lambda: A_scipy + B_scipy, lambda: add(A, B)),
        "sub": (lambda: A_scipy - B_scipy, lambda: subtract(A, B)),
        "mul": (lambda: A_scipy @ M_scipy, lambda: multiply(A, M)),
    }

    results: List[Dict[str, float]] = []
    for op in ("add", "sub", "mul"):
        if op not in wanted:
            continue
        run_scipy, run_rowchain = cases[op]
        ref = None
        if not args.no_scipy:
            stats = summarize(f"{Backend.SCIPY}:{op}", time_op(run_scipy, args.warmup, args.repeat))
            if stats:
                results.append(stats)
            ref = run_scipy()
        stats = summarize(f"{Backend.ROWCHAIN}:{op}", time_op(run_rowchain, args.warmup, args.repeat))
        if stats:
            results.append(stats)
        if args.validate and ref is not None:
            if not np.array_equal(to_dense(run_rowchain()), to_dense(ref)):
                raise AssertionError(f"Validation failed: rowchain {op} vs scipy")

    # ---- print summary ----
    print(
        f"rowchain Benchmarks: m={args.m} n={args.n} k={args.k} density={args.density} "
        f"nnz(A)={nnz_a} nnz(B)={nnz_b}"
    )
    for r in results:
        print(
            f"{r['name']:>16}: min {r['min_ms']:.3f} ms | median {r['median_ms']:.3f} ms | mean {r['mean_ms']:.3f} ms"
        )


if __name__ == "__main__":
    main()
