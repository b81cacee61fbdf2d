"""
Benchmark: NumPy brute-force scan vs the same scan as a SQLite query.

Generates 1M random 512-d float32 vectors plus one query vector, loads the
vectors into an in-memory SQLite table, then times:
- a local scan scoring every vector against the query
- SELECT dot(v, ?) ... ORDER BY d DESC LIMIT 5, with `dot` as a Python UDF

Prints four lines to stdout: local/db elapsed milliseconds and the best
score each path saw. Progress goes to stderr.

Each path is timed once: no warmup, no repeats, so numbers are noisy.

Usage:
    python benchmark.py                 # entropy-seeded, every run differs
    BENCH_SEED=42 python benchmark.py   # reproducible dataset
"""
import os
import sys
import sqlite3
import time
from dataclasses import dataclass, field

import numpy as np

from scoring import TOP_K, local_scores, max_score, top_k
from sqlite_store import insert_vectors, open_store, sql_top_k
from vectors import DIM, N_VECTORS, generate_vector, generate_vectors, make_rng


def log(msg=""):
    print(msg, file=sys.stderr, flush=True)


def read_seed(environ=os.environ):
    """BENCH_SEED as an int, or None to seed from OS entropy."""
    raw = environ.get("BENCH_SEED", "").strip()
    if not raw:
        return None
    return int(raw)


@dataclass
class BenchmarkResult:
    n_vectors: int
    local_ms: int
    db_ms: int
    max_local: float
    max_db: float
    local_top: list = field(default_factory=list)
    db_top: list = field(default_factory=list)

    @property
    def paths_agree(self) -> bool:
        return self.local_top == self.db_top


def elapsed_ms(t0, t1):
    """Whole milliseconds between two perf_counter readings, truncated."""
    return int((t1 - t0) * 1000)


def run_benchmark(n_vectors=N_VECTORS, seed=None):
    """Generate, ingest, and time both scans once. Any failure propagates."""
    rng = make_rng(seed)

    t0 = time.perf_counter()
    database = generate_vectors(rng, n_vectors)
    query = generate_vector(rng)
    log(f"Generated {n_vectors:,} vectors ({DIM}d, {database.nbytes / 1e6:.0f}MB) "
        f"in {time.perf_counter() - t0:.2f}s")

    conn = open_store()
    try:
        t0 = time.perf_counter()
        insert_vectors(conn, database)
        log(f"Inserted {n_vectors:,} rows in {time.perf_counter() - t0:.2f}s")

        t0 = time.perf_counter()
        local = local_scores(query, database)
        local_ms = elapsed_ms(t0, time.perf_counter())

        t0 = time.perf_counter()
        db_top = sql_top_k(conn, query, TOP_K)
        db_ms = elapsed_ms(t0, time.perf_counter())
    finally:
        conn.close()

    result = BenchmarkResult(
        n_vectors=n_vectors,
        local_ms=local_ms,
        db_ms=db_ms,
        max_local=max_score(local),
        max_db=db_top[0] if db_top else 0.0,
        local_top=top_k(local, TOP_K),
        db_top=db_top,
    )
    log(f"Top-{TOP_K} agreement between paths: {result.paths_agree}")
    return result


def format_report(result):
    """Four report lines; scores print as shortest float32 text."""
    return "\n".join([
        f"local {result.local_ms}ms",
        f"db {result.db_ms}ms",
        f"max local {np.float32(result.max_local)}",
        f"max db {np.float32(result.max_db)}",
    ])


def main():
    # Print the traceback of a failing `dot` callback instead of only the
    # generic "user-defined function raised exception"
    sqlite3.enable_callback_tracebacks(True)
    seed = read_seed()
    log("SQLite UDF vs NumPy dot-product benchmark")
    log(f"Vectors: {N_VECTORS:,} x {DIM}d, k={TOP_K}, seed: {'entropy' if seed is None else seed}")

    result = run_benchmark(N_VECTORS, seed)
    print(format_report(result), flush=True)


if __name__ == "__main__":
    main()
