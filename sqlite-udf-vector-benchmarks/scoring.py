"""Dot-product scoring and the brute-force NumPy scan.

Both the in-process scan and the SQLite `dot` callback go through
`_sequential_sum`: float32 products accumulated left to right in float32.
Scores from the two paths must be bit-identical, so nothing here goes
through `np.sum` or `np.dot` (pairwise / BLAS summation order).
"""
import numpy as np

TOP_K = 5
BLOCK_ROWS = 8192


def _sequential_sum(products):
    return np.add.accumulate(products, axis=-1, dtype=np.float32).take(-1, axis=-1)


def dot(a, b):
    """Dot product of two equal-length float32 vectors."""
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32)
    if a.shape != b.shape or a.ndim != 1:
        raise ValueError(f"dot needs two vectors of equal length, got {a.shape} and {b.shape}")
    return _sequential_sum(a * b)


def local_scores(query, collection, block_rows=BLOCK_ROWS):
    """Score every row of `collection` against `query`, in input order.

    Args:
        query: (d,) float32 vector
        collection: (n, d) float32 array
        block_rows: rows multiplied per step; bounds the temporary arrays

    Returns:
        (n,) float32 array with scores[i] == dot(query, collection[i])
    """
    query = np.asarray(query, dtype=np.float32)
    collection = np.asarray(collection, dtype=np.float32)
    if collection.ndim != 2 or collection.shape[1] != query.shape[0]:
        raise ValueError(f"cannot score {collection.shape} against query {query.shape}")

    n = collection.shape[0]
    scores = np.empty(n, dtype=np.float32)
    for start in range(0, n, block_rows):
        block = collection[start:start + block_rows]
        scores[start:start + len(block)] = _sequential_sum(block * query)
    return scores


def top_k(scores, k=TOP_K):
    """Highest k scores, descending, as Python floats."""
    ordered = np.sort(np.asarray(scores, dtype=np.float32))[::-1]
    return ordered[:k].tolist()


def max_score(scores):
    # Running max seeded with 0.0, so an empty scan reports 0.0
    return float(np.max(np.asarray(scores, dtype=np.float32), initial=0.0))


if __name__ == "__main__":
    from vectors import generate_vector, generate_vectors, make_rng

    rng = make_rng(42)
    database = generate_vectors(rng, 10_000)
    query = generate_vector(rng)

    scores = local_scores(query, database)
    print(f"Scored {len(scores):,} vectors")
    print(f"Top {TOP_K}: {top_k(scores)}")
    print(f"Row 0 matches dot(): {scores[0] == dot(query, database[0])}")
