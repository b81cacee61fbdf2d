"""Random float32 vectors for the dot-product benchmark.

The collection and the query come out of one Generator, so the stream
advances across every vector in a run and no two vectors repeat.
"""
import numpy as np

DIM = 512
N_VECTORS = 1_000_000


def make_rng(seed=None):
    """Entropy-seeded Generator, or a reproducible one when seed is given."""
    return np.random.default_rng(seed)


def generate_vectors(rng, count, dim=DIM):
    """Draw `count` uniform [0, 1) float32 vectors as a read-only (count, dim) array."""
    vecs = rng.random((count, dim), dtype=np.float32)
    vecs.flags.writeable = False
    return vecs


def generate_vector(rng, dim=DIM):
    vec = rng.random(dim, dtype=np.float32)
    vec.flags.writeable = False
    return vec


if __name__ == "__main__":
    rng = make_rng(42)
    database = generate_vectors(rng, 1000)
    query = generate_vector(rng)
    print(f"Collection: {database.shape} {database.dtype}, {database.nbytes / 1e6:.1f} MB")
    print(f"Query: {query.shape}, first values {query[:4]}")
