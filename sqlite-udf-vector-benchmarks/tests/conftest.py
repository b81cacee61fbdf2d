"""
Shared pytest fixtures for the dot-product benchmark tests.
"""

import numpy as np
import pytest

from sqlite_store import open_store
from vectors import DIM, generate_vector, generate_vectors, make_rng


@pytest.fixture
def rng():
    return make_rng(1234)


@pytest.fixture
def collection(rng):
    """Small random collection; the 1M dataset is never built in tests."""
    return generate_vectors(rng, 257)


@pytest.fixture
def query(rng, collection):
    # Depends on collection so the query is drawn after it, as in a real run
    return generate_vector(rng)


@pytest.fixture
def store():
    conn = open_store()
    yield conn
    conn.close()


@pytest.fixture
def padded():
    """Factory for DIM-length float32 vectors starting with the given values, zeros after."""

    def _padded(*values):
        vec = np.zeros(DIM, dtype=np.float32)
        vec[:len(values)] = values
        return vec

    return _padded
