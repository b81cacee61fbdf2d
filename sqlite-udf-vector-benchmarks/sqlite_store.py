"""Brute-force dot-product search inside SQLite.

Vectors live in a single BLOB column. A deterministic scalar function
`dot(blob, blob)` is registered on the connection, so the query engine does
the scan and the ordering while Python scores one row per callback.

No external dependencies beyond numpy; uses Python's built-in sqlite3 module.
"""
import sqlite3

import codec
from scoring import TOP_K, dot


def sql_dot(blob_a, blob_b):
    """Scalar function body for `dot`: decode both blobs and score them."""
    return float(dot(codec.decode(blob_a), codec.decode(blob_b)))


def open_store(db_path=":memory:"):
    """Open a connection with `dot` registered and the `data` table created."""
    conn = sqlite3.connect(db_path)
    conn.create_function("dot", 2, sql_dot, deterministic=True)
    conn.execute("CREATE TABLE IF NOT EXISTS data (id INTEGER PRIMARY KEY, v BLOB)")
    return conn


def insert_vectors(conn, collection):
    """Insert every vector of `collection` in one transaction.

    Any failure, including a vector that does not encode, rolls back the
    whole batch and propagates. Returns the number of rows inserted.
    """
    with conn:
        conn.executemany("INSERT INTO data (v) VALUES (?)", codec.encode_all(collection))
    return len(collection)


def count_rows(conn):
    return conn.execute("SELECT COUNT(*) FROM data").fetchone()[0]


def sql_top_k(conn, query, k=TOP_K):
    """Top-k dot products against `query`, highest first.

    Order among equal scores is whatever SQLite's sorter produces.
    """
    rows = conn.execute(
        "SELECT dot(data.v, ?) AS d FROM data ORDER BY d DESC LIMIT ?",
        (codec.encode(query), k),
    ).fetchall()
    return [row[0] for row in rows]


if __name__ == "__main__":
    from vectors import generate_vector, generate_vectors, make_rng

    rng = make_rng(42)
    database = generate_vectors(rng, 10_000)
    query = generate_vector(rng)

    conn = open_store()
    n = insert_vectors(conn, database)
    print(f"Inserted {n:,} rows ({count_rows(conn):,} in table)")
    print(f"Top {TOP_K} via SQL: {sql_top_k(conn, query)}")
    conn.close()
