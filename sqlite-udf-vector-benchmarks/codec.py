"""BLOB layout for vectors stored in SQLite.

A vector is 512 consecutive native-endian float32 values, 2048 bytes in
total. The same layout is used for the `v` column and for the query
parameter handed to the `dot` SQL function. Encoding and decoding only ever
happen on one machine within one run, so the layout is not portable.
"""
import numpy as np

from vectors import DIM

FLOAT_DTYPE = np.dtype("=f4")
VECTOR_BYTES = DIM * FLOAT_DTYPE.itemsize  # 2048


class CodecError(ValueError):
    """A buffer or array that does not match the vector layout."""


def encode(vector):
    arr = np.asarray(vector, dtype=FLOAT_DTYPE)
    if arr.shape != (DIM,):
        raise CodecError(f"expected a vector of shape ({DIM},), got {arr.shape}")
    return arr.tobytes()


def decode(blob):
    """Decode a 2048-byte buffer into a read-only float32 vector.

    Raises CodecError for any other length; nothing is truncated or padded.
    """
    if not isinstance(blob, (bytes, bytearray, memoryview)):
        raise CodecError(f"expected a vector blob, got {type(blob).__name__}")
    # Byte count, not item count: a memoryview may hold multi-byte items
    nbytes = memoryview(blob).nbytes
    if nbytes != VECTOR_BYTES:
        raise CodecError(f"expected {VECTOR_BYTES} bytes, got {nbytes}")
    return np.frombuffer(blob, dtype=FLOAT_DTYPE)


def encode_all(collection):
    """Yield one (blob,) parameter tuple per row, for executemany."""
    for vec in collection:
        yield (encode(vec),)
