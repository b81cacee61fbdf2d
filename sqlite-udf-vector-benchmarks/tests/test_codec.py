"""
Tests for the 2048-byte vector BLOB layout.
"""

import numpy as np
import pytest

from codec import VECTOR_BYTES, CodecError, decode, encode, encode_all
from vectors import DIM


def test_encode_is_always_2048_bytes(collection):
    assert VECTOR_BYTES == 2048
    for vec in collection[:20]:
        assert len(encode(vec)) == VECTOR_BYTES


def test_round_trip_is_bit_exact(collection):
    for vec in collection[:20]:
        decoded = decode(encode(vec))
        assert decoded.dtype == np.float32
        assert decoded.tobytes() == vec.tobytes()


def test_round_trip_keeps_special_values():
    vec = np.zeros(DIM, dtype=np.float32)
    vec[:5] = [-0.0, np.inf, -np.inf, np.finfo(np.float32).tiny, np.finfo(np.float32).max]

    assert decode(encode(vec)).tobytes() == vec.tobytes()


def test_layout_is_native_float32():
    vec = np.arange(DIM, dtype=np.float32)

    assert encode(vec) == vec.tobytes()
    assert encode(vec)[4:8] == np.float32(1.0).tobytes()


def test_encode_accepts_lists_and_float64():
    values = [0.5] * DIM

    assert encode(values) == encode(np.array(values, dtype=np.float64))


def test_decode_memoryview():
    vec = np.ones(DIM, dtype=np.float32)

    assert decode(memoryview(encode(vec))).tobytes() == vec.tobytes()


def test_decode_float_memoryview_measured_in_bytes():
    """A float32 view of 512 items is 2048 bytes and decodes."""
    vec = np.arange(DIM, dtype=np.float32)
    view = memoryview(vec)

    assert len(view) == DIM
    assert decode(view).tobytes() == vec.tobytes()


def test_decode_float_memoryview_too_long_raises():
    # 2048 items, 8192 bytes
    view = memoryview(np.zeros(VECTOR_BYTES, dtype=np.float32))

    with pytest.raises(CodecError, match="expected 2048 bytes, got 8192"):
        decode(view)


def test_decode_short_buffer_raises():
    with pytest.raises(CodecError, match="expected 2048 bytes, got 2044"):
        decode(b"\x00" * (VECTOR_BYTES - 4))


def test_decode_long_buffer_raises():
    with pytest.raises(CodecError):
        decode(b"\x00" * (VECTOR_BYTES + 1))


def test_decode_empty_buffer_raises():
    with pytest.raises(CodecError):
        decode(b"")


def test_decode_non_blob_raises():
    with pytest.raises(CodecError, match="got str"):
        decode("x" * VECTOR_BYTES)
    with pytest.raises(CodecError, match="got NoneType"):
        decode(None)


def test_encode_wrong_length_raises():
    with pytest.raises(CodecError):
        encode(np.zeros(DIM - 1, dtype=np.float32))
    with pytest.raises(CodecError):
        encode(np.zeros((2, DIM), dtype=np.float32))


def test_codec_error_is_value_error():
    assert issubclass(CodecError, ValueError)


def test_encode_all_yields_parameter_tuples(collection):
    params = list(encode_all(collection[:3]))

    assert len(params) == 3
    assert all(len(p) == 1 and len(p[0]) == VECTOR_BYTES for p in params)
    assert params[1][0] == encode(collection[1])
