"""Unit tests for the numpy array helpers."""

import numpy as np
import pytest
from siunit.arrays import decode_array, encode_array
from siunit.errors import InvalidValueError, MalformedInputError, UnsupportedPrefixRangeError


def test_encode_array_per_element_prefix():
    """Each element gets its own prefix by default."""
    out = encode_array("A", [0.0015, 2.0, 3000.0])
    assert out.shape == (3,)
    assert out.tolist() == ["1.50 mA", "2.00 A", "3.00 KA"]


def test_encode_array_keeps_shape():
    """The output has the shape of the input."""
    values = np.array([[1e-9, 1e-6], [1e3, 1e6]])
    out = encode_array("F", values)
    assert out.shape == (2, 2)
    assert out[1, 0] == "1.00 KF"
    assert out[0, 0] == "1.00 nF"


def test_encode_array_shared_prefix():
    """All elements use the prefix of the largest magnitude."""
    out = encode_array("V", [0.0012, -0.25, 0.0, -0.0], shared_prefix=True)
    assert out.tolist() == ["1.20 mV", "-250.00 mV", "0.00 mV", "0.00 mV"]


def test_encode_array_shared_prefix_tiny_negative():
    """Values too small for the shared prefix print as unsigned zero."""
    out = encode_array("V", [2000.0, -0.001], shared_prefix=True)
    assert out.tolist() == ["2.00 KV", "0.00 KV"]


def test_encode_array_shared_prefix_zeros():
    """An all-zero array has no prefix."""
    out = encode_array("V", np.zeros(2), shared_prefix=True, precision=1)
    assert out.tolist() == ["0.0 V", "0.0 V"]


def test_encode_array_errors():
    """Element errors propagate."""
    with pytest.raises(InvalidValueError):
        encode_array("V", [1.0, np.nan])
    with pytest.raises(InvalidValueError):
        encode_array("V", [1.0, np.inf], shared_prefix=True)
    with pytest.raises(UnsupportedPrefixRangeError):
        encode_array("V", [1.0, 1e18])
    with pytest.raises(UnsupportedPrefixRangeError):
        encode_array("V", [1.0, 1e18], shared_prefix=True)


def test_encode_array_negative_precision():
    """A negative number of decimals is rejected with and without a shared prefix."""
    with pytest.raises(ValueError, match="precision must be >= 0"):
        encode_array("V", [1.0], precision=-1)
    with pytest.raises(ValueError, match="precision must be >= 0"):
        encode_array("V", np.zeros(2), shared_prefix=True, precision=-1)


def test_decode_array():
    texts = [["1.50 mA", "2 A"], ["3KA", "-4.5 uA"]]
    out = decode_array("A", texts)
    assert out.dtype == float
    assert out.shape == (2, 2)
    np.testing.assert_allclose(out, [[0.0015, 2.0], [3000.0, -4.5e-6]])


def test_decode_array_errors():
    with pytest.raises(MalformedInputError):
        decode_array("A", ["1 A", "one A"])


def test_array_round_trip():
    values = np.array([1.5e-9, 2.2e-3, 47.0, 3.3e6])
    text = encode_array("Hz", values)
    np.testing.assert_allclose(decode_array("Hz", text), values, rtol=5e-3)
