import random

import numpy as np
import pytest

from skilling import (
    MAX_INDEX_BITS,
    AxisCoordinates,
    TransposeForm,
    interleave_bits,
    uninterleave_bits,
)


def _stride3_interleave(X, b):
    """3D spread: bit k shifted by 2k, then word j shifted by 2-j"""
    coden = [0, 0, 0]
    andbit = 1
    for i in range(0, 2 * b, 2):
        for j in range(3):
            coden[j] |= (X[j] & andbit) << i
        andbit <<= 1
    return (coden[0] << 2) | (coden[1] << 1) | coden[2]


def test_reference_index():
    assert interleave_bits([10, 14, 27], 5, 3) == 7865
    assert format(7865, '015b') == '001111010111001'


def test_reference_unpack():
    X = [0, 0, 0]
    uninterleave_bits(X, 5, 3, 7865)
    assert X == [10, 14, 27]


def test_three_dimensions_match_stride3_spread():
    rng = random.Random(3)
    for b in (1, 5, 10, 21):
        for _ in range(50):
            X = [rng.randrange(1 << b) for _ in range(3)]
            assert interleave_bits(X, b, 3) == _stride3_interleave(X, b)


def test_bit_layout():
    # Top bit of word 0 is the top bit of the index
    assert interleave_bits([0b10, 0b00], 2, 2) == 0b1000
    assert interleave_bits([0b00, 0b01], 2, 2) == 0b0001
    assert interleave_bits([0b01, 0b00, 0b00, 0b00], 1, 4) == 0b1000


@pytest.mark.parametrize('b,n', [
    (1, 1), (5, 1), (32, 1), (1, 3), (5, 3), (21, 3),
    (16, 2), (32, 2), (8, 4), (16, 4), (6, 8), (8, 8),
])
def test_round_trip(b, n):
    rng = random.Random(b * 10 + n)
    for _ in range(50):
        original = [rng.randrange(1 << b) for _ in range(n)]
        code = interleave_bits(original, b, n)
        assert 0 <= code < (1 << (n * b))

        X = [0] * n
        uninterleave_bits(X, b, n, code)
        assert X == original


def test_single_dimension_is_identity():
    for v in range(32):
        assert interleave_bits([v], 5, 1) == v


def test_previous_contents_discarded():
    X = TransposeForm([31, 31, 31])
    uninterleave_bits(X, 5, 3, 0)
    assert X == [0, 0, 0]


def test_index_width_limit():
    b, n = 9, 8
    assert n * b > MAX_INDEX_BITS
    with pytest.raises(ValueError, match="bits"):
        interleave_bits([0] * n, b, n)
    with pytest.raises(ValueError):
        uninterleave_bits([0] * n, b, n, 0)


@pytest.mark.parametrize('code', [-1, 1 << 15])
def test_code_out_of_range(code):
    X = [1, 2, 3]
    with pytest.raises(ValueError, match="out of range"):
        uninterleave_bits(X, 5, 3, code)
    assert X == [1, 2, 3]


def test_axis_coordinates_rejected():
    with pytest.raises(TypeError):
        interleave_bits(AxisCoordinates([5, 10, 20]), 5, 3)
    with pytest.raises(TypeError):
        uninterleave_bits(AxisCoordinates([0, 0, 0]), 5, 3, 7865)


def test_value_out_of_range():
    with pytest.raises(ValueError):
        interleave_bits([10, 14, 32], 5, 3)


@pytest.mark.parametrize('code', [7865.7, 7865.0, True])
def test_non_integer_code_rejected(code):
    X = [1, 2, 3]
    with pytest.raises(ValueError, match="not an integer"):
        uninterleave_bits(X, 5, 3, code)
    assert X == [1, 2, 3]


def test_numpy_integer_code_accepted():
    X = [0, 0, 0]
    uninterleave_bits(X, 5, 3, np.uint64(7865))
    assert X == [10, 14, 27]


def test_non_integer_transpose_values_rejected():
    with pytest.raises(ValueError, match="not an integer"):
        interleave_bits([10.5, 14, 27], 5, 3)
