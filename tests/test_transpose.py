import random

import numpy as np
import pytest

from skilling import (
    AxisCoordinates,
    TransposeForm,
    axes_to_transpose,
    transpose_to_axes,
)


def test_reference_point():
    X = [5, 10, 20]
    axes_to_transpose(X, 5, 3)
    assert X == [10, 14, 27]

    transpose_to_axes(X, 5, 3)
    assert X == [5, 10, 20]


@pytest.mark.parametrize('b', [1, 2, 3, 5, 8, 16, 31, 32])
@pytest.mark.parametrize('n', [1, 2, 3, 4, 8])
def test_round_trip(b, n):
    rng = random.Random(b * 100 + n)
    for _ in range(50):
        original = [rng.randrange(1 << b) for _ in range(n)]
        X = list(original)
        axes_to_transpose(X, b, n)
        assert all(0 <= v < (1 << b) for v in X)
        transpose_to_axes(X, b, n)
        assert X == original


@pytest.mark.parametrize('v', [0, 1])
def test_single_bit_single_dimension_is_identity(v):
    X = [v]
    axes_to_transpose(X, 1, 1)
    assert X == [v]
    transpose_to_axes(X, 1, 1)
    assert X == [v]


def test_one_dimension_is_identity():
    for v in range(16):
        X = [v]
        axes_to_transpose(X, 4, 1)
        assert X == [v]


def test_single_bit_only_gray_encodes():
    X = [1, 0, 1]
    axes_to_transpose(X, 1, 3)
    assert X == [1, 1, 0]


def test_numpy_buffer_is_updated_in_place():
    X = np.array([5, 10, 20], dtype=np.uint32)
    axes_to_transpose(X, 5, 3)
    assert X.tolist() == [10, 14, 27]
    transpose_to_axes(X, 5, 3)
    assert X.tolist() == [5, 10, 20]


def test_tagged_buffers():
    X = AxisCoordinates([5, 10, 20])
    axes_to_transpose(X, 5, 3)
    assert X == [10, 14, 27]

    with pytest.raises(TypeError):
        axes_to_transpose(TransposeForm([10, 14, 27]), 5, 3)
    with pytest.raises(TypeError):
        transpose_to_axes(AxisCoordinates([5, 10, 20]), 5, 3)


@pytest.mark.parametrize('axes,b,n', [
    ([1, 2, 3], 0, 3),
    ([1, 2, 3], 33, 3),
    ([], 5, 0),
    ([1, 2], 5, 3),
    ([1, 2, 3, 4], 5, 3),
    ([1, 2, 32], 5, 3),
    ([1, -2, 3], 5, 3),
])
def test_preconditions(axes, b, n):
    with pytest.raises(ValueError):
        axes_to_transpose(list(axes), b, n)
    with pytest.raises(ValueError):
        transpose_to_axes(list(axes), b, n)


def test_rejected_call_leaves_buffer_untouched():
    X = [5, 10, 40]
    with pytest.raises(ValueError, match="out of range"):
        axes_to_transpose(X, 5, 3)
    assert X == [5, 10, 40]


@pytest.mark.parametrize('axes', [
    [5.9, 10, 20],
    [5.0, 10, 20],
    [True, 10, 20],
])
def test_non_integer_values_rejected(axes):
    X = list(axes)
    with pytest.raises(ValueError, match="not an integer"):
        axes_to_transpose(X, 5, 3)
    assert X == axes
    with pytest.raises(ValueError, match="not an integer"):
        transpose_to_axes(list(axes), 5, 3)
