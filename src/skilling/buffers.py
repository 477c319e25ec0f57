"""
Axis buffers and parameter checks shared by the transforms.

The same list of n integers holds either a point's axis coordinates or
the transpose form of its Hilbert index. The two tagged list types below
let callers say which one they hold; untagged sequences are trusted.
"""

import numbers
from typing import Optional, Sequence, Type

MAX_AXIS_BITS = 32   # bits per axis value (unsigned 32-bit word)
MAX_INDEX_BITS = 64  # bits in a packed Hilbert index (unsigned 64-bit word)


class AxisCoordinates(list):
    """Ordinary per-dimension grid coordinates of a point."""

    def __repr__(self):
        return f"AxisCoordinates({list.__repr__(self)})"


class TransposeForm(list):
    """
    Bit-transposed Hilbert index.

    For b=5 bits and n=3 dimensions the 15-bit index
    A B C D E F G H I J K L M N O is held as

        X[0] = A D G J M
        X[1] = B E H K N
        X[2] = C F I L O
    """

    def __repr__(self):
        return f"TransposeForm({list.__repr__(self)})"


def check_params(b: int, n: int, index: bool = False):
    """
    Validate bits per axis and dimension count.

    Args:
        b: Bits per axis, 1..MAX_AXIS_BITS
        n: Number of dimensions, >= 1
        index: Also require n*b to fit a packed index

    Raises:
        ValueError: If any limit is violated
    """
    if not 1 <= b <= MAX_AXIS_BITS:
        raise ValueError(f"Bits per axis must be in range [1, {MAX_AXIS_BITS}], got {b}")
    if n < 1:
        raise ValueError(f"Dimension count must be >= 1, got {n}")
    if index and n * b > MAX_INDEX_BITS:
        raise ValueError(
            f"Hilbert index needs {n * b} bits ({n} x {b}), "
            f"more than the supported {MAX_INDEX_BITS}"
        )


def is_integer(value) -> bool:
    """True for int and numpy integer scalars, False for bool and float"""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_axes(axes: Sequence[int], b: int, n: int,
               rejected: Optional[Type[list]] = None,
               index: bool = False,
               values: bool = True):
    """
    Validate an axis buffer before a transform touches it.

    Raises:
        TypeError: If the buffer carries the `rejected` tag
        ValueError: On bad (b, n), wrong length, non-integer or out-of-range values
    """
    if rejected is not None and isinstance(axes, rejected):
        raise TypeError(f"{type(axes).__name__} is not accepted here")

    check_params(b, n, index=index)

    if len(axes) != n:
        raise ValueError(f"Expected {n} axis values, got {len(axes)}")

    if values:
        limit = 1 << b
        for i, value in enumerate(axes):
            if not is_integer(value):
                raise ValueError(f"Axis {i} value {value!r} is not an integer")
            if not 0 <= value < limit:
                raise ValueError(f"Axis {i} value {value} out of range [0, {limit})")

