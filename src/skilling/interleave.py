"""
Pack a transpose form into one Hilbert integer and back.

Bit k of transpose word j lands on bit k*n + (n-1-j) of the index, so the
most significant group holds the top bit of every word, word 0 first.
For n=3 this is the usual 3D Morton spread (stride 3).
"""

from typing import MutableSequence, Sequence

from .buffers import AxisCoordinates, check_axes, is_integer


def interleave_bits(axes: Sequence[int], b: int, n: int) -> int:
    """
    Interleave n transpose words of b bits into a single Hilbert index.

    Args:
        axes: Transpose form (not AxisCoordinates)
        b: Bits per axis
        n: Number of dimensions, n*b <= MAX_INDEX_BITS

    Returns:
        Hilbert index in [0, 2^(n*b))

    Example:
        >>> interleave_bits([10, 14, 27], 5, 3)
        7865
    """
    check_axes(axes, b, n, rejected=AxisCoordinates, index=True)

    # Spread each word so its bits sit n apart
    coden = [0] * n
    for k in range(b):
        andbit = 1 << k
        shift = k * (n - 1)
        for j in range(n):
            coden[j] |= (int(axes[j]) & andbit) << shift

    res = coden[0] << (n - 1)
    for j in range(1, n):
        res |= coden[j] << (n - j - 1)
    return res


def uninterleave_bits(axes: MutableSequence[int], b: int, n: int, code: int) -> None:
    """
    Unpack a Hilbert index into transpose form, in place.
    Exact inverse of interleave_bits; previous contents of axes are discarded.

    Raises:
        TypeError: If axes is tagged as AxisCoordinates
        ValueError: On bad (b, n), buffer length, non-integer or out-of-range code
    """
    check_axes(axes, b, n, rejected=AxisCoordinates, index=True, values=False)
    if not is_integer(code):
        raise ValueError(f"Hilbert index {code!r} is not an integer")
    code = int(code)
    if not 0 <= code < (1 << (n * b)):
        raise ValueError(f"Hilbert index {code} out of range [0, 2^{n * b})")

    x = [0] * n
    # b+1 planes; the extra one is empty for an in-range code
    for i in range(b + 1):
        shift_selector = n * i
        shiftback = (n - 1) * i
        for j in range(n):
            x[n - j - 1] |= (code & (1 << (shift_selector + j))) >> (shiftback + j)

    axes[:] = x
