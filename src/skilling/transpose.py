"""
Skilling's transform between axis coordinates and Hilbert transpose form

References:
- J. Skilling, "Programming the Hilbert curve", AIP Conf. Proc. 707 (2004)
- https://doi.org/10.1063/1.1751381

Both functions work in place on a mutable sequence of n integers of b bits
each. Dimension 0 doubles as the accumulator for the invert/exchange steps.
"""

from typing import MutableSequence

from .buffers import AxisCoordinates, TransposeForm, check_axes


def axes_to_transpose(axes: MutableSequence[int], b: int, n: int) -> None:
    """
    Transform axis coordinates into Hilbert transpose form, in place.

    Args:
        axes: n coordinates of b bits each (not a TransposeForm)
        b: Bits per axis
        n: Number of dimensions

    Raises:
        TypeError: If axes is tagged as a TransposeForm
        ValueError: On bad (b, n), length or coordinate range

    Example:
        >>> x = [5, 10, 20]
        >>> axes_to_transpose(x, 5, 3)
        >>> x
        [10, 14, 27]
    """
    check_axes(axes, b, n, rejected=TransposeForm)
    x = [int(v) for v in axes]
    m = 1 << (b - 1)

    # Inverse undo
    q = m
    while q > 1:
        p = q - 1
        for i in range(n):
            if x[i] & q:
                # Invert
                x[0] ^= p
            else:
                # Exchange
                t = (x[0] ^ x[i]) & p
                x[0] ^= t
                x[i] ^= t
        q >>= 1

    # Gray encode
    for i in range(1, n):
        x[i] ^= x[i - 1]

    t = 0
    q = m
    while q > 1:
        if x[n - 1] & q:
            t ^= q - 1
        q >>= 1
    for i in range(n):
        x[i] ^= t

    axes[:] = x


def transpose_to_axes(axes: MutableSequence[int], b: int, n: int) -> None:
    """
    Transform Hilbert transpose form back into axis coordinates, in place.
    Exact inverse of axes_to_transpose.

    Raises:
        TypeError: If axes is tagged as AxisCoordinates
        ValueError: On bad (b, n), length or value range
    """
    check_axes(axes, b, n, rejected=AxisCoordinates)
    x = [int(v) for v in axes]
    top = 2 << (b - 1)

    # Gray decode by H ^ (H/2); high to low so each step reads an undecoded neighbour
    t = x[n - 1] >> 1
    for i in range(n - 1, 0, -1):
        x[i] ^= x[i - 1]
    x[0] ^= t

    # Undo excess work
    q = 2
    while q != top:
        p = q - 1
        for i in range(n - 1, -1, -1):
            if x[i] & q:
                x[0] ^= p
            else:
                t = (x[0] ^ x[i]) & p
                x[0] ^= t
                x[i] ^= t
        q <<= 1

    axes[:] = x
