#!/usr/bin/env python3
"""
CLI command walking one point through the full encode/decode pipeline
"""
import sys
from typing import List, Sequence, Tuple

from ..hilbert import HilbertCurve
from ..interleave import interleave_bits, uninterleave_bits
from ..transpose import axes_to_transpose, transpose_to_axes

DEFAULT_COORDS = (5, 10, 20)  # any position in the 32x32x32 cube


def bit_groups(axes: Sequence[int], b: int) -> Tuple[str, ...]:
    """MSB-first bit groups of a transpose form, e.g. ('001', '111', ...)"""
    return tuple(
        ''.join(str((x >> k) & 1) for x in axes)
        for k in range(b - 1, -1, -1)
    )


def _fmt(values: Sequence[int]) -> str:
    return ','.join(str(v) for v in values)


def demo_command(coords: Sequence[int] = DEFAULT_COORDS, bits: int = HilbertCurve.DEFAULT_BITS) -> int:
    """Print each stage for one point; 1 if the round trip fails"""
    n = len(coords)
    X: List[int] = list(coords)
    print(f"Input coords = {_fmt(X)}")

    axes_to_transpose(X, bits, n)
    print(f"Hilbert coords = {_fmt(X)}")

    code = interleave_bits(X, bits, n)
    print(f"Hilbert integer = {code} = {' '.join(bit_groups(X, bits))}")

    uninterleave_bits(X, bits, n, code)
    print(f"Reconstructed Hilbert coords = {_fmt(X)}")

    transpose_to_axes(X, bits, n)
    print(f"Orig coords = {_fmt(X)}")

    if X != list(coords):
        print("❌ Round trip mismatch", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(demo_command())
