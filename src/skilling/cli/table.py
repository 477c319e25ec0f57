#!/usr/bin/env python3
"""
CLI command listing every cell of a small grid in curve order
"""
import sys

from tqdm import tqdm

from ..hilbert import HilbertCurve

MAX_TABLE_BITS = 16


def table_command(dimensions: int, bits: int) -> int:
    """
    Print `index: coords` for the whole grid and check continuity.

    Returns:
        0 if every step moves to a grid-adjacent cell, else 1
    """
    if dimensions * bits > MAX_TABLE_BITS:
        raise ValueError(
            f"Grid of {dimensions} x {bits} bits is too large to list "
            f"(limit {MAX_TABLE_BITS} index bits)"
        )

    curve = HilbertCurve(dimensions, bits)
    previous = None
    jumps = 0

    for index in tqdm(range(curve.max_index + 1), desc="Cells", leave=False):
        cell = curve.decode(index)
        tqdm.write(f"{index}: {','.join(str(c) for c in cell)}")

        if previous is not None:
            distance = sum(abs(a - b) for a, b in zip(cell, previous))
            if distance != 1:
                jumps += 1
                tqdm.write(f"❌ Jump of {distance} between {index - 1} and {index}", file=sys.stderr)
        previous = cell

    return 1 if jumps else 0


if __name__ == '__main__':
    if len(sys.argv) < 3:
        print("Usage: python -m skilling.cli.table <dimensions> <bits>")
        sys.exit(1)

    sys.exit(table_command(int(sys.argv[1]), int(sys.argv[2])))
