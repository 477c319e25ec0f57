"""
N-dimensional Hilbert curve built on Skilling's transpose algorithm

References:
- J. Skilling, "Programming the Hilbert curve", AIP Conf. Proc. 707 (2004)
- Algorithm 781: Generating Hilbert's Space-Filling Curve by Recursion
"""

import logging
from typing import Sequence, Tuple

import numpy as np

from .buffers import AxisCoordinates, TransposeForm, check_params
from .interleave import interleave_bits, uninterleave_bits
from .transpose import axes_to_transpose, transpose_to_axes

logger = logging.getLogger(__name__)

_ONE = np.uint64(1)


class HilbertCurve:
    """
    N-dimensional Hilbert curve encoder/decoder.
    Preserves spatial locality: nearby points in space → nearby indices.
    """

    DEFAULT_DIMENSIONS = 3
    DEFAULT_BITS = 5

    def __init__(self, dimensions: int = DEFAULT_DIMENSIONS,
                 bits_per_dimension: int = DEFAULT_BITS):
        """
        Initialize Hilbert curve encoder.

        Args:
            dimensions: Number of dimensions (default: 3)
            bits_per_dimension: Bits of precision per dimension (default: 5)

        Raises:
            ValueError: If the index would not fit in 64 bits
        """
        check_params(bits_per_dimension, dimensions, index=True)
        self.dimensions = dimensions
        self.bits = bits_per_dimension
        self.max_val = (1 << bits_per_dimension) - 1
        self.max_index = (1 << (dimensions * bits_per_dimension)) - 1
        logger.debug("Hilbert curve: %d dimensions x %d bits", dimensions, bits_per_dimension)

    def __repr__(self):
        return f"HilbertCurve(dimensions={self.dimensions}, bits_per_dimension={self.bits})"

    # ==================== SCALAR ====================

    def transpose(self, coords: Sequence[int]) -> TransposeForm:
        """Axis coordinates → transpose form (input left untouched)"""
        if isinstance(coords, TransposeForm):
            raise TypeError("Expected axis coordinates, got TransposeForm")
        buf = AxisCoordinates(coords)
        axes_to_transpose(buf, self.bits, self.dimensions)
        return TransposeForm(buf)

    def axes(self, form: Sequence[int]) -> AxisCoordinates:
        """Transpose form → axis coordinates (input left untouched)"""
        if isinstance(form, AxisCoordinates):
            raise TypeError("Expected transpose form, got AxisCoordinates")
        buf = TransposeForm(form)
        transpose_to_axes(buf, self.bits, self.dimensions)
        return AxisCoordinates(buf)

    def encode(self, coords: Sequence[int]) -> int:
        """
        Encode integer grid coordinates to a Hilbert index.

        Args:
            coords: n integers in range [0, 2^bits)

        Returns:
            Hilbert index in [0, max_index]

        Example:
            >>> HilbertCurve(dimensions=3, bits_per_dimension=5).encode((5, 10, 20))
            7865
        """
        return interleave_bits(self.transpose(coords), self.bits, self.dimensions)

    def decode(self, index: int) -> Tuple[int, ...]:
        """Decode a Hilbert index back to grid coordinates."""
        form = TransposeForm([0] * self.dimensions)
        uninterleave_bits(form, self.bits, self.dimensions, index)
        return tuple(self.axes(form))

    # ==================== FLOATS ====================

    def encode_floats(self, coordinates: Sequence[float]) -> int:
        """
        Encode coordinates in [-1, 1] to a Hilbert index.

        Each float is normalized to the integer grid [0, max_val] first.
        """
        if len(coordinates) != self.dimensions:
            raise ValueError(f"Expected {self.dimensions} coordinates, got {len(coordinates)}")

        int_coords = []
        for coord in coordinates:
            if not (-1.0 <= coord <= 1.0):
                raise ValueError(f"Coordinate {coord} out of range [-1, 1]")
            normalized = int((coord + 1.0) * 0.5 * self.max_val)
            int_coords.append(min(normalized, self.max_val))

        return self.encode(int_coords)

    def decode_floats(self, index: int) -> Tuple[float, ...]:
        """Decode a Hilbert index to grid-cell coordinates in [-1, 1]"""
        return tuple((i / self.max_val) * 2.0 - 1.0 for i in self.decode(index))

    # ==================== BATCH ====================

    def encode_batch(self, points: np.ndarray) -> np.ndarray:
        """
        Encode many points at once.

        Args:
            points: integer array of shape (N, dimensions)

        Returns:
            uint64 array of shape (N,) with Hilbert indices
        """
        points = np.asarray(points)
        if points.ndim != 2 or points.shape[1] != self.dimensions:
            raise ValueError(f"Expected shape (N, {self.dimensions}), got {points.shape}")
        if points.size and not np.issubdtype(points.dtype, np.integer):
            raise ValueError(f"Expected integer coordinates, got dtype {points.dtype}")
        if points.size and (points.min() < 0 or points.max() > self.max_val):
            raise ValueError(f"Coordinates must be in range [0, {self.max_val}]")

        logger.debug("Encoding batch of %d points", points.shape[0])
        X = _axes_to_transpose_batch(points.astype(np.uint64), self.bits, self.dimensions)
        return _interleave_batch(X, self.bits, self.dimensions)

    def decode_batch(self, indices: np.ndarray) -> np.ndarray:
        """
        Decode many Hilbert indices at once.

        Args:
            indices: integer array of shape (N,)

        Returns:
            uint64 array of shape (N, dimensions)
        """
        indices = np.asarray(indices)
        if indices.ndim != 1:
            raise ValueError(f"Expected shape (N,), got {indices.shape}")
        if indices.size:
            if not np.issubdtype(indices.dtype, np.integer):
                raise ValueError(f"Expected integer indices, got dtype {indices.dtype}")
            if indices.dtype.kind == 'i' and indices.min() < 0:
                raise ValueError("Hilbert indices must be non-negative")
            if self.max_index < np.iinfo(np.uint64).max and int(indices.max()) > self.max_index:
                raise ValueError(f"Hilbert indices must be in range [0, {self.max_index}]")

        logger.debug("Decoding batch of %d indices", indices.shape[0])
        X = _uninterleave_batch(indices.astype(np.uint64), self.bits, self.dimensions)
        return _transpose_to_axes_batch(X, self.bits, self.dimensions)

    # ==================== LOCALITY ====================

    def locality(self, num_samples: int = 1000, seed: int = 0) -> float:
        """
        Measure spatial locality preservation.

        Compares the mean index distance of random grid-adjacent cell pairs
        with that of random unrelated pairs.

        Returns:
            near/far ratio; well below 1.0 means neighbours stay close on the curve
        """
        if num_samples < 1:
            raise ValueError(f"num_samples must be >= 1, got {num_samples}")

        rng = np.random.default_rng(seed)
        shape = (num_samples, self.dimensions)
        points = rng.integers(0, self.max_val + 1, size=shape, dtype=np.int64)
        others = rng.integers(0, self.max_val + 1, size=shape, dtype=np.int64)

        # Step one cell along a random axis, staying inside the grid
        rows = np.arange(num_samples)
        axis = rng.integers(0, self.dimensions, size=num_samples)
        step = rng.choice(np.array([-1, 1]), size=num_samples)
        current = points[rows, axis]
        step = np.where(current == 0, 1, np.where(current == self.max_val, -1, step))
        neighbours = points.copy()
        neighbours[rows, axis] += step

        base = self.encode_batch(points).astype(np.float64)
        near = np.abs(self.encode_batch(neighbours).astype(np.float64) - base).mean()
        far = np.abs(self.encode_batch(others).astype(np.float64) - base).mean()

        logger.debug("Locality: near=%.1f far=%.1f over %d samples", near, far, num_samples)
        return float(near / far) if far else 0.0


# ==================== VECTORISED TRANSFORMS ====================
# Same steps as transpose.py / interleave.py, one column per dimension.

def _axes_to_transpose_batch(X: np.ndarray, b: int, n: int) -> np.ndarray:
    X = X.copy()

    # Inverse undo
    q = 1 << (b - 1)
    while q > 1:
        Q, P = np.uint64(q), np.uint64(q - 1)
        for i in range(n):
            invert = (X[:, i] & Q) != 0
            X[invert, 0] ^= P
            exchange = ~invert
            t = (X[exchange, 0] ^ X[exchange, i]) & P
            X[exchange, 0] ^= t
            X[exchange, i] ^= t
        q >>= 1

    # Gray encode
    for i in range(1, n):
        X[:, i] ^= X[:, i - 1]

    t = np.zeros(X.shape[0], dtype=np.uint64)
    q = 1 << (b - 1)
    while q > 1:
        t[(X[:, n - 1] & np.uint64(q)) != 0] ^= np.uint64(q - 1)
        q >>= 1
    X ^= t[:, None]
    return X


def _transpose_to_axes_batch(X: np.ndarray, b: int, n: int) -> np.ndarray:
    X = X.copy()

    # Gray decode
    t = X[:, n - 1] >> _ONE
    for i in range(n - 1, 0, -1):
        X[:, i] ^= X[:, i - 1]
    X[:, 0] ^= t

    # Undo excess work
    q = 2
    while q != 2 << (b - 1):
        Q, P = np.uint64(q), np.uint64(q - 1)
        for i in range(n - 1, -1, -1):
            invert = (X[:, i] & Q) != 0
            X[invert, 0] ^= P
            exchange = ~invert
            t = (X[exchange, 0] ^ X[exchange, i]) & P
            X[exchange, 0] ^= t
            X[exchange, i] ^= t
        q <<= 1
    return X


def _interleave_batch(X: np.ndarray, b: int, n: int) -> np.ndarray:
    index = np.zeros(X.shape[0], dtype=np.uint64)
    for k in range(b):
        for j in range(n):
            bit = (X[:, j] >> np.uint64(k)) & _ONE
            index |= bit << np.uint64(k * n + n - 1 - j)
    return index


def _uninterleave_batch(index: np.ndarray, b: int, n: int) -> np.ndarray:
    X = np.zeros((index.shape[0], n), dtype=np.uint64)
    for k in range(b):
        for j in range(n):
            bit = (index >> np.uint64(k * n + n - 1 - j)) & _ONE
            X[:, j] |= bit << np.uint64(k)
    return X
