"""Hilbert curve indexing via Skilling's transpose algorithm"""

from .buffers import AxisCoordinates, TransposeForm, MAX_AXIS_BITS, MAX_INDEX_BITS
from .transpose import axes_to_transpose, transpose_to_axes
from .interleave import interleave_bits, uninterleave_bits
from .hilbert import HilbertCurve

__version__ = '0.1.0'

__all__ = [
    'AxisCoordinates',
    'TransposeForm',
    'MAX_AXIS_BITS',
    'MAX_INDEX_BITS',
    'axes_to_transpose',
    'transpose_to_axes',
    'interleave_bits',
    'uninterleave_bits',
    'HilbertCurve',
]
