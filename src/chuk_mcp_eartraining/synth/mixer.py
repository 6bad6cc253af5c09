"""
Mixer - sample-wise averaging of equal-length buffers.

Averaging rather than summing keeps the mix inside [-1, 1] whenever every
input is, so a chord of unit-amplitude sines never clips.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from chuk_mcp_eartraining.core.errors import MismatchedBufferLengthsError

from .waveform import SampleBuffer, empty_buffer, freeze


def mix(buffers: Sequence[npt.ArrayLike]) -> SampleBuffer:
    """
    Average buffers sample by sample.

    Args:
        buffers: Buffers of identical length

    Returns:
        The mean buffer, or an empty buffer when no buffers are given

    Raises:
        MismatchedBufferLengthsError: if a buffer is not 1-D or the lengths differ
    """
    if len(buffers) == 0:
        return empty_buffer()

    arrays = [np.asarray(b, dtype=np.float64) for b in buffers]
    shapes = sorted({a.shape for a in arrays})
    if any(len(shape) != 1 for shape in shapes):
        raise MismatchedBufferLengthsError(f"Buffers must be one-dimensional, got shapes {shapes}")
    lengths = {a.size for a in arrays}
    if len(lengths) > 1:
        raise MismatchedBufferLengthsError(
            f"Cannot mix buffers of different lengths: {sorted(lengths)}"
        )

    return freeze(np.mean(np.stack(arrays), axis=0))
