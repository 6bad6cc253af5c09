"""
Waveform synthesis - single-cycle sine tiling.

One cycle is computed with an integer length and repeated to fill the
buffer. The repeated cycle never drifts in phase; the price is that the
played frequency is sample_rate / cycle_length rather than the exact
requested frequency.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from chuk_mcp_eartraining.core.errors import InvalidFrequencyError

SampleBuffer = npt.NDArray[np.float64]


def freeze(samples: npt.ArrayLike) -> SampleBuffer:
    """Return samples as a read-only 1-D float64 array."""
    buffer = np.array(samples, dtype=np.float64).reshape(-1)
    buffer.flags.writeable = False
    return buffer


def empty_buffer() -> SampleBuffer:
    return freeze(np.empty(0, dtype=np.float64))


def cycle_length(frequency_hz: float, sample_rate_hz: int) -> int:
    """
    Number of samples in one cycle, rounded to the nearest integer.

    Uses Python's round(), so exact halves go to the even neighbour
    (2.5 -> 2, 3.5 -> 4).

    Raises:
        InvalidFrequencyError: frequency is not positive, or so high that
            the cycle rounds to zero samples
    """
    if sample_rate_hz <= 0:
        raise ValueError(f"Sample rate must be positive, got {sample_rate_hz}")
    if not frequency_hz > 0:
        raise InvalidFrequencyError(f"Frequency must be positive, got {frequency_hz}")

    length = round(sample_rate_hz / frequency_hz)
    if length < 1:
        raise InvalidFrequencyError(
            f"Frequency {frequency_hz} Hz is too high for sample rate {sample_rate_hz} Hz"
        )
    return int(length)


def single_cycle(length: int) -> SampleBuffer:
    """One sine cycle: sin(2*pi*i/length) for i in [0, length)."""
    return freeze(np.sin(2.0 * np.pi * np.arange(length) / length))


def sine_wave(frequency_hz: float, sample_rate_hz: int, total_samples: int) -> SampleBuffer:
    """
    Synthesize a sine wave by tiling one precomputed cycle.

    Args:
        frequency_hz: Requested frequency
        sample_rate_hz: Sample rate of the output
        total_samples: Length of the output buffer

    Returns:
        Read-only buffer where out[j] == cycle[j % cycle_length]
    """
    if total_samples < 0:
        raise ValueError(f"Sample count must be non-negative, got {total_samples}")

    cycle = single_cycle(cycle_length(frequency_hz, sample_rate_hz))
    return freeze(cycle[np.arange(total_samples) % cycle.size])
