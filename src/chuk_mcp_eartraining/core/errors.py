"""
Engine errors.

Every failure in the engine is a caller-contract violation, so all of them
are ValueErrors and can be caught as such.
"""

from __future__ import annotations


class EarTrainingError(ValueError):
    """Base class for engine errors."""


class InvalidPitchClassError(EarTrainingError):
    """Pitch class outside 0-11."""


class InvalidLinearIndexError(EarTrainingError):
    """Negative linear index, or a lookup outside the pitch table."""


class InvalidFrequencyError(EarTrainingError):
    """Frequency that cannot produce a waveform cycle."""


class MismatchedBufferLengthsError(EarTrainingError):
    """Buffers of different lengths passed to the mixer."""
