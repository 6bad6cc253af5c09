"""
Core music primitives.

These are the integer abstractions everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: Pitch class + octave, addressable by linear index
- Tuning: Equal temperament relative to a reference pitch
- PitchTable: Precomputed C0-C8 lookup table
- Interval: Semitone distances from unison to octave
- Scale: Seven degree offsets from a tonic
- RelativeChord: Ordered offsets from a chord root
"""

from chuk_mcp_eartraining.core.chord import RelativeChord, absolute_chord, triad
from chuk_mcp_eartraining.core.errors import (
    EarTrainingError,
    InvalidFrequencyError,
    InvalidLinearIndexError,
    InvalidPitchClassError,
    MismatchedBufferLengthsError,
)
from chuk_mcp_eartraining.core.interval import (
    MAJOR_SCALE,
    MINOR_SCALE,
    Interval,
    Scale,
    interval_label,
)
from chuk_mcp_eartraining.core.pitch import (
    DEFAULT_TUNING,
    Pitch,
    PitchClass,
    PitchTable,
    Tuning,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Pitch",
    "Tuning",
    "DEFAULT_TUNING",
    "PitchTable",
    # Interval
    "Interval",
    "interval_label",
    "Scale",
    "MAJOR_SCALE",
    "MINOR_SCALE",
    # Chord
    "RelativeChord",
    "absolute_chord",
    "triad",
    # Errors
    "EarTrainingError",
    "InvalidPitchClassError",
    "InvalidLinearIndexError",
    "InvalidFrequencyError",
    "MismatchedBufferLengthsError",
]
