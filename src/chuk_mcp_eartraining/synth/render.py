"""
Rendering - pitches and chords to Sounds.

A Sound pairs a sample buffer with its sample rate, which is the unit
handed to anything that plays or exports audio.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from chuk_mcp_eartraining.constants import DEFAULT_SAMPLE_RATE
from chuk_mcp_eartraining.core.pitch import DEFAULT_TUNING, Pitch, Tuning

from .mixer import mix
from .waveform import SampleBuffer, empty_buffer, freeze, sine_wave


@dataclass(frozen=True, eq=False)
class Sound:
    """A mono sample buffer at a given sample rate."""

    samples: SampleBuffer
    sample_rate: int

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {self.sample_rate}")
        object.__setattr__(self, "samples", freeze(self.samples))

    @property
    def duration_seconds(self) -> float:
        return len(self.samples) / self.sample_rate

    def __len__(self) -> int:
        return len(self.samples)


def render_pitch(
    pitch: Pitch,
    sample_rate: int,
    total_samples: int,
    tuning: Tuning = DEFAULT_TUNING,
) -> Sound:
    """Synthesize a single pitch as a sine wave."""
    samples = sine_wave(tuning.frequency(pitch), sample_rate, total_samples)
    return Sound(samples, sample_rate)


def render_chord(
    pitches: Sequence[Pitch],
    sample_rate: int,
    total_samples: int,
    tuning: Tuning = DEFAULT_TUNING,
) -> Sound:
    """Synthesize each pitch and mix them into one simultaneous chord."""
    voices = [sine_wave(tuning.frequency(p), sample_rate, total_samples) for p in pitches]
    return Sound(mix(voices), sample_rate)


def concatenate(sounds: Iterable[Sound]) -> Sound:
    """
    Join sounds end to end.

    All sounds must share a sample rate. With no sounds, returns an empty
    Sound at the default sample rate.
    """
    sounds = list(sounds)
    if not sounds:
        return Sound(empty_buffer(), DEFAULT_SAMPLE_RATE)

    rates = {s.sample_rate for s in sounds}
    if len(rates) > 1:
        raise ValueError(f"Cannot concatenate sounds with different sample rates: {sorted(rates)}")

    return Sound(np.concatenate([s.samples for s in sounds]), sounds[0].sample_rate)
