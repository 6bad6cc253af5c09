"""
Interval primitives - Interval, Scale.

An interval is nothing more than a semitone distance from a root. Scales
are the seven offsets of each degree from the tonic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

UNKNOWN_INTERVAL = "Unknown"

_INTERVAL_LABELS: dict[int, str] = {
    0: "I",
    1: "Minor II",
    2: "Major II",
    3: "Minor III",
    4: "Major III",
    5: "Perfect IV",
    6: "Augmented IV",
    7: "Perfect V",
    8: "Minor VI",
    9: "Major VI",
    10: "Minor VII",
    11: "Major VII",
    12: "Octave",
}


def interval_label(semitones: int) -> str:
    """Human-readable name of an interval, or 'Unknown' outside 0-12."""
    return _INTERVAL_LABELS.get(semitones, UNKNOWN_INTERVAL)


class Interval(IntEnum):
    """Named semitone distances from unison to the octave."""

    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    AUGMENTED_FOURTH = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11
    OCTAVE = 12

    @property
    def label(self) -> str:
        return interval_label(self.value)


MAJOR_SCALE: tuple[int, ...] = (
    Interval.UNISON,
    Interval.MAJOR_SECOND,
    Interval.MAJOR_THIRD,
    Interval.PERFECT_FOURTH,
    Interval.PERFECT_FIFTH,
    Interval.MAJOR_SIXTH,
    Interval.MAJOR_SEVENTH,
)

# Natural minor
MINOR_SCALE: tuple[int, ...] = (
    Interval.UNISON,
    Interval.MAJOR_SECOND,
    Interval.MINOR_THIRD,
    Interval.PERFECT_FOURTH,
    Interval.PERFECT_FIFTH,
    Interval.MINOR_SIXTH,
    Interval.MAJOR_SEVENTH,
)


@dataclass(frozen=True)
class Scale:
    """
    A scale as cumulative offsets from the tonic.

    Unlike a step pattern, each entry is the distance of that degree from
    the tonic, so Scale.MAJOR.degrees[4] == 7 (the fifth).

    Immutable and hashable.
    """

    degrees: tuple[int, ...]
    name: str = ""

    MAJOR: ClassVar[Scale]
    NATURAL_MINOR: ClassVar[Scale]

    def __post_init__(self) -> None:
        if len(self.degrees) != 7:
            raise ValueError(f"Scale must have 7 degrees, got {len(self.degrees)}")
        if self.degrees[0] != 0:
            raise ValueError(f"Scale must start on the tonic (0), got {self.degrees[0]}")
        for degree in self.degrees:
            if not 0 <= degree <= 12:
                raise ValueError(f"Scale degree offsets must be 0-12, got {degree}")

    def degree(self, index: int) -> int:
        """Semitones from the tonic for a 0-based degree index."""
        if not 0 <= index < len(self.degrees):
            raise IndexError(f"Degree index must be 0-{len(self.degrees) - 1}, got {index}")
        return int(self.degrees[index])

    def labels(self) -> list[str]:
        """Interval names of every degree."""
        return [interval_label(d) for d in self.degrees]

    def __len__(self) -> int:
        return len(self.degrees)

    def __str__(self) -> str:
        return self.name or f"Scale({self.degrees})"

    @classmethod
    def parse(cls, name: str) -> Scale:
        """Parse a scale preset name like 'major' or 'minor'."""
        key = name.strip().lower().replace(" ", "_")
        scale_map = {
            "major": cls.MAJOR,
            "minor": cls.NATURAL_MINOR,
            "natural_minor": cls.NATURAL_MINOR,
        }
        if key not in scale_map:
            raise ValueError(f"Unknown scale: {name}")
        return scale_map[key]


Scale.MAJOR = Scale(MAJOR_SCALE, "major")
Scale.NATURAL_MINOR = Scale(MINOR_SCALE, "natural minor")
