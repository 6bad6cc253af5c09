"""
Chord primitives - RelativeChord and absolute chord building.

A relative chord is an ordered list of offsets from an unspecified root.
Applying it to a base pitch gives the absolute pitches in voice order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .interval import Interval, interval_label
from .pitch import Pitch


def absolute_chord(base: Pitch, intervals: Iterable[int]) -> list[Pitch]:
    """
    Stack intervals on a base pitch.

    Args:
        base: The root pitch
        intervals: Semitone offsets from the root, in voice order

    Returns:
        One pitch per interval, in the same order
    """
    root = base.linear_index
    return [Pitch.from_linear_index(root + k) for k in intervals]


@dataclass(frozen=True)
class RelativeChord:
    """
    A chord as offsets from its root.

    Order is voice order, so (0, 4, 7) and (0, 7, 4) are different voicings.

    Examples:
        RelativeChord.MAJOR_TRIAD.absolute(Pitch(PitchClass.C, 4))
            = [C4, E4, G4]
    """

    intervals: tuple[int, ...]
    name: str = ""

    MAJOR_TRIAD: ClassVar[RelativeChord]
    MINOR_TRIAD: ClassVar[RelativeChord]

    def absolute(self, base: Pitch) -> list[Pitch]:
        """Resolve the chord on a base pitch."""
        return absolute_chord(base, self.intervals)

    def labels(self) -> list[str]:
        return [interval_label(i) for i in self.intervals]

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self) -> str:
        return self.name or f"RelativeChord({self.intervals})"


RelativeChord.MAJOR_TRIAD = RelativeChord(
    (Interval.UNISON, Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH), "major triad"
)
RelativeChord.MINOR_TRIAD = RelativeChord(
    (Interval.UNISON, Interval.MINOR_THIRD, Interval.PERFECT_FIFTH), "minor triad"
)


def triad() -> RelativeChord:
    """The major triad (root, major third, perfect fifth)."""
    return RelativeChord.MAJOR_TRIAD
