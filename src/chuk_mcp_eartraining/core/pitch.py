"""
Pitch primitives - PitchClass, Pitch, Tuning, PitchTable.

A Pitch is a pitch class plus an octave. Every pitch also has a single
linear index (semitones above C0), which is the uniform address space the
rest of the engine works in. Frequencies come from equal temperament
relative to a reference pitch (A4 = 440 Hz by default).
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from functools import cache, total_ordering
from typing import ClassVar

from .errors import InvalidLinearIndexError, InvalidPitchClassError

SEMITONES_PER_OCTAVE = 12

# Display names indexed by pitch class. A# keeps its historical "A#/Ab" label.
_DISPLAY_NAMES: tuple[str, ...] = (
    "C",
    "C#/Db",
    "D",
    "D#/Eb",
    "E",
    "F",
    "F#/Gb",
    "G",
    "G#/Ab",
    "A",
    "A#/Ab",
    "B",
)
UNKNOWN_NOTE = "Unknown Note"

_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

_PITCH_RE = re.compile(r"^\s*([A-Ga-g][#b]?)\s*(\d+)\s*$")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11), octave-independent.

    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    @property
    def display_name(self) -> str:
        """Name used on screen, e.g. 'F#/Gb'."""
        return _DISPLAY_NAMES[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()
        if not name:
            raise InvalidPitchClassError("Empty pitch class name")
        name = name[0].upper() + name[1:]

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise InvalidPitchClassError(f"Unknown pitch class: {name}")


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """
    An absolute pitch: pitch class plus octave.

    Octave 4 holds the tuning reference A4. Ordering follows the linear
    index, so pitches sort low to high.

    Examples:
        Pitch(PitchClass.C, 4) = middle C
        Pitch.from_linear_index(57) = A4
    """

    pitch_class: int
    octave: int

    def __post_init__(self) -> None:
        if not 0 <= self.pitch_class < SEMITONES_PER_OCTAVE:
            raise InvalidPitchClassError(f"Pitch class must be 0-11, got {self.pitch_class}")
        if self.octave < 0:
            raise InvalidLinearIndexError(f"Octave must be non-negative, got {self.octave}")
        try:
            pitch_class = PitchClass(self.pitch_class)
        except ValueError as e:
            raise InvalidPitchClassError(
                f"Pitch class must be an integer 0-11, got {self.pitch_class!r}"
            ) from e
        object.__setattr__(self, "pitch_class", pitch_class)

    @classmethod
    def from_linear_index(cls, index: int) -> Pitch:
        """
        Build a pitch from semitones above C0.

        Negative indices are rejected rather than wrapped.
        """
        if index < 0:
            raise InvalidLinearIndexError(f"Linear index must be non-negative, got {index}")
        octave, pitch_class = divmod(index, SEMITONES_PER_OCTAVE)
        return cls(pitch_class, octave)

    @classmethod
    def from_midi(cls, midi_note: int) -> Pitch:
        """Build a pitch from a MIDI note number (C4 = 60)."""
        return cls.from_linear_index(midi_note - SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """Parse scientific pitch notation like 'A4', 'C#5' or 'Bb3'."""
        match = _PITCH_RE.match(text)
        if match is None:
            raise ValueError(f"Invalid pitch: {text!r}. Expected format like 'C4' or 'F#3'.")
        name, octave = match.groups()
        return cls(PitchClass.parse(name), int(octave))

    @property
    def linear_index(self) -> int:
        """Semitones above C0."""
        return self.pitch_class + self.octave * SEMITONES_PER_OCTAVE

    @property
    def frequency(self) -> float:
        """Frequency in Hz with the default A4 = 440 Hz tuning."""
        return DEFAULT_TUNING.frequency(self)

    @property
    def label(self) -> str:
        """Display label, e.g. 'C4' or 'F#/Gb5'."""
        if 0 <= self.pitch_class < len(_DISPLAY_NAMES):
            name = _DISPLAY_NAMES[self.pitch_class]
        else:
            name = UNKNOWN_NOTE
        return f"{name}{self.octave}"

    def transpose(self, semitones: int) -> Pitch:
        """Move by a number of semitones."""
        return Pitch.from_linear_index(self.linear_index + semitones)

    def to_midi(self) -> int:
        """MIDI note number (A4 = 69)."""
        return self.linear_index + SEMITONES_PER_OCTAVE

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.linear_index < other.linear_index

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"Pitch({PitchClass(self.pitch_class).name}, {self.octave})"


@dataclass(frozen=True)
class Tuning:
    """
    Twelve-tone equal temperament anchored at a reference pitch.

    Each semitone is a frequency ratio of 2^(1/12).
    """

    reference_hz: float = 440.0
    reference: Pitch = Pitch(PitchClass.A, 4)

    def __post_init__(self) -> None:
        if self.reference_hz <= 0:
            raise ValueError(f"Reference frequency must be positive, got {self.reference_hz}")

    def frequency(self, pitch: Pitch) -> float:
        """Frequency of a pitch in Hz. No rounding is applied."""
        semitones = pitch.linear_index - self.reference.linear_index
        return float(self.reference_hz * 2.0 ** (semitones / SEMITONES_PER_OCTAVE))


DEFAULT_TUNING = Tuning()


class PitchTable:
    """
    Immutable lookup table of pitches over a range of linear indices.

    The default table spans C0 to C8 inclusive and is built once.
    """

    BOTTOM: ClassVar[int] = 0
    TOP: ClassVar[int] = PitchClass.C + 8 * SEMITONES_PER_OCTAVE

    __slots__ = ("_bottom", "_top", "_pitches")

    def __init__(self, bottom: int = BOTTOM, top: int = TOP) -> None:
        if bottom < 0:
            raise InvalidLinearIndexError(f"Table bottom must be non-negative, got {bottom}")
        if top < bottom:
            raise ValueError(f"Table top ({top}) must not be below bottom ({bottom})")
        self._bottom = bottom
        self._top = top
        self._pitches: tuple[Pitch, ...] = tuple(
            Pitch.from_linear_index(i) for i in range(bottom, top + 1)
        )

    @classmethod
    def default(cls) -> PitchTable:
        """The shared C0-C8 table."""
        return _default_table()

    @property
    def bottom(self) -> Pitch:
        return self._pitches[0]

    @property
    def top(self) -> Pitch:
        return self._pitches[-1]

    def get(self, pitch_class: int, octave: int) -> Pitch:
        """Look up a pitch by pitch class and octave."""
        if not 0 <= pitch_class < SEMITONES_PER_OCTAVE:
            raise InvalidPitchClassError(f"Pitch class must be 0-11, got {pitch_class}")
        return self[pitch_class + octave * SEMITONES_PER_OCTAVE]

    def __getitem__(self, index: int) -> Pitch:
        if not self._bottom <= index <= self._top:
            raise InvalidLinearIndexError(
                f"Linear index {index} outside table range {self._bottom}-{self._top}"
            )
        return self._pitches[index - self._bottom]

    def __contains__(self, pitch: object) -> bool:
        if not isinstance(pitch, Pitch):
            return False
        return self._bottom <= pitch.linear_index <= self._top

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self._pitches)

    def __len__(self) -> int:
        return len(self._pitches)

    def __repr__(self) -> str:
        return f"PitchTable({self.bottom.label}..{self.top.label})"


@cache
def _default_table() -> PitchTable:
    return PitchTable()
