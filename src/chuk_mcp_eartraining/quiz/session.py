"""
Ear-training quiz - cadence, random scale-degree question, answer check.

Each round establishes the key with an I-IV-V-I cadence of major triads,
then plays one random note of the scale. The listener answers with the
scale degree index.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from chuk_mcp_eartraining.constants import QuizMessages
from chuk_mcp_eartraining.core.chord import RelativeChord, triad
from chuk_mcp_eartraining.core.interval import Interval, interval_label
from chuk_mcp_eartraining.core.pitch import Pitch
from chuk_mcp_eartraining.models.config import EngineConfig
from chuk_mcp_eartraining.synth.render import Sound, render_chord, render_pitch

# Chord roots as offsets from the tonic: I, IV, V, I
CADENCE: tuple[int, ...] = (
    Interval.UNISON,
    Interval.PERFECT_FOURTH,
    Interval.PERFECT_FIFTH,
    Interval.UNISON,
)


@dataclass(frozen=True)
class QuizQuestion:
    """One quiz round: the scale degree that will be played."""

    degree_index: int
    semitones: int
    pitch: Pitch

    @property
    def interval_name(self) -> str:
        return interval_label(self.semitones)

    @property
    def pitch_label(self) -> str:
        return self.pitch.label


@dataclass(frozen=True)
class QuizAnswer:
    """Evaluation of an answer to a question."""

    question: QuizQuestion
    answer_index: int
    correct: bool
    message: str


class EarTrainingQuiz:
    """
    Generates and checks scale-degree questions in a fixed key.

    The random source is injectable so rounds can be reproduced.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
        chord: RelativeChord | None = None,
    ):
        """
        Initialize the quiz.

        Args:
            config: Engine configuration (defaults if omitted)
            rng: Random source for questions
            chord: Chord played on each cadence root (major triad by default)
        """
        self.config = EngineConfig() if config is None else config
        self.rng = random.Random() if rng is None else rng
        self.chord = triad() if chord is None else chord
        self.scale = self.config.scale_preset
        self.tuning = self.config.tuning
        self.tonic = Pitch(self.config.tonic_pitch_class, self.config.cadence_octave)

    def cadence_chords(self) -> list[list[Pitch]]:
        """The absolute chords of the I-IV-V-I cadence."""
        return [self.chord.absolute(self.tonic.transpose(root)) for root in CADENCE]

    def render_cadence(self) -> list[Sound]:
        """Synthesize each cadence chord as a mixed buffer."""
        return [
            render_chord(
                chord,
                self.config.sample_rate,
                self.config.note_samples,
                self.tuning,
            )
            for chord in self.cadence_chords()
        ]

    def question_for(self, degree_index: int, octave: int) -> QuizQuestion:
        """Build the question for a given degree and octave."""
        semitones = self.scale.degree(degree_index)
        base = Pitch(self.config.tonic_pitch_class, octave)
        return QuizQuestion(
            degree_index=degree_index,
            semitones=semitones,
            pitch=base.transpose(semitones),
        )

    def next_question(self) -> QuizQuestion:
        """Pick a random scale degree in a random octave."""
        degree_index = self.rng.randrange(len(self.scale))
        octave = self.rng.randrange(self.config.bottom_octave, self.config.top_octave)
        return self.question_for(degree_index, octave)

    def render_question(self, question: QuizQuestion) -> Sound:
        """Synthesize the question note."""
        return render_pitch(
            question.pitch,
            self.config.sample_rate,
            self.config.note_samples,
            self.tuning,
        )

    def check(self, question: QuizQuestion, answer_index: int) -> QuizAnswer:
        """Compare an answered degree index with the question."""
        correct = answer_index == question.degree_index
        template = QuizMessages.CORRECT if correct else QuizMessages.WRONG
        return QuizAnswer(
            question=question,
            answer_index=answer_index,
            correct=correct,
            message=template.format(
                interval=question.interval_name,
                note=question.pitch_label,
            ),
        )
