"""
Tests for the ear-training quiz.

Tests cover:
- EarTrainingQuiz cadence, questions and answer checking
- QuizManager pending question lifecycle
"""

import random

import numpy as np
import pytest

from chuk_mcp_eartraining.core import Pitch, PitchClass, RelativeChord
from chuk_mcp_eartraining.models import EngineConfig
from chuk_mcp_eartraining.quiz import CADENCE, EarTrainingQuiz, QuizManager


class TestCadence:
    """Tests for the I-IV-V-I cadence."""

    def test_cadence_roots(self) -> None:
        """Cadence roots are I, IV, V, I."""
        assert list(CADENCE) == [0, 5, 7, 0]

    def test_cadence_chords_in_c(self, small_config: EngineConfig) -> None:
        """In C the cadence is C, F, G, C major triads from octave 4."""
        quiz = EarTrainingQuiz(small_config)
        chords = quiz.cadence_chords()
        assert [[p.label for p in chord] for chord in chords] == [
            ["C4", "E4", "G4"],
            ["F4", "A4", "C5"],
            ["G4", "B4", "D5"],
            ["C4", "E4", "G4"],
        ]

    def test_cadence_in_other_key(self, small_config: EngineConfig) -> None:
        """The cadence follows the configured tonic."""
        config = small_config.model_copy(update={"tonic": "D"})
        quiz = EarTrainingQuiz(config)
        assert quiz.cadence_chords()[0][0] == Pitch(PitchClass.D, 4)

    def test_custom_chord(self, small_config: EngineConfig) -> None:
        """The cadence chord can be swapped."""
        quiz = EarTrainingQuiz(small_config, chord=RelativeChord.MINOR_TRIAD)
        assert [p.label for p in quiz.cadence_chords()[0]] == ["C4", "D#/Eb4", "G4"]

    def test_empty_chord_kept(self, small_config: EngineConfig) -> None:
        """An empty chord is used as given, not replaced by the triad."""
        quiz = EarTrainingQuiz(small_config, chord=RelativeChord(()))
        assert quiz.chord.intervals == ()
        assert quiz.cadence_chords() == [[], [], [], []]

    def test_render_cadence(self, small_config: EngineConfig) -> None:
        """Each cadence chord renders to a bounded buffer of note length."""
        sounds = EarTrainingQuiz(small_config).render_cadence()
        assert len(sounds) == 4
        for sound in sounds:
            assert len(sound) == small_config.note_samples
            assert sound.sample_rate == small_config.sample_rate
            assert np.max(np.abs(sound.samples)) <= 1.0


class TestQuestions:
    """Tests for question generation and checking."""

    def test_question_for(self, small_config: EngineConfig) -> None:
        """The fifth degree in octave 4 is G4 / Perfect V."""
        question = EarTrainingQuiz(small_config).question_for(4, 4)
        assert question.semitones == 7
        assert question.pitch == Pitch(PitchClass.G, 4)
        assert question.interval_name == "Perfect V"
        assert question.pitch_label == "G4"

    def test_minor_scale_question(self, small_config: EngineConfig) -> None:
        """Minor scale questions use minor degrees."""
        config = small_config.model_copy(update={"scale": "minor"})
        question = EarTrainingQuiz(config).question_for(2, 5)
        assert question.interval_name == "Minor III"
        assert question.pitch == Pitch(PitchClass.Ds, 5)

    def test_random_questions_in_range(self, small_config: EngineConfig, rng: random.Random) -> None:
        """Random questions stay inside the scale and octave range."""
        quiz = EarTrainingQuiz(small_config, rng=rng)
        for _ in range(200):
            question = quiz.next_question()
            assert 0 <= question.degree_index < 7
            assert small_config.bottom_octave <= question.pitch.octave < small_config.top_octave

    def test_seeded_questions_repeat(self, small_config: EngineConfig) -> None:
        """The same seed gives the same questions."""
        a = EarTrainingQuiz(small_config, rng=random.Random(7))
        b = EarTrainingQuiz(small_config, rng=random.Random(7))
        assert [a.next_question() for _ in range(10)] == [b.next_question() for _ in range(10)]

    def test_render_question(self, small_config: EngineConfig) -> None:
        """The question renders as a single sine note."""
        quiz = EarTrainingQuiz(small_config)
        sound = quiz.render_question(quiz.question_for(0, 4))
        assert len(sound) == small_config.note_samples

    def test_check_correct(self, small_config: EngineConfig) -> None:
        """A matching index is correct."""
        quiz = EarTrainingQuiz(small_config)
        answer = quiz.check(quiz.question_for(4, 4), 4)
        assert answer.correct
        assert answer.message == "Correct! That was the Perfect V (G4)."

    def test_check_wrong(self, small_config: EngineConfig) -> None:
        """A different index is wrong and names the right answer."""
        quiz = EarTrainingQuiz(small_config)
        answer = quiz.check(quiz.question_for(1, 5), 3)
        assert not answer.correct
        assert answer.message == "Wrong! That was the Major II (D5)."


class TestQuizManager:
    """Tests for pending question tracking."""

    @pytest.mark.asyncio
    async def test_question_lifecycle(self, small_config: EngineConfig, rng: random.Random):
        """A question can be answered once."""
        manager = QuizManager(EarTrainingQuiz(small_config, rng=rng))
        question_id, question = await manager.new_question()
        assert manager.pending_count() == 1
        assert await manager.get(question_id) == question

        answer = await manager.answer(question_id, question.degree_index)
        assert answer is not None
        assert answer.correct
        assert manager.pending_count() == 0

        assert await manager.answer(question_id, 0) is None

    @pytest.mark.asyncio
    async def test_unknown_question(self, small_config: EngineConfig):
        """Unknown ids return None."""
        manager = QuizManager(EarTrainingQuiz(small_config))
        assert await manager.answer("missing", 0) is None

    @pytest.mark.asyncio
    async def test_oldest_question_evicted(self, small_config: EngineConfig, rng: random.Random):
        """Unanswered questions beyond the cap drop the oldest first."""
        manager = QuizManager(EarTrainingQuiz(small_config, rng=rng), max_pending=2)
        first_id, _ = await manager.new_question()
        second_id, _ = await manager.new_question()
        third_id, _ = await manager.new_question()

        assert manager.pending_count() == 2
        assert not manager.is_pending(first_id)
        assert manager.is_pending(second_id)
        assert manager.is_pending(third_id)
        assert await manager.answer(first_id, 0) is None

    def test_invalid_cap(self, small_config: EngineConfig):
        """The pending cap must be positive."""
        with pytest.raises(ValueError):
            QuizManager(EarTrainingQuiz(small_config), max_pending=0)
