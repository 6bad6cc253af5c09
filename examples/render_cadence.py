#!/usr/bin/env python3
"""
Example: Render notes, chords and a cadence to WAV files.

This demonstrates the synthesis pipeline - the endpoint of the engine.
Run this script to create WAV files you can open in any audio player.

Usage:
    python examples/render_cadence.py
    # Creates: examples/output/a4.wav, c_major_triad.wav, cadence_c.wav
"""

from pathlib import Path

from chuk_mcp_eartraining.core import Pitch, PitchClass, triad
from chuk_mcp_eartraining.quiz import EarTrainingQuiz
from chuk_mcp_eartraining.synth import concatenate, render_chord, render_pitch, write_wav

SAMPLE_RATE = 44100
NOTE_SAMPLES = 44100  # one second per note


def main() -> None:
    """Render example WAV files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: A single A4 (440 Hz)
    print("Rendering a4.wav...")
    a4 = Pitch(PitchClass.A, 4)
    write_wav(render_pitch(a4, SAMPLE_RATE, NOTE_SAMPLES), output_dir / "a4.wav")
    print(f"  {a4.label}: {a4.frequency:.2f} Hz")

    # Example 2: C major triad, voices averaged so the mix never clips
    print("\nRendering c_major_triad.wav...")
    pitches = triad().absolute(Pitch(PitchClass.C, 4))
    write_wav(
        render_chord(pitches, SAMPLE_RATE, NOTE_SAMPLES),
        output_dir / "c_major_triad.wav",
    )
    print(f"  Pitches: {', '.join(p.label for p in pitches)}")

    # Example 3: I-IV-V-I cadence in C, as played before each quiz question
    print("\nRendering cadence_c.wav...")
    quiz = EarTrainingQuiz()
    cadence = concatenate(quiz.render_cadence())
    write_wav(cadence, output_dir / "cadence_c.wav")
    for chord in quiz.cadence_chords():
        print(f"  {' '.join(p.label for p in chord)}")

    print("\nDone! Open the WAV files to hear them.")


if __name__ == "__main__":
    main()
