#!/usr/bin/env python3
"""
Example: Console ear-training quiz.

Each round writes the cadence and the question note to a WAV file, then
asks which scale degree was played.

Usage:
    python examples/play_quiz.py [--rounds 5] [--key D] [--scale minor]
"""

import argparse
from pathlib import Path

from chuk_mcp_eartraining.models import load_config
from chuk_mcp_eartraining.quiz import EarTrainingQuiz
from chuk_mcp_eartraining.synth import concatenate, write_wav


def main() -> None:
    """Run a few quiz rounds on the console."""
    parser = argparse.ArgumentParser(description="Scale-degree ear-training quiz")
    parser.add_argument("--rounds", type=int, default=5, help="Number of questions")
    parser.add_argument("--key", default=None, help="Tonic (default: C)")
    parser.add_argument("--scale", default=None, help="major or minor (default: major)")
    args = parser.parse_args()

    output_dir = Path(__file__).parent / "output"
    config = load_config(tonic=args.key, scale=args.scale, output_dir=output_dir)
    quiz = EarTrainingQuiz(config)

    choices = quiz.scale.labels()
    score = 0
    for round_number in range(1, args.rounds + 1):
        question = quiz.next_question()
        sound = concatenate([*quiz.render_cadence(), quiz.render_question(question)])
        path = write_wav(sound, output_dir / f"round_{round_number}.wav")

        print(f"\nRound {round_number}: play {path}")
        for index, label in enumerate(choices):
            print(f"  {index}: {label}")

        raw = input("Which degree? ").strip()
        if not raw.isdigit():
            print("Skipped.")
            continue

        answer = quiz.check(question, int(raw))
        score += answer.correct
        print(answer.message)

    print(f"\nScore: {score}/{args.rounds}")


if __name__ == "__main__":
    main()
