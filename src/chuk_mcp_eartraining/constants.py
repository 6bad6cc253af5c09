"""
Constants for the ear-training server.

No magic strings - messages and defaults live here.
"""

DEFAULT_SAMPLE_RATE = 44100


class ErrorMessages:
    """Standardized error messages."""

    QUESTION_NOT_FOUND = "Question '{question_id}' not found or already answered."
    INVALID_ANSWER = "Invalid answer index: {index}. Must be between 0 and {max_index}."


class QuizMessages:
    """Answer feedback shown to the listener."""

    CORRECT = "Correct! That was the {interval} ({note})."
    WRONG = "Wrong! That was the {interval} ({note})."

# Unanswered questions kept before the oldest are dropped
MAX_PENDING_QUESTIONS = 100
