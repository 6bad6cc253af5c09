"""
Ear-training quiz.

- EarTrainingQuiz: cadence + random scale-degree questions
- QuizManager: pending questions by id
"""

from chuk_mcp_eartraining.quiz.manager import QuizManager
from chuk_mcp_eartraining.quiz.session import CADENCE, EarTrainingQuiz, QuizAnswer, QuizQuestion

__all__ = [
    "CADENCE",
    "EarTrainingQuiz",
    "QuizAnswer",
    "QuizManager",
    "QuizQuestion",
]
