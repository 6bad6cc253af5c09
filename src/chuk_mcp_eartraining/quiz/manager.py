"""
Quiz Manager - tracks questions awaiting an answer.

Questions live in memory only, keyed by a random hex id. At most
max_pending questions are kept; creating one more drops the oldest.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from uuid import uuid4

from chuk_mcp_eartraining.constants import MAX_PENDING_QUESTIONS

from .session import EarTrainingQuiz, QuizAnswer, QuizQuestion

logger = logging.getLogger(__name__)


class QuizManager:
    """
    Hands out questions and evaluates answers by question id.

    A question is forgotten once it has been answered or evicted.
    """

    def __init__(self, quiz: EarTrainingQuiz, max_pending: int = MAX_PENDING_QUESTIONS):
        if max_pending < 1:
            raise ValueError(f"max_pending must be at least 1, got {max_pending}")
        self.quiz = quiz
        self.max_pending = max_pending
        self._pending: OrderedDict[str, QuizQuestion] = OrderedDict()

    async def new_question(self) -> tuple[str, QuizQuestion]:
        """Create a question and remember it until answered or evicted."""
        question = self.quiz.next_question()
        question_id = uuid4().hex
        self._pending[question_id] = question
        while len(self._pending) > self.max_pending:
            evicted_id, _ = self._pending.popitem(last=False)
            logger.debug(f"Evicted unanswered question {evicted_id}")
        return question_id, question

    async def get(self, question_id: str) -> QuizQuestion | None:
        return self._pending.get(question_id)

    async def answer(self, question_id: str, answer_index: int) -> QuizAnswer | None:
        """
        Answer a pending question.

        Returns:
            The evaluation, or None if the id is unknown, evicted or already
            answered
        """
        question = self._pending.pop(question_id, None)
        if question is None:
            return None
        return self.quiz.check(question, answer_index)

    def is_pending(self, question_id: str) -> bool:
        return question_id in self._pending

    def pending_count(self) -> int:
        return len(self._pending)
