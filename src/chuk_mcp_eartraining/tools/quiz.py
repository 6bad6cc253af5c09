"""
Quiz tools - MCP tools for the scale-degree ear-training quiz.

A question renders the cadence followed by the question note into one WAV
file; the answer is the scale degree index.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_eartraining.constants import ErrorMessages
from chuk_mcp_eartraining.quiz import QuizManager
from chuk_mcp_eartraining.synth import concatenate, write_wav

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

QUESTION_AUDIO_PREFIX = "question_"


def prune_question_audio(output_dir: Path, manager: QuizManager) -> int:
    """
    Delete question WAV files whose question is no longer pending.

    Keeps the audio on disk bounded by the manager's pending cap.

    Returns:
        Number of files removed
    """
    if not output_dir.is_dir():
        return 0

    removed = 0
    for path in output_dir.glob(f"{QUESTION_AUDIO_PREFIX}*.wav"):
        question_id = path.stem[len(QUESTION_AUDIO_PREFIX) :]
        if not manager.is_pending(question_id):
            path.unlink(missing_ok=True)
            removed += 1
    if removed:
        logger.debug(f"Removed {removed} stale question audio file(s) from {output_dir}")
    return removed


def register_quiz_tools(mcp: ChukMCPServer, manager: QuizManager) -> dict[str, Any]:
    """
    Register quiz tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The quiz manager holding pending questions

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    quiz = manager.quiz

    @mcp.tool  # type: ignore[arg-type]
    async def ear_new_question(render: bool = True) -> str:
        """
        Start a quiz round.

        Plays the I-IV-V-I cadence in the configured key, then one random
        scale degree. Answer with ear_answer using the returned id.

        Args:
            render: Write the cadence and question note to a WAV file

        Returns:
            JSON string with the question id, answer choices and audio path

        Example:
            ear_new_question()
        """
        try:
            question_id, question = await manager.new_question()
            result: dict[str, Any] = {
                "status": "success",
                "question_id": question_id,
                "choices": quiz.scale.labels(),
                "cadence": [[p.label for p in chord] for chord in quiz.cadence_chords()],
            }

            if render:
                prune_question_audio(quiz.config.output_dir, manager)
                sound = concatenate([*quiz.render_cadence(), quiz.render_question(question)])
                output_path = quiz.config.output_dir / f"{QUESTION_AUDIO_PREFIX}{question_id}.wav"
                write_wav(sound, output_path)
                result["path"] = str(output_path)

            return json.dumps(result)
        except Exception as e:
            logger.exception("Failed to create question")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ear_new_question"] = ear_new_question

    @mcp.tool  # type: ignore[arg-type]
    async def ear_answer(question_id: str, answer_index: int) -> str:
        """
        Answer a pending quiz question.

        Args:
            question_id: Id returned by ear_new_question
            answer_index: Chosen scale degree index (0 = tonic)

        Returns:
            JSON string saying whether the answer was right, with the
            interval name and pitch that were played

        Example:
            ear_answer(question_id="3f2a...", answer_index=4)
        """
        try:
            max_index = len(quiz.scale) - 1
            if not 0 <= answer_index <= max_index:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_ANSWER.format(
                            index=answer_index, max_index=max_index
                        ),
                    }
                )

            answer = await manager.answer(question_id, answer_index)
            if answer is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.QUESTION_NOT_FOUND.format(
                            question_id=question_id
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "correct": answer.correct,
                    "message": answer.message,
                    "expected_index": answer.question.degree_index,
                    "interval": answer.question.interval_name,
                    "pitch": answer.question.pitch_label,
                }
            )
        except Exception as e:
            logger.exception("Failed to answer question")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ear_answer"] = ear_answer

    return tools
