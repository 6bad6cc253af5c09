"""
Theory tools - MCP tools for pitches, intervals, scales and chords.

Read-only lookups over the core primitives.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_eartraining.core import (
    Pitch,
    RelativeChord,
    Scale,
    Tuning,
    absolute_chord,
    interval_label,
    triad,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def pitch_to_dict(pitch: Pitch, tuning: Tuning) -> dict[str, Any]:
    """Serialize a pitch for tool output."""
    return {
        "label": pitch.label,
        "pitch_class": int(pitch.pitch_class),
        "octave": pitch.octave,
        "linear_index": pitch.linear_index,
        "midi": pitch.to_midi(),
        "frequency_hz": tuning.frequency(pitch),
    }


def register_theory_tools(mcp: ChukMCPServer, tuning: Tuning) -> dict[str, Any]:
    """
    Register theory lookup tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tuning: Tuning used for frequency output

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def ear_pitch_info(pitch: str) -> str:
        """
        Describe a pitch: label, linear index, MIDI number and frequency.

        Args:
            pitch: Pitch in scientific notation (e.g., 'A4', 'C#5', 'Bb3')

        Returns:
            JSON string with pitch details

        Example:
            ear_pitch_info(pitch="A4")
        """
        try:
            p = Pitch.parse(pitch)
            return json.dumps({"status": "success", "pitch": pitch_to_dict(p, tuning)})
        except Exception as e:
            logger.exception("Failed to describe pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ear_pitch_info"] = ear_pitch_info

    @mcp.tool  # type: ignore[arg-type]
    async def ear_interval_label(semitones: int) -> str:
        """
        Name an interval by its size in semitones.

        Args:
            semitones: Distance from the root (0-12)

        Returns:
            JSON string with the interval name ('Unknown' outside 0-12)

        Example:
            ear_interval_label(semitones=7)
        """
        return json.dumps(
            {"status": "success", "semitones": semitones, "label": interval_label(semitones)}
        )

    tools["ear_interval_label"] = ear_interval_label

    @mcp.tool  # type: ignore[arg-type]
    async def ear_build_chord(root: str, intervals: list[int] | None = None) -> str:
        """
        Build an absolute chord from a root pitch and relative intervals.

        Args:
            root: Root pitch (e.g., 'C4')
            intervals: Semitone offsets in voice order (default: major triad [0, 4, 7])

        Returns:
            JSON string with the chord pitches in voice order

        Example:
            ear_build_chord(root="F4", intervals=[0, 3, 7])
        """
        try:
            base = Pitch.parse(root)
            chord = RelativeChord(tuple(intervals)) if intervals is not None else triad()
            pitches = absolute_chord(base, chord.intervals)
            return json.dumps(
                {
                    "status": "success",
                    "root": base.label,
                    "intervals": [int(i) for i in chord.intervals],
                    "interval_labels": chord.labels(),
                    "pitches": [pitch_to_dict(p, tuning) for p in pitches],
                }
            )
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ear_build_chord"] = ear_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def ear_list_scales() -> str:
        """
        List the scale presets used by the quiz.

        Returns:
            JSON string with each scale's degree offsets and names
        """
        scales = [Scale.MAJOR, Scale.NATURAL_MINOR]
        return json.dumps(
            {
                "status": "success",
                "scales": [
                    {
                        "name": s.name,
                        "degrees": [int(d) for d in s.degrees],
                        "labels": s.labels(),
                    }
                    for s in scales
                ],
            }
        )

    tools["ear_list_scales"] = ear_list_scales

    return tools
