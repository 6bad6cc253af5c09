"""
Synthesis tools - MCP tools for rendering notes and chords to WAV.

Rendered files land in the configured output directory.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_eartraining.core import Pitch, RelativeChord, triad
from chuk_mcp_eartraining.models import EngineConfig
from chuk_mcp_eartraining.synth import Sound, render_chord, render_pitch, write_wav

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def sound_to_dict(sound: Sound) -> dict[str, Any]:
    return {
        "samples": len(sound),
        "sample_rate": sound.sample_rate,
        "duration_seconds": sound.duration_seconds,
        "peak": float(abs(sound.samples).max()) if len(sound) else 0.0,
    }


def register_synthesis_tools(mcp: ChukMCPServer, config: EngineConfig) -> dict[str, Any]:
    """
    Register rendering tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Engine configuration (sample rate, lengths, output dir)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    tuning = config.tuning

    @mcp.tool  # type: ignore[arg-type]
    async def ear_render_note(
        pitch: str,
        samples: int | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Render a single pitch as a sine wave WAV file.

        Args:
            pitch: Pitch in scientific notation (e.g., 'A4')
            samples: Number of samples (default: configured note length)
            output_name: Optional output filename (without .wav extension)

        Returns:
            JSON string with the file path and buffer details

        Example:
            ear_render_note(pitch="A4", samples=22050)
        """
        try:
            p = Pitch.parse(pitch)
            total = config.note_samples if samples is None else samples
            sound = render_pitch(p, config.sample_rate, total, tuning)

            output_path = config.output_dir / f"{output_name or p.label.replace('/', '_')}.wav"
            write_wav(sound, output_path)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "pitch": p.label,
                    "frequency_hz": tuning.frequency(p),
                    "sound": sound_to_dict(sound),
                }
            )
        except Exception as e:
            logger.exception("Failed to render note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ear_render_note"] = ear_render_note

    @mcp.tool  # type: ignore[arg-type]
    async def ear_render_chord(
        root: str,
        intervals: list[int] | None = None,
        samples: int | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Render a chord as the average of its sine waves.

        Args:
            root: Root pitch (e.g., 'C4')
            intervals: Semitone offsets in voice order (default: major triad)
            samples: Number of samples (default: configured note length)
            output_name: Optional output filename (without .wav extension)

        Returns:
            JSON string with the file path and buffer details

        Example:
            ear_render_chord(root="C4", intervals=[0, 4, 7])
        """
        try:
            base = Pitch.parse(root)
            chord = RelativeChord(tuple(intervals)) if intervals is not None else triad()
            pitches = chord.absolute(base)
            total = config.note_samples if samples is None else samples
            sound = render_chord(pitches, config.sample_rate, total, tuning)

            default_name = "chord_" + "_".join(p.label.replace("/", "_") for p in pitches)
            output_path = config.output_dir / f"{output_name or default_name}.wav"
            write_wav(sound, output_path)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "pitches": [p.label for p in pitches],
                    "sound": sound_to_dict(sound),
                }
            )
        except Exception as e:
            logger.exception("Failed to render chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ear_render_chord"] = ear_render_chord

    return tools
