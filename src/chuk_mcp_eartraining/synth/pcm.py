"""
PCM export - float buffers to 16-bit mono WAV.

This is the hand-off point to anything that actually plays audio.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np
import numpy.typing as npt

from .render import Sound

logger = logging.getLogger(__name__)

PCM16_MAX = 32767
SAMPLE_WIDTH_BYTES = 2
CHANNELS = 1


def to_pcm16(samples: npt.ArrayLike) -> npt.NDArray[np.int16]:
    """Clamp to [-1, 1], scale by 32767 and round to nearest."""
    clipped = np.clip(np.asarray(samples, dtype=np.float64), -1.0, 1.0)
    return np.rint(clipped * PCM16_MAX).astype("<i2")


def _write(target: str | io.BytesIO, sound: Sound) -> None:
    with wave.open(target, "wb") as wav:
        wav.setnchannels(CHANNELS)
        wav.setsampwidth(SAMPLE_WIDTH_BYTES)
        wav.setframerate(sound.sample_rate)
        wav.writeframes(to_pcm16(sound.samples).tobytes())


def wav_bytes(sound: Sound) -> bytes:
    """Encode a sound as an in-memory WAV file."""
    buf = io.BytesIO()
    _write(buf, sound)
    return buf.getvalue()


def write_wav(sound: Sound, path: Path) -> Path:
    """
    Write a sound to a WAV file, creating parent directories.

    Returns:
        The path written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    _write(str(path), sound)
    logger.debug(f"Wrote {len(sound)} samples at {sound.sample_rate} Hz to {path}")
    return path
