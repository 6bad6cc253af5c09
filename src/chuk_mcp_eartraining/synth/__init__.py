"""
Signal synthesis.

- waveform: single-cycle sine synthesis tiled to a sample count
- mixer: sample-wise averaging of equal-length buffers
- render: pitches and chords to Sounds (buffer + sample rate)
- pcm: 16-bit PCM conversion and WAV export
"""

from chuk_mcp_eartraining.synth.mixer import mix
from chuk_mcp_eartraining.synth.pcm import to_pcm16, wav_bytes, write_wav
from chuk_mcp_eartraining.synth.render import Sound, concatenate, render_chord, render_pitch
from chuk_mcp_eartraining.synth.waveform import SampleBuffer, cycle_length, sine_wave

__all__ = [
    "SampleBuffer",
    "cycle_length",
    "sine_wave",
    "mix",
    "Sound",
    "render_pitch",
    "render_chord",
    "concatenate",
    "to_pcm16",
    "wav_bytes",
    "write_wav",
]
