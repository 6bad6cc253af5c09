"""
Engine configuration - sample rate, tuning, quiz key and register.

Configuration is a frozen pydantic model, loaded from YAML when a file is
available and otherwise built from defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_eartraining.constants import DEFAULT_SAMPLE_RATE
from chuk_mcp_eartraining.core.interval import Scale
from chuk_mcp_eartraining.core.pitch import PitchClass, Tuning

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EARTRAINING_CONFIG"
DEFAULT_CONFIG_FILE = "eartraining.yaml"


class EngineConfig(BaseModel):
    """
    Settings shared by synthesis and the quiz.

    Built once at startup and never mutated.
    """

    sample_rate: int = Field(DEFAULT_SAMPLE_RATE, gt=0, description="Sample rate in Hz")
    note_samples: int = Field(44100, ge=0, description="Length of each rendered note/chord")
    reference_hz: float = Field(440.0, gt=0, description="Frequency of A4")
    tonic: str = Field("C", description="Quiz key tonic (e.g., 'C', 'F#', 'Bb')")
    scale: str = Field("major", description="Quiz scale ('major' or 'minor')")
    bottom_octave: int = Field(4, ge=0, le=7, description="Lowest question octave (inclusive)")
    top_octave: int = Field(6, ge=1, le=8, description="Highest question octave (exclusive)")
    cadence_octave: int = Field(4, ge=0, le=7, description="Octave of the cadence roots")
    output_dir: Path = Field(Path("output"), description="Directory for rendered WAV files")

    model_config = {"frozen": True}

    @field_validator("tonic")
    @classmethod
    def validate_tonic(cls, v: str) -> str:
        """Ensure the tonic names a pitch class."""
        PitchClass.parse(v)
        return v.strip()

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: str) -> str:
        """Ensure the scale is a known preset."""
        Scale.parse(v)
        return v.strip().lower()

    @model_validator(mode="after")
    def validate_octaves(self) -> EngineConfig:
        if self.top_octave <= self.bottom_octave:
            raise ValueError(
                f"top_octave ({self.top_octave}) must be above bottom_octave ({self.bottom_octave})"
            )
        return self

    @property
    def tonic_pitch_class(self) -> PitchClass:
        return PitchClass.parse(self.tonic)

    @property
    def scale_preset(self) -> Scale:
        return Scale.parse(self.scale)

    @property
    def tuning(self) -> Tuning:
        return Tuning(reference_hz=self.reference_hz)


def _config_path(path: Path | None) -> Path | None:
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        if not candidate.exists():
            raise FileNotFoundError(f"Config file from ${CONFIG_ENV_VAR} not found: {candidate}")
        return candidate

    candidate = Path.cwd() / DEFAULT_CONFIG_FILE
    return candidate if candidate.exists() else None


def load_config(path: Path | None = None, **overrides: Any) -> EngineConfig:
    """
    Load engine configuration.

    Lookup order: explicit path, $EARTRAINING_CONFIG, ./eartraining.yaml,
    then defaults. Keyword overrides win over file values.

    Args:
        path: Optional YAML file
        **overrides: Field values that replace anything from the file

    Returns:
        Validated EngineConfig
    """
    data: dict[str, Any] = {}
    config_path = _config_path(path)
    if config_path is not None:
        with open(config_path) as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        data.update(loaded)
        logger.info(f"Loaded config from {config_path}")

    data.update({k: v for k, v in overrides.items() if v is not None})
    return EngineConfig(**data)
