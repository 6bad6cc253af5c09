"""
Tests for engine configuration.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_mcp_eartraining.core import PitchClass, Scale
from chuk_mcp_eartraining.models import EngineConfig, load_config
from chuk_mcp_eartraining.models.config import CONFIG_ENV_VAR


class TestEngineConfig:
    """Tests for EngineConfig validation."""

    def test_defaults(self) -> None:
        """Defaults match the classic quiz setup."""
        config = EngineConfig()
        assert config.sample_rate == 44100
        assert config.note_samples == 44100
        assert config.reference_hz == 440.0
        assert config.tonic_pitch_class == PitchClass.C
        assert config.scale_preset is Scale.MAJOR
        assert (config.bottom_octave, config.top_octave) == (4, 6)

    def test_frozen(self) -> None:
        """Config cannot be mutated."""
        config = EngineConfig()
        with pytest.raises(ValidationError):
            config.sample_rate = 8000

    def test_invalid_tonic(self) -> None:
        """Unknown tonic raises error."""
        with pytest.raises(ValidationError):
            EngineConfig(tonic="H")

    def test_invalid_scale(self) -> None:
        """Unknown scale raises error."""
        with pytest.raises(ValidationError):
            EngineConfig(scale="blues")

    def test_octave_range(self) -> None:
        """Top octave must be above bottom octave."""
        with pytest.raises(ValidationError):
            EngineConfig(bottom_octave=5, top_octave=5)

    def test_non_positive_sample_rate(self) -> None:
        """Sample rate must be positive."""
        with pytest.raises(ValidationError):
            EngineConfig(sample_rate=0)

    def test_tuning(self) -> None:
        """Tuning follows the reference frequency."""
        assert EngineConfig(reference_hz=442.0).tuning.reference_hz == 442.0


class TestLoadConfig:
    """Tests for loading config from YAML."""

    def test_defaults_without_file(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """No file anywhere gives defaults."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(temp_dir)
        assert load_config() == EngineConfig()

    def test_explicit_path(self, temp_dir: Path) -> None:
        """Values come from an explicit YAML file."""
        path = temp_dir / "config.yaml"
        path.write_text(yaml.safe_dump({"sample_rate": 22050, "tonic": "F#", "scale": "minor"}))

        config = load_config(path)
        assert config.sample_rate == 22050
        assert config.tonic_pitch_class == PitchClass.Fs
        assert config.scale_preset is Scale.NATURAL_MINOR

    def test_env_var(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The environment variable points at a config file."""
        path = temp_dir / "env.yaml"
        path.write_text(yaml.safe_dump({"note_samples": 1000}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().note_samples == 1000

    def test_working_directory_file(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """eartraining.yaml in the working directory is picked up."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        (temp_dir / "eartraining.yaml").write_text(yaml.safe_dump({"reference_hz": 432.0}))
        monkeypatch.chdir(temp_dir)
        assert load_config().reference_hz == 432.0

    def test_overrides(self, temp_dir: Path) -> None:
        """Keyword overrides win over file values; None is ignored."""
        path = temp_dir / "config.yaml"
        path.write_text(yaml.safe_dump({"sample_rate": 22050}))
        config = load_config(path, sample_rate=8000, tonic=None)
        assert config.sample_rate == 8000
        assert config.tonic == "C"

    def test_missing_explicit_file(self, temp_dir: Path) -> None:
        """A missing explicit file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "nope.yaml")

    def test_empty_file(self, temp_dir: Path) -> None:
        """An empty file gives defaults."""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_config(path) == EngineConfig()

    def test_non_mapping_file(self, temp_dir: Path) -> None:
        """A YAML list is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_value(self, temp_dir: Path) -> None:
        """Invalid values fail validation."""
        path = temp_dir / "bad.yaml"
        path.write_text(yaml.safe_dump({"top_octave": 2, "bottom_octave": 4}))
        with pytest.raises(ValidationError):
            load_config(path)
