"""
Pytest configuration and shared fixtures.
"""

import random
import tempfile
from pathlib import Path

import pytest

from chuk_mcp_eartraining.models import EngineConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def small_config(temp_dir: Path) -> EngineConfig:
    """Config with short buffers so rendering stays fast."""
    return EngineConfig(sample_rate=8000, note_samples=800, output_dir=temp_dir / "output")


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)
