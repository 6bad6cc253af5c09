"""
Pydantic models for the ear-training engine.

This module provides:
- EngineConfig: Sample rate, tuning, quiz key and register
- load_config: YAML/env/default config loading
"""

from chuk_mcp_eartraining.models.config import EngineConfig, load_config

__all__ = [
    "EngineConfig",
    "load_config",
]
