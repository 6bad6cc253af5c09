#!/usr/bin/env python3
"""
Async Ear Training MCP Server using chuk-mcp-server

This server provides MCP tools for interval ear training on top of a small
equal-temperament synthesis engine.

The server provides tools for:
- Describing pitches, intervals, scales and chords
- Rendering notes and chords as sine-wave WAV files
- Running scale-degree quiz rounds (cadence + random note)
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_eartraining.models import load_config
from chuk_mcp_eartraining.quiz import EarTrainingQuiz, QuizManager
from chuk_mcp_eartraining.tools import (
    register_quiz_tools,
    register_synthesis_tools,
    register_theory_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-eartraining")

# Config from $EARTRAINING_CONFIG, ./eartraining.yaml or defaults
config = load_config()

# Create managers
quiz_manager = QuizManager(EarTrainingQuiz(config))

# Register all tools
theory_tools = register_theory_tools(mcp, config.tuning)
synthesis_tools = register_synthesis_tools(mcp, config)
quiz_tools = register_quiz_tools(mcp, quiz_manager)

# Export tool functions for direct access
ear_pitch_info = theory_tools["ear_pitch_info"]
ear_interval_label = theory_tools["ear_interval_label"]
ear_build_chord = theory_tools["ear_build_chord"]
ear_list_scales = theory_tools["ear_list_scales"]

ear_render_note = synthesis_tools["ear_render_note"]
ear_render_chord = synthesis_tools["ear_render_chord"]

ear_new_question = quiz_tools["ear_new_question"]
ear_answer = quiz_tools["ear_answer"]

logger.info("CHUK Ear Training MCP Server initialized")
logger.info(f"  Key: {config.tonic} {config.scale}")
logger.info(f"  Sample rate: {config.sample_rate} Hz")
logger.info(f"  Output dir: {config.output_dir}")
