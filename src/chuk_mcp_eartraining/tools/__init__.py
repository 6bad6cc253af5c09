"""
MCP tool implementations.

Tools are organized by domain:
- theory - Pitch, interval, scale and chord lookups
- synthesis - Rendering notes and chords to WAV
- quiz - Scale-degree ear-training rounds
"""

from chuk_mcp_eartraining.tools.quiz import register_quiz_tools
from chuk_mcp_eartraining.tools.synthesis import register_synthesis_tools
from chuk_mcp_eartraining.tools.theory import register_theory_tools

__all__ = [
    "register_quiz_tools",
    "register_synthesis_tools",
    "register_theory_tools",
]
