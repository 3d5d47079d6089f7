"""
MCP layer.

Upstream access to fal.ai and the error taxonomy shared by every stage.
The protocol server itself lives in agent.mcp.server (imported by main.py).
"""

from agent.mcp.errors import (
    FalMediaError,
    ValidationFailure,
    UpstreamTimeout,
    classify_error,
    classify_exception,
)
from agent.mcp.fal_invoker import FalInvoker, UpstreamResponse

__all__ = [
    "FalMediaError",
    "ValidationFailure",
    "UpstreamTimeout",
    "classify_error",
    "classify_exception",
    "FalInvoker",
    "UpstreamResponse",
]
