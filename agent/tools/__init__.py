"""
agent/tools package.

The operation catalogue, argument validation and result extraction.
"""

from agent.tools.base import LatencyClass, MediaKind, Operation, ToolResponse
from agent.tools.catalogue import OPERATIONS, get_operation, list_operations

__all__ = [
    "LatencyClass",
    "MediaKind",
    "Operation",
    "ToolResponse",
    "OPERATIONS",
    "get_operation",
    "list_operations",
]
