"""
Infrastructure module exports.

Configuration and bootstrap for the fal.ai media server.
"""

from .config import ConfigError, ServerConfig, get_config
from .bootstrap import ServerBootstrap, bootstrap_server

__all__ = [
    "ConfigError",
    "ServerConfig",
    "get_config",
    "ServerBootstrap",
    "bootstrap_server",
]
