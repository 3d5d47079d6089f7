"""
Server bootstrap.

Singleton that wires the invoker, persister and dispatcher from one
ServerConfig.
"""

from typing import Optional

from agent.mcp.fal_invoker import FalInvoker
from agent.storage.persister import ArtifactPersister
from agent.tools.dispatcher import Dispatcher

from .config import ServerConfig, get_config


class ServerBootstrap:
    """
    Bootstrap server components based on configuration.

    Singleton pattern - single instance per process.
    """

    _instance: Optional["ServerBootstrap"] = None

    def __init__(self, config: Optional[ServerConfig] = None):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.invoker = FalInvoker(
            api_key=self.config.api_key,
            timeout_ms=self.config.timeout_ms,
        )
        self.persister = ArtifactPersister(
            output_dir=self.config.output_dir,
            timeout=self.config.timeout_ms / 1000.0,
        )
        self.dispatcher = Dispatcher(self.invoker, self.persister)

    @classmethod
    def get_instance(cls, config: Optional[ServerConfig] = None) -> "ServerBootstrap":
        """
        Get singleton instance.

        Args:
            config: Optional custom configuration (only used first time)

        Returns:
            Singleton ServerBootstrap instance
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    def get_dispatcher(self) -> Dispatcher:
        return self.dispatcher

    def __repr__(self) -> str:
        return (
            f"ServerBootstrap(timeout_ms={self.config.timeout_ms}, "
            f"output_dir={self.config.output_dir})"
        )


def bootstrap_server(config: Optional[ServerConfig] = None) -> ServerBootstrap:
    """
    Bootstrap all server components.

    Args:
        config: Optional custom configuration

    Returns:
        ServerBootstrap instance with all components initialized
    """
    return ServerBootstrap.get_instance(config)
