"""
Server configuration.

Loaded once at startup from the environment (and a .env file if present),
then frozen and injected into every component.

  FAL_KEY          required, fal.ai API key
  FAL_TIMEOUT      base upstream timeout in ms (default 120000)
  FAL_OUTPUT_DIR   directory for auto-named artifacts (default ./generated-media)
  FAL_LOG_LEVEL    logging level name (default INFO)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_TIMEOUT_MS = 120_000
DEFAULT_OUTPUT_DIR = "./generated-media"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Missing or invalid configuration; the server must not start."""


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration from environment."""

    api_key: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """
        Load configuration from environment variables.

        Variables already set in the process win over the .env file.

        Raises:
            ConfigError: FAL_KEY missing, or FAL_TIMEOUT not a positive integer.
        """
        load_dotenv(override=False)

        api_key = os.getenv("FAL_KEY", "").strip()
        if not api_key:
            raise ConfigError(
                "fal.ai API key not configured. Please set the FAL_KEY environment variable."
            )

        log_level = (os.getenv("FAL_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"FAL_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return cls(
            api_key=api_key,
            timeout_ms=_parse_timeout(os.getenv("FAL_TIMEOUT")),
            output_dir=Path(os.getenv("FAL_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR),
            log_level=log_level,
        )

    def __repr__(self) -> str:
        # api_key is never printed
        return (
            f"ServerConfig(timeout_ms={self.timeout_ms}, "
            f"output_dir={str(self.output_dir)!r}, log_level={self.log_level!r})"
        )


def _parse_timeout(raw) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_MS
    try:
        timeout_ms = int(raw.strip())
    except ValueError:
        raise ConfigError(f"FAL_TIMEOUT must be an integer number of milliseconds, got {raw!r}") from None
    if timeout_ms <= 0:
        raise ConfigError("FAL_TIMEOUT must be a positive number")
    return timeout_ms


def get_config() -> ServerConfig:
    """Get server configuration from the current environment."""
    return ServerConfig.from_env()
