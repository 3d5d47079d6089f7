"""
Artifact persistence: download a result URL to the local filesystem.

Rules:
- Exactly one GET per persist() call, no retry
- Parent directories are created on demand
- Existing files are overwritten
- Non-2xx responses raise DownloadFailed with the status text
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import httpx

from agent.mcp.errors import DownloadFailed


logger = logging.getLogger(__name__)


def timestamp_slug(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 timestamp (millisecond precision) safe for file names."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    iso = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return iso.replace(":", "-").replace(".", "-")


class ArtifactPersister:
    """
    Fetches artifacts over HTTP and writes them under output_dir.

    Usage:
        persister = ArtifactPersister(output_dir="./generated-media")
        path = await persister.persist(url, prefix="generated", extension="png")
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            output_dir: Directory for auto-named artifacts.
            timeout:    Download timeout in seconds.
            transport:  Optional httpx transport (tests inject MockTransport).
        """
        self.output_dir = Path(output_dir)
        self.timeout = timeout
        self._transport = transport

    def auto_path(self, prefix: str, extension: str, now: Optional[datetime] = None) -> Path:
        """{output_dir}/{prefix}-{timestamp}.{extension}, absolute."""
        filename = f"{prefix}-{timestamp_slug(now)}.{extension}"
        return (self.output_dir / filename).resolve()

    def resolve_path(self, target_path: Optional[str], prefix: str, extension: str) -> Path:
        if target_path:
            return Path(target_path).expanduser()
        return self.auto_path(prefix, extension)

    async def persist(
        self,
        url: str,
        target_path: Optional[str] = None,
        prefix: str = "artifact",
        extension: str = "bin",
    ) -> Path:
        """
        Download url and write it to target_path (or a derived path).

        Returns:
            The path the artifact was written to.

        Raises:
            DownloadFailed: non-success HTTP status.
        """
        path = self.resolve_path(target_path, prefix, extension)
        path.parent.mkdir(parents=True, exist_ok=True)

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)

        if not response.is_success:
            raise DownloadFailed(
                response.reason_phrase or f"HTTP {response.status_code}", url=url
            )

        path.write_bytes(response.content)
        logger.info(f"Saved {len(response.content)} bytes to {path}")
        return path
