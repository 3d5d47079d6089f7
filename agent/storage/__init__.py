"""
Storage module exports.

Downloading and writing generated artifacts to disk.
"""

from agent.storage.persister import ArtifactPersister, timestamp_slug

__all__ = ["ArtifactPersister", "timestamp_slug"]
