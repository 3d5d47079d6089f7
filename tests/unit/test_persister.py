"""
tests/unit/test_persister.py

Tests for ArtifactPersister.

Verifies:
✔ Derived file name {prefix}-{UTC timestamp}.{ext} with millisecond precision
✔ Explicit target path used verbatim, parent directories created
✔ Downloaded bytes written exactly; existing files overwritten
✔ Non-2xx status → DownloadFailed naming the status text, nothing written
✔ Exactly one GET per persist()
"""

import re
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from agent.mcp.errors import DownloadFailed
from agent.storage.persister import ArtifactPersister, timestamp_slug


DERIVED_NAME = re.compile(r"generated-\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z\.png")


def make_persister(output_dir, status=200, content=b"artifact-bytes", requests=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status, content=content)

    return ArtifactPersister(output_dir, transport=httpx.MockTransport(handler))


class TestTimestampSlug:
    def test_fixed_time(self):
        now = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
        assert timestamp_slug(now) == "2024-01-02T03-04-05-678Z"

    def test_converted_to_utc(self):
        local = datetime(2024, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert timestamp_slug(local) == "2024-01-02T03-04-05-000Z"

    def test_no_filename_unsafe_separators(self):
        slug = timestamp_slug()
        assert ":" not in slug
        assert "." not in slug


class TestPaths:
    def test_auto_path_format(self, tmp_path):
        persister = ArtifactPersister(tmp_path)
        path = persister.auto_path("generated", "png")
        assert path.parent == tmp_path.resolve()
        assert DERIVED_NAME.fullmatch(path.name)
        assert path.is_absolute()

    def test_explicit_path_wins(self, tmp_path):
        persister = ArtifactPersister(tmp_path / "media")
        target = tmp_path / "mine" / "fox.jpg"
        assert persister.resolve_path(str(target), "generated", "png") == target


class TestPersist:
    @pytest.mark.asyncio
    async def test_writes_downloaded_bytes(self, tmp_path):
        requests = []
        persister = make_persister(tmp_path / "out", content=b"\x89PNG data", requests=requests)

        path = await persister.persist(
            "https://v3.fal.media/files/fox.png", prefix="generated", extension="png"
        )

        assert path.read_bytes() == b"\x89PNG data"
        assert DERIVED_NAME.fullmatch(path.name)
        assert len(requests) == 1
        assert str(requests[0].url) == "https://v3.fal.media/files/fox.png"

    @pytest.mark.asyncio
    async def test_creates_nested_directories(self, tmp_path):
        persister = make_persister(tmp_path)
        target = tmp_path / "a" / "b" / "c" / "clip.mp4"

        path = await persister.persist("https://x/clip.mp4", target_path=str(target))

        assert path == target
        assert target.read_bytes() == b"artifact-bytes"

    @pytest.mark.asyncio
    async def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "song.mp3"
        target.write_bytes(b"old")
        persister = make_persister(tmp_path, content=b"new")

        await persister.persist("https://x/song.mp3", target_path=str(target))

        assert target.read_bytes() == b"new"

    @pytest.mark.asyncio
    async def test_http_error_status(self, tmp_path):
        persister = make_persister(tmp_path, status=404)
        target = tmp_path / "missing.png"

        with pytest.raises(DownloadFailed) as exc_info:
            await persister.persist("https://x/missing.png", target_path=str(target))

        assert exc_info.value.message == "Failed to download result: Not Found"
        assert exc_info.value.url == "https://x/missing.png"
        assert not target.exists()
