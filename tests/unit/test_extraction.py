"""
tests/unit/test_extraction.py

Tests for locating result URLs in upstream payloads.

Verifies:
✔ images[] wins over every singular location (even when empty)
✔ images[] items may be strings or {url} objects
✔ Probe order per media kind, first match wins
✔ {output: {url}} fallback for video, audio and 3D
✔ Non-dict payloads and empty strings yield nothing
"""

import pytest

from agent.tools.base import MediaKind
from agent.tools.extraction import (
    extract_3d_url,
    extract_audio_url,
    extract_image_urls,
    extract_urls,
    extract_video_url,
)


class TestImageExtraction:
    def test_images_list_of_objects(self):
        data = {"images": [{"url": "https://a/1.png"}, {"url": "https://a/2.png"}]}
        assert extract_image_urls(data) == ["https://a/1.png", "https://a/2.png"]

    def test_images_list_of_strings(self):
        assert extract_image_urls({"images": ["https://a/1.png"]}) == ["https://a/1.png"]

    def test_images_list_wins_over_url(self):
        data = {"images": [{"url": "https://a/1.png"}], "url": "https://a/other.png"}
        assert extract_image_urls(data) == ["https://a/1.png"]

    def test_empty_images_list_wins(self):
        assert extract_image_urls({"images": [], "url": "https://a/other.png"}) == []

    def test_singular_image_object(self):
        assert extract_image_urls({"image": {"url": "https://a/x.png"}}) == ["https://a/x.png"]

    def test_image_url_before_output(self):
        data = {"image_url": "https://a/flat.png", "output": {"url": "https://a/out.png"}}
        assert extract_image_urls(data) == ["https://a/flat.png"]

    def test_items_without_url_skipped(self):
        assert extract_image_urls({"images": [{"width": 10}, {"url": ""}]}) == []


class TestSingleLocatorKinds:
    @pytest.mark.parametrize(
        "extract", [extract_video_url, extract_audio_url, extract_3d_url]
    )
    def test_output_url_fallback(self, extract):
        assert extract({"output": {"url": "https://a/out"}}) == "https://a/out"

    @pytest.mark.parametrize(
        "extract", [extract_video_url, extract_audio_url, extract_3d_url]
    )
    def test_bare_url_last(self, extract):
        assert extract({"url": "https://a/bare"}) == "https://a/bare"

    def test_video_nested_before_flat(self):
        data = {"video_url": "https://a/flat.mp4", "video": {"url": "https://a/nested.mp4"}}
        assert extract_video_url(data) == "https://a/nested.mp4"

    def test_audio_file_shape(self):
        assert extract_audio_url({"audio_file": {"url": "https://a/s.mp3"}}) == "https://a/s.mp3"

    def test_3d_mesh_shapes(self):
        assert extract_3d_url({"model_mesh": {"url": "https://a/m.glb"}}) == "https://a/m.glb"
        assert extract_3d_url({"model_glb": {"url": "https://a/g.glb"}}) == "https://a/g.glb"

    def test_3d_model_before_output(self):
        data = {"output": {"url": "https://a/o.glb"}, "model": {"url": "https://a/m.glb"}}
        assert extract_3d_url(data) == "https://a/m.glb"

    def test_nothing_matches(self):
        assert extract_video_url({"status": "done"}) is None


class TestExtractUrls:
    @pytest.mark.parametrize("payload", [None, "https://a/x", ["https://a/x"], 42])
    def test_non_dict_payloads(self, payload):
        for kind in MediaKind:
            assert extract_urls(kind, payload) == []

    def test_dispatch_by_kind(self):
        assert extract_urls(MediaKind.AUDIO, {"audio": {"url": "https://a/a.mp3"}}) == [
            "https://a/a.mp3"
        ]
        assert extract_urls(MediaKind.IMAGE, {"audio": {"url": "https://a/a.mp3"}}) == []

    def test_empty_string_url_ignored(self):
        assert extract_urls(MediaKind.VIDEO, {"video": {"url": ""}, "url": "https://a/v"}) == [
            "https://a/v"
        ]
