"""
tests/prompting/test_prompt_builder.py

Unit tests for the prompt guides.

Verifies:
✔ Four guides: image, video, audio, sound effect
✔ Every guide names only real catalogue tools
✔ build_prompt returns the guide text plus the tools line
✔ build_prompt appends the request, truncated to _MAX_REQUEST_CHARS
✔ Blank requests are omitted
✔ Unknown guide names raise KeyError
"""

import pytest
from agent.prompting.prompt_builder import (
    IMAGE_GENERATION_PROMPT,
    PROMPT_GUIDES,
    SOUND_EFFECT_PROMPT,
    _MAX_REQUEST_CHARS,
    build_prompt,
)
from agent.tools.catalogue import get_operation


class TestGuides:
    def test_guide_names(self):
        assert set(PROMPT_GUIDES) == {
            "image_generation",
            "video_generation",
            "audio_generation",
            "sound_effect",
        }

    def test_guides_reference_catalogue_tools(self):
        for guide in PROMPT_GUIDES.values():
            assert guide.tools
            for tool in guide.tools:
                assert get_operation(tool) is not None, tool

    def test_guide_text_mentions_fal(self):
        for guide in PROMPT_GUIDES.values():
            assert "fal.ai" in guide.text


class TestBuildPrompt:
    def test_without_request(self):
        prompt = build_prompt("image_generation")
        assert prompt.startswith(IMAGE_GENERATION_PROMPT)
        assert "Tools: generate_image, edit_image, image_to_image, inpaint" in prompt
        assert "Request:" not in prompt

    def test_with_request(self):
        prompt = build_prompt("sound_effect", "rain on a tin roof")
        assert prompt.startswith(SOUND_EFFECT_PROMPT)
        assert prompt.endswith("Request: rain on a tin roof")

    def test_blank_request_omitted(self):
        assert "Request:" not in build_prompt("video_generation", "   ")

    def test_request_truncated(self):
        prompt = build_prompt("audio_generation", "x" * (_MAX_REQUEST_CHARS + 500))
        request_line = prompt.split("Request: ", 1)[1]
        assert len(request_line) == _MAX_REQUEST_CHARS

    def test_unknown_guide(self):
        with pytest.raises(KeyError):
            build_prompt("poetry")
