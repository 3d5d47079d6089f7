"""
tests/unit/test_catalogue.py

Tests for the operation catalogue and advertised tool schemas.

Verifies:
✔ 22 operations with unique names, in advertised order
✔ Every operation maps to a known fal.ai model
✔ Long-running operations are exactly the video, music and 3D ones
✔ Input schemas are plain JSON-schema objects (no null unions, no titles)
✔ Required lists agree with the argument models
✔ Extension override via output_format
"""

import pytest

from agent.tools.base import LatencyClass, MediaKind, render_input_schema
from agent.tools.catalogue import (
    MODELS,
    OPERATIONS,
    GenerateImageArgs,
    get_operation,
    list_operations,
)


EXPECTED_NAMES = [
    "generate_image",
    "edit_image",
    "image_to_image",
    "inpaint",
    "style_transfer",
    "text_to_video",
    "image_to_video",
    "lipsync",
    "avatar_video",
    "upscale_image",
    "upscale_video",
    "remove_background",
    "remove_video_background",
    "face_swap_image",
    "face_swap_video",
    "segment_image",
    "estimate_depth",
    "generate_music",
    "text_to_speech",
    "generate_sound_effect",
    "image_to_3d",
    "retexture_3d",
]

LONG_RUNNING = {
    "text_to_video",
    "image_to_video",
    "lipsync",
    "avatar_video",
    "upscale_video",
    "remove_video_background",
    "face_swap_video",
    "generate_music",
    "image_to_3d",
    "retexture_3d",
}


class TestCatalogueContents:
    def test_operation_names_in_order(self):
        assert [op.name for op in list_operations()] == EXPECTED_NAMES

    def test_names_unique(self):
        names = [op.name for op in OPERATIONS]
        assert len(names) == len(set(names))

    def test_model_ids_known(self):
        known = set(MODELS.values())
        for op in OPERATIONS:
            assert op.model_id in known, op.name

    def test_latency_classes(self):
        long_ops = {op.name for op in OPERATIONS if op.latency is LatencyClass.LONG}
        assert long_ops == LONG_RUNNING

    def test_get_operation(self):
        assert get_operation("inpaint").model_id == "fal-ai/flux-general/inpainting"
        assert get_operation("nope") is None

    def test_media_kinds(self):
        assert get_operation("generate_music").kind is MediaKind.AUDIO
        assert get_operation("image_to_3d").kind is MediaKind.MODEL_3D
        assert get_operation("lipsync").kind is MediaKind.VIDEO

    def test_saved_messages_name_the_path(self):
        for op in OPERATIONS:
            assert "{path}" in op.saved_message, op.name

    def test_only_inspection_tools_skip_auto_save(self):
        skipping = {op.name for op in OPERATIONS if not op.auto_save}
        assert skipping == {"segment_image"}
        inspection = {op.name for op in OPERATIONS if op.inspection}
        assert inspection == {"segment_image", "estimate_depth"}


# ─────────────────────────────────────────────────────
# Input schemas
# ─────────────────────────────────────────────────────


class TestInputSchemas:
    @pytest.mark.parametrize("operation", OPERATIONS, ids=lambda op: op.name)
    def test_schema_is_plain_object(self, operation):
        schema = operation.input_schema().model_dump()
        assert schema["type"] == "object"
        assert "save_path" in schema["properties"]
        assert "save_path" not in schema["required"]
        for name, prop in schema["properties"].items():
            assert "title" not in prop, name
            assert "anyOf" not in prop, name
            assert prop.get("description"), name

    def test_generate_image_schema(self):
        schema = render_input_schema(GenerateImageArgs)
        assert schema.required == ["prompt"]
        props = schema.properties
        assert props["prompt"]["type"] == "string"
        assert props["image_size"]["enum"] == [
            "square_hd",
            "square",
            "portrait_4_3",
            "portrait_16_9",
            "landscape_4_3",
            "landscape_16_9",
        ]
        assert props["num_images"]["type"] == "integer"
        assert props["num_images"]["minimum"] == 1
        assert props["num_images"]["maximum"] == 4
        assert "default" not in props["seed"]

    def test_retexture_required_fields(self):
        schema = get_operation("retexture_3d").input_schema()
        assert set(schema.required) == {"model_url", "prompt"}


class TestExtension:
    def test_output_format_overrides_extension(self):
        op = get_operation("generate_image")
        assert op.extension_for(GenerateImageArgs(prompt="x", output_format="jpeg")) == "jpeg"
        assert op.extension_for(GenerateImageArgs(prompt="x")) == "png"

    def test_operation_without_format_field(self):
        op = get_operation("text_to_video")
        assert op.extension == "mp4"
        assert op.format_field is None
