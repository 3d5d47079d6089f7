"""
Tool catalogue: every fal.ai operation this server exposes.

Pure data. One pydantic argument model per operation (constraints and help
text live on the fields) and one Operation record wiring it to its upstream
model, latency class, result kind and messages.

  Group           Operations
  ──────────────  ─────────────────────────────────────────────────────────
  Image gen       generate_image, edit_image, image_to_image, inpaint,
                  style_transfer
  Video gen       text_to_video, image_to_video, lipsync, avatar_video
  Image/video     upscale_image, upscale_video, remove_background,
  utilities       remove_video_background, face_swap_image, face_swap_video,
                  segment_image, estimate_depth
  Audio           generate_music, text_to_speech, generate_sound_effect
  3D              image_to_3d, retexture_3d
"""

from typing import Dict, Literal, Optional, Tuple

from pydantic import Field

from agent.tools.base import (
    LatencyClass,
    MediaKind,
    Operation,
    ToolArgs,
    WholeNumber,
    save_path_field,
)


# ──────────────────────────────────────────────────────────────
# UPSTREAM MODELS (best-in-class per capability)
# ──────────────────────────────────────────────────────────────


MODELS: Dict[str, str] = {
    # Image generation
    "TEXT_TO_IMAGE": "fal-ai/flux-pro/kontext/max/text-to-image",
    "EDIT_IMAGE": "fal-ai/flux-pro/kontext/max",
    "IMAGE_TO_IMAGE": "fal-ai/flux-general",
    "INPAINT": "fal-ai/flux-general/inpainting",
    "STYLE_TRANSFER": "fal-ai/flux/schnell/redux",
    # Video generation
    "TEXT_TO_VIDEO": "fal-ai/kling-video/v3/pro/text-to-video",
    "IMAGE_TO_VIDEO": "fal-ai/kling-video/v3/pro/image-to-video",
    "LIPSYNC": "fal-ai/sync-lipsync/v2",
    "AVATAR_VIDEO": "fal-ai/bytedance/omnihuman/v1.5",
    # Image utilities
    "UPSCALE_IMAGE": "fal-ai/topaz/upscale/image",
    "UPSCALE_VIDEO": "fal-ai/topaz/upscale/video",
    "REMOVE_BACKGROUND": "fal-ai/bria/background/remove",
    "REMOVE_VIDEO_BACKGROUND": "fal-ai/bria/video/background-removal",
    "FACE_SWAP_IMAGE": "fal-ai/face-swap",
    "FACE_SWAP_VIDEO": "fal-ai/face-swap/video",
    "SEGMENT_IMAGE": "fal-ai/sam3",
    "ESTIMATE_DEPTH": "fal-ai/marigold-depth-estimation",
    # Audio & music
    "GENERATE_MUSIC": "fal-ai/beatoven/music-generation",
    "TEXT_TO_SPEECH": "fal-ai/minimax-speech/text-to-speech-02-hd",
    "SOUND_EFFECT": "fal-ai/stable-audio",
    # 3D
    "IMAGE_TO_3D": "fal-ai/tripo3d/v2",
    "RETEXTURE_3D": "fal-ai/meshy/retexture",
}


ImageSize = Literal[
    "square_hd",
    "square",
    "portrait_4_3",
    "portrait_16_9",
    "landscape_4_3",
    "landscape_16_9",
]
OutputFormat = Literal["png", "jpeg"]
VideoDuration = Literal["5", "10"]
AspectRatio = Literal["16:9", "9:16", "1:1"]

SEED_HELP = "Seed for reproducible generation"
IMAGE_SIZE_HELP = "Output image size preset"


# ──────────────────────────────────────────────────────────────
# IMAGE GENERATION
# ──────────────────────────────────────────────────────────────


class GenerateImageArgs(ToolArgs):
    prompt: str = Field(..., min_length=1, description="Text prompt describing the image to generate")
    image_size: Optional[ImageSize] = Field(
        None,
        description=(
            'Image size preset: "square_hd", "square", "portrait_4_3", '
            '"portrait_16_9", "landscape_4_3", "landscape_16_9"'
        ),
    )
    num_images: Optional[WholeNumber] = Field(None, ge=1, le=4, description="Number of images to generate (1-4)")
    seed: Optional[WholeNumber] = Field(None, description=SEED_HELP)
    output_format: Optional[OutputFormat] = Field(None, description='Output format: "png" or "jpeg"')
    save_path: Optional[str] = save_path_field(
        "File path to save the image. If not provided, auto-saves to output directory."
    )


class EditImageArgs(ToolArgs):
    prompt: str = Field(..., min_length=1, description="Edit instructions describing what changes to make")
    image_url: str = Field(..., min_length=1, description="URL of the source image to edit")
    image_size: Optional[ImageSize] = Field(None, description=IMAGE_SIZE_HELP)
    seed: Optional[WholeNumber] = Field(None, description=SEED_HELP)
    save_path: Optional[str] = save_path_field("File path to save the edited image")


class ImageToImageArgs(ToolArgs):
    prompt: str = Field(..., min_length=1, description="Text prompt to guide the transformation")
    image_url: str = Field(..., min_length=1, description="URL of the source image")
    strength: Optional[float] = Field(
        None, ge=0, le=1,
        description="Prompt influence strength (0.0-1.0). Lower preserves more of the original.",
    )
    image_size: Optional[ImageSize] = Field(None, description=IMAGE_SIZE_HELP)
    num_inference_steps: Optional[WholeNumber] = Field(None, ge=1, le=50, description="Number of inference steps (1-50)")
    seed: Optional[WholeNumber] = Field(None, description=SEED_HELP)
    num_images: Optional[WholeNumber] = Field(None, ge=1, le=4, description="Number of images to generate (1-4)")
    output_format: Optional[OutputFormat] = Field(None, description="Output format")
    save_path: Optional[str] = save_path_field("File path to save the result")


class InpaintArgs(ToolArgs):
    prompt: str = Field(..., min_length=1, description="Text prompt describing what to generate in the masked area")
    image_url: str = Field(..., min_length=1, description="URL of the source image")
    mask_url: str = Field(..., min_length=1, description="URL of the mask image (white areas = regions to inpaint)")
    image_size: Optional[ImageSize] = Field(None, description=IMAGE_SIZE_HELP)
    num_inference_steps: Optional[WholeNumber] = Field(None, ge=1, le=50, description="Number of inference steps")
    seed: Optional[WholeNumber] = Field(None, description=SEED_HELP)
    output_format: Optional[OutputFormat] = Field(None, description="Output format")
    save_path: Optional[str] = save_path_field("File path to save the result")


class StyleTransferArgs(ToolArgs):
    image_url: str = Field(..., min_length=1, description="URL of the style reference image")
    image_size: Optional[ImageSize] = Field(None, description=IMAGE_SIZE_HELP)
    num_inference_steps: Optional[WholeNumber] = Field(None, ge=1, le=4, description="Number of inference steps (1-4)")
    seed: Optional[WholeNumber] = Field(None, description=SEED_HELP)
    num_images: Optional[WholeNumber] = Field(None, ge=1, le=4, description="Number of images to generate")
    save_path: Optional[str] = save_path_field("File path to save the result")


# ──────────────────────────────────────────────────────────────
# VIDEO GENERATION
# ──────────────────────────────────────────────────────────────


class TextToVideoArgs(ToolArgs):
    prompt: str = Field(
        ..., min_length=1,
        description="Text prompt describing the video content, scene, motion, and camera movement",
    )
    duration: Optional[VideoDuration] = Field(None, description='Video duration in seconds: "5" or "10"')
    aspect_ratio: Optional[AspectRatio] = Field(None, description='Aspect ratio: "16:9", "9:16", "1:1"')
    negative_prompt: Optional[str] = Field(None, description="What to avoid in the video")
    save_path: Optional[str] = save_path_field("File path to save the video")


class ImageToVideoArgs(ToolArgs):
    prompt: str = Field(..., min_length=1, description="Text prompt describing the desired motion and scene")
    image_url: str = Field(..., min_length=1, description="URL of the input image to animate")
    duration: Optional[VideoDuration] = Field(None, description='Video duration: "5" or "10"')
    aspect_ratio: Optional[AspectRatio] = Field(None, description='Aspect ratio: "16:9", "9:16", "1:1"')
    save_path: Optional[str] = save_path_field("File path to save the video")


class LipsyncArgs(ToolArgs):
    video_url: str = Field(..., min_length=1, description="URL of the video containing the face to lipsync")
    audio_url: str = Field(..., min_length=1, description="URL of the audio to sync lips to")
    save_path: Optional[str] = save_path_field("File path to save the result")


class AvatarVideoArgs(ToolArgs):
    image_url: str = Field(..., min_length=1, description="URL of a portrait/headshot image of the person")
    audio_url: str = Field(..., min_length=1, description="URL of the audio the avatar should speak")
    save_path: Optional[str] = save_path_field("File path to save the video")


# ──────────────────────────────────────────────────────────────
# IMAGE / VIDEO UTILITIES
# ──────────────────────────────────────────────────────────────


class UpscaleImageArgs(ToolArgs):
    image_url: str = Field(..., min_length=1, description="URL of the image to upscale")
    scale: Optional[float] = Field(None, ge=1, le=8, description="Upscale factor (e.g., 2 for 2x, 4 for 4x)")
    save_path: Optional[str] = save_path_field("File path to save the upscaled image")


class UpscaleVideoArgs(ToolArgs):
    video_url: str = Field(..., min_length=1, description="URL of the video to upscale")
    scale: Optional[float] = Field(None, ge=1, le=4, description="Upscale factor")
    save_path: Optional[str] = save_path_field("File path to save the upscaled video")


class RemoveBackgroundArgs(ToolArgs):
    image_url: str = Field(..., min_length=1, description="URL of the image to remove the background from")
    save_path: Optional[str] = save_path_field("File path to save the result (PNG with transparency)")


class RemoveVideoBackgroundArgs(ToolArgs):
    video_url: str = Field(..., min_length=1, description="URL of the video to remove the background from")
    save_path: Optional[str] = save_path_field("File path to save the result")


class FaceSwapImageArgs(ToolArgs):
    base_image_url: str = Field(..., min_length=1, description="URL of the target image (face to be replaced)")
    swap_image_url: str = Field(..., min_length=1, description="URL of the source face image (face to use)")
    save_path: Optional[str] = save_path_field("File path to save the result")


class FaceSwapVideoArgs(ToolArgs):
    base_video_url: str = Field(..., min_length=1, description="URL of the target video (face to be replaced)")
    swap_image_url: str = Field(..., min_length=1, description="URL of the source face image (face to use)")
    save_path: Optional[str] = save_path_field("File path to save the result")


class SegmentImageArgs(ToolArgs):
    image_url: str = Field(..., min_length=1, description="URL of the image to segment")
    prompt: Optional[str] = Field(
        None,
        description='Optional text prompt to guide which objects to segment (e.g., "the red car")',
    )
    save_path: Optional[str] = save_path_field("File path to save the segmentation result")


class EstimateDepthArgs(ToolArgs):
    image_url: str = Field(..., min_length=1, description="URL of the image to estimate depth from")
    save_path: Optional[str] = save_path_field("File path to save the depth map")


# ──────────────────────────────────────────────────────────────
# AUDIO & MUSIC
# ──────────────────────────────────────────────────────────────


class GenerateMusicArgs(ToolArgs):
    prompt: str = Field(
        ..., min_length=1,
        description="Description of the music: genre, mood, tempo, instruments, energy",
    )
    duration: Optional[float] = Field(None, description="Duration in seconds")
    save_path: Optional[str] = save_path_field("File path to save the audio file")


class TextToSpeechArgs(ToolArgs):
    text: str = Field(..., min_length=1, description="The text to convert to speech")
    voice_id: Optional[str] = Field(
        None, description="Voice ID to use (optional, uses default if not specified)"
    )
    speed: Optional[float] = Field(None, ge=0.5, le=2.0, description="Speech speed multiplier (0.5-2.0)")
    save_path: Optional[str] = save_path_field("File path to save the audio file")


class GenerateSoundEffectArgs(ToolArgs):
    prompt: str = Field(
        ..., min_length=1,
        description=(
            'Description of the sound effect (e.g., "thunder crack in a canyon", '
            '"footsteps on gravel")'
        ),
    )
    duration_seconds: Optional[float] = Field(None, description="Duration in seconds")
    save_path: Optional[str] = save_path_field("File path to save the audio file")


# ──────────────────────────────────────────────────────────────
# 3D
# ──────────────────────────────────────────────────────────────


class ImageTo3DArgs(ToolArgs):
    image_url: str = Field(..., min_length=1, description="URL of the image to convert to 3D")
    save_path: Optional[str] = save_path_field("File path to save the 3D model (GLB format)")


class Retexture3DArgs(ToolArgs):
    model_url: str = Field(..., min_length=1, description="URL of the 3D model file (GLB/OBJ) to retexture")
    prompt: str = Field(..., min_length=1, description="Text description of the desired texture style")
    reference_image_url: Optional[str] = Field(
        None, description="Optional reference image URL for texture style"
    )
    save_path: Optional[str] = save_path_field("File path to save the retextured model")


# ──────────────────────────────────────────────────────────────
# OPERATIONS
# ──────────────────────────────────────────────────────────────


_SHORT = LatencyClass.SHORT
_LONG = LatencyClass.LONG

OPERATIONS: Tuple[Operation, ...] = (
    # ── Image generation ──────────────────────────────────────
    Operation(
        name="generate_image",
        description=(
            "Generate images from text prompts using Flux Pro Kontext Max. Returns "
            "high-quality images with excellent prompt adherence and typography support."
        ),
        args_model=GenerateImageArgs,
        model_id=MODELS["TEXT_TO_IMAGE"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="generated",
        extension="png",
        format_field="output_format",
        saved_message="Image generated and saved to: {path}",
        empty_message="No image was generated. Try rephrasing your prompt.",
    ),
    Operation(
        name="edit_image",
        description=(
            "Edit an existing image using text instructions with Flux Pro Kontext Max. "
            "Supports local edits, style changes, object addition/removal, and scene transforms."
        ),
        args_model=EditImageArgs,
        model_id=MODELS["EDIT_IMAGE"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="edited",
        extension="png",
        saved_message="Edited image saved to: {path}",
        empty_message="No edited image was generated. Try rephrasing your prompt.",
    ),
    Operation(
        name="image_to_image",
        description=(
            "Transform an image using a text prompt with Flux General. Applies style, "
            "content, or structural changes guided by the prompt while preserving "
            "aspects of the original."
        ),
        args_model=ImageToImageArgs,
        model_id=MODELS["IMAGE_TO_IMAGE"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="img2img",
        extension="png",
        format_field="output_format",
        saved_message="Transformed image saved to: {path}",
        empty_message="No image was generated. Try rephrasing your prompt.",
    ),
    Operation(
        name="inpaint",
        description=(
            "Fill in masked areas of an image using Flux General Inpainting. Provide an "
            "image, a mask (white = areas to fill), and a prompt describing what to "
            "generate in the masked region."
        ),
        args_model=InpaintArgs,
        model_id=MODELS["INPAINT"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="inpainted",
        extension="png",
        format_field="output_format",
        saved_message="Inpainted image saved to: {path}",
        empty_message="Inpainting failed. Try a different prompt or mask.",
    ),
    Operation(
        name="style_transfer",
        description=(
            "Apply the style of a reference image to generate a new image using Flux "
            "Schnell Redux. Fast style transformation with high-quality output."
        ),
        args_model=StyleTransferArgs,
        model_id=MODELS["STYLE_TRANSFER"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="style-transfer",
        extension="png",
        saved_message="Style transfer result saved to: {path}",
        empty_message="Style transfer failed. Try a different reference image.",
    ),
    # ── Video generation ──────────────────────────────────────
    Operation(
        name="text_to_video",
        description=(
            "Generate video from a text prompt using Kling v3 Pro. Top-tier cinematic "
            "quality with fluid motion, precise prompt adherence, and optional audio."
        ),
        args_model=TextToVideoArgs,
        model_id=MODELS["TEXT_TO_VIDEO"],
        latency=_LONG,
        kind=MediaKind.VIDEO,
        prefix="text2video",
        extension="mp4",
        saved_message="Video generated and saved to: {path}",
        empty_message="No video was generated. Try rephrasing your prompt.",
    ),
    Operation(
        name="image_to_video",
        description=(
            "Animate a still image into video using Kling v3 Pro. Generates cinematic "
            "video with natural motion from an input image and text prompt."
        ),
        args_model=ImageToVideoArgs,
        model_id=MODELS["IMAGE_TO_VIDEO"],
        latency=_LONG,
        kind=MediaKind.VIDEO,
        prefix="img2video",
        extension="mp4",
        saved_message="Video generated and saved to: {path}",
        empty_message="No video was generated. Try a different image or prompt.",
    ),
    Operation(
        name="lipsync",
        description=(
            "Synchronize lips in a video to match an audio track using Sync LipSync v2. "
            "The video character will appear to speak the audio naturally."
        ),
        args_model=LipsyncArgs,
        model_id=MODELS["LIPSYNC"],
        latency=_LONG,
        kind=MediaKind.VIDEO,
        prefix="lipsync",
        extension="mp4",
        saved_message="Lipsync video saved to: {path}",
        empty_message=(
            "Lipsync failed. Check that the video contains a visible face and the "
            "audio is clear."
        ),
    ),
    Operation(
        name="avatar_video",
        description=(
            "Generate a realistic talking avatar video from a portrait image and audio "
            "using ByteDance OmniHuman v1.5. Creates natural head movement, gestures, "
            "and lip sync."
        ),
        args_model=AvatarVideoArgs,
        model_id=MODELS["AVATAR_VIDEO"],
        latency=_LONG,
        kind=MediaKind.VIDEO,
        prefix="avatar",
        extension="mp4",
        saved_message="Avatar video saved to: {path}",
        empty_message=(
            "Avatar video generation failed. Ensure the image is a clear portrait/headshot."
        ),
    ),
    # ── Image / video utilities ───────────────────────────────
    Operation(
        name="upscale_image",
        description=(
            "Upscale and enhance image resolution using Topaz AI. Increases quality and "
            "detail while preserving sharpness."
        ),
        args_model=UpscaleImageArgs,
        model_id=MODELS["UPSCALE_IMAGE"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="upscaled",
        extension="png",
        saved_message="Upscaled image saved to: {path}",
        empty_message="Upscaling failed.",
    ),
    Operation(
        name="upscale_video",
        description=(
            "Upscale and enhance video resolution using Topaz AI. Professional-grade "
            "video upscaling up to 8K with temporal consistency."
        ),
        args_model=UpscaleVideoArgs,
        model_id=MODELS["UPSCALE_VIDEO"],
        latency=_LONG,
        kind=MediaKind.VIDEO,
        prefix="upscaled",
        extension="mp4",
        saved_message="Upscaled video saved to: {path}",
        empty_message="Video upscaling failed.",
    ),
    Operation(
        name="remove_background",
        description=(
            "Remove background from an image using Bria RMBG 2.0. Production-grade, "
            "commercially licensed background removal with clean edges."
        ),
        args_model=RemoveBackgroundArgs,
        model_id=MODELS["REMOVE_BACKGROUND"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="no-bg",
        extension="png",
        saved_message="Background removed. Saved to: {path}",
        empty_message="Background removal failed.",
    ),
    Operation(
        name="remove_video_background",
        description=(
            "Remove background from a video using Bria Video Background Removal. "
            "Smooth, consistent background removal across all frames."
        ),
        args_model=RemoveVideoBackgroundArgs,
        model_id=MODELS["REMOVE_VIDEO_BACKGROUND"],
        latency=_LONG,
        kind=MediaKind.VIDEO,
        prefix="no-bg-video",
        extension="mp4",
        saved_message="Video background removed. Saved to: {path}",
        empty_message="Video background removal failed.",
    ),
    Operation(
        name="face_swap_image",
        description=(
            "Swap a face in an image with another face. Realistically blends the swap "
            "face onto the base image while maintaining natural appearance."
        ),
        args_model=FaceSwapImageArgs,
        model_id=MODELS["FACE_SWAP_IMAGE"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="face-swap",
        extension="png",
        saved_message="Face swap result saved to: {path}",
        empty_message="Face swap failed. Ensure both images contain clear, visible faces.",
    ),
    Operation(
        name="face_swap_video",
        description=(
            "Swap a face throughout a video clip. Replaces the target face in every "
            "frame while maintaining natural movement and expressions."
        ),
        args_model=FaceSwapVideoArgs,
        model_id=MODELS["FACE_SWAP_VIDEO"],
        latency=_LONG,
        kind=MediaKind.VIDEO,
        prefix="face-swap-video",
        extension="mp4",
        saved_message="Face swap video saved to: {path}",
        empty_message=(
            "Video face swap failed. Ensure the video has a clear face and the swap "
            "image is a good headshot."
        ),
    ),
    Operation(
        name="segment_image",
        description=(
            "Detect and segment objects in an image using SAM 3. Returns segmentation "
            "masks for objects, optionally guided by a text prompt."
        ),
        args_model=SegmentImageArgs,
        model_id=MODELS["SEGMENT_IMAGE"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="segmentation",
        extension="png",
        saved_message="Mask saved to: {path}",
        empty_message="Segmentation complete.",
        inspection=True,
        auto_save=False,
    ),
    Operation(
        name="estimate_depth",
        description=(
            "Generate a depth map from an image using Marigold Depth Estimation. Outputs "
            "a grayscale depth map useful for 3D scene understanding and visualization."
        ),
        args_model=EstimateDepthArgs,
        model_id=MODELS["ESTIMATE_DEPTH"],
        latency=_SHORT,
        kind=MediaKind.IMAGE,
        prefix="depth",
        extension="png",
        saved_message="Depth map saved to: {path}",
        empty_message="Depth estimation complete.",
        inspection=True,
    ),
    # ── Audio & music ─────────────────────────────────────────
    Operation(
        name="generate_music",
        description=(
            "Generate royalty-free instrumental music using Beatoven. Creates music from "
            "text descriptions of genre, mood, tempo, and instruments."
        ),
        args_model=GenerateMusicArgs,
        model_id=MODELS["GENERATE_MUSIC"],
        latency=_LONG,
        kind=MediaKind.AUDIO,
        prefix="music",
        extension="mp3",
        saved_message="Music generated and saved to: {path}",
        empty_message="No music was generated. Try rephrasing your prompt.",
    ),
    Operation(
        name="text_to_speech",
        description=(
            "Convert text to natural-sounding speech using MiniMax Speech-02 HD. "
            "High-quality voice synthesis with optional voice selection and speed control."
        ),
        args_model=TextToSpeechArgs,
        model_id=MODELS["TEXT_TO_SPEECH"],
        latency=_SHORT,
        kind=MediaKind.AUDIO,
        prefix="speech",
        extension="mp3",
        saved_message="Speech audio saved to: {path}",
        empty_message="No speech audio was generated. Try a different voice or shorter text.",
    ),
    Operation(
        name="generate_sound_effect",
        description=(
            "Generate sound effects from text descriptions using Stable Audio. Create "
            "professional-grade SFX for any scenario."
        ),
        args_model=GenerateSoundEffectArgs,
        model_id=MODELS["SOUND_EFFECT"],
        latency=_SHORT,
        kind=MediaKind.AUDIO,
        prefix="sfx",
        extension="mp3",
        saved_message="Sound effect saved to: {path}",
        empty_message="No sound effect was generated. Try rephrasing your prompt.",
    ),
    # ── 3D ────────────────────────────────────────────────────
    Operation(
        name="image_to_3d",
        description=(
            "Convert a 2D image into a 3D model using Tripo3D. Generates a full 3D mesh "
            "with textures from a single image."
        ),
        args_model=ImageTo3DArgs,
        model_id=MODELS["IMAGE_TO_3D"],
        latency=_LONG,
        kind=MediaKind.MODEL_3D,
        prefix="model",
        extension="glb",
        saved_message="3D model saved to: {path}",
        empty_message="No 3D model was generated. Try an image with a single clear subject.",
    ),
    Operation(
        name="retexture_3d",
        description=(
            "Apply new textures to an existing 3D model using Meshy-5 Retexture. "
            "Generates high-quality PBR textures from text prompts or reference images."
        ),
        args_model=Retexture3DArgs,
        model_id=MODELS["RETEXTURE_3D"],
        latency=_LONG,
        kind=MediaKind.MODEL_3D,
        prefix="retextured",
        extension="glb",
        saved_message="Retextured 3D model saved to: {path}",
        empty_message="Retexturing failed. Try a different prompt or reference image.",
    ),
)

_BY_NAME: Dict[str, Operation] = {op.name: op for op in OPERATIONS}


def list_operations() -> Tuple[Operation, ...]:
    """All operations, in advertised order."""
    return OPERATIONS


def get_operation(name: str) -> Optional[Operation]:
    return _BY_NAME.get(name)
