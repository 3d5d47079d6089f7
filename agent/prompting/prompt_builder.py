"""
Prompt Builder Layer
====================

Prompt-writing guides for the generation tools, served as MCP prompts.

Each guide tells the host model how to write a strong prompt for one kind of
media before it calls the matching tool. build_prompt() appends the user's
request (if any) so the host gets a ready-to-use instruction.

Invariants:
- Guides are static text; nothing here calls fal.ai
- Unknown guide names raise KeyError (the server checks names first and
  answers unknown ones with a ValueError, which becomes an MCP error)
- The request is capped at _MAX_REQUEST_CHARS before injection
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# ── Limits ────────────────────────────────────────────────────────────────────
_MAX_REQUEST_CHARS: int = 2000


@dataclass(frozen=True)
class PromptGuide:
    name: str
    description: str
    text: str
    tools: Tuple[str, ...]


IMAGE_GENERATION_PROMPT = """You are generating images via fal.ai. Create detailed, descriptive prompts that specify:
- Art style (photorealistic, illustration, pixel art, watercolor, 3D render, etc.)
- Composition, lighting, and camera angle
- Key subjects and their attributes
- Mood and atmosphere
Enhance vague prompts with sensible creative defaults while staying true to the user's intent."""

VIDEO_GENERATION_PROMPT = """You are generating videos via fal.ai. Create prompts that describe:
- The scene and setting in detail
- Motion and action (what moves, how, and where)
- Camera movement (pan, zoom, tracking, static)
- Mood, lighting, and pacing
Keep prompts cinematic and descriptive for best results."""

AUDIO_GENERATION_PROMPT = """You are generating audio via fal.ai. Describe:
- Genre, mood, and tempo for music
- Instruments and arrangement style
- Duration and energy arc
Be specific about the desired feel and style."""

SOUND_EFFECT_PROMPT = """You are generating sound effects via fal.ai. Describe:
- The specific sound (e.g., "thunder crack", "footsteps on gravel")
- Environment and acoustics (indoor, outdoor, reverb)
- Duration and intensity
Be precise and descriptive."""


PROMPT_GUIDES: Dict[str, PromptGuide] = {
    guide.name: guide
    for guide in (
        PromptGuide(
            name="image_generation",
            description="How to write prompts for the image generation and editing tools",
            text=IMAGE_GENERATION_PROMPT,
            tools=("generate_image", "edit_image", "image_to_image", "inpaint"),
        ),
        PromptGuide(
            name="video_generation",
            description="How to write prompts for the video generation tools",
            text=VIDEO_GENERATION_PROMPT,
            tools=("text_to_video", "image_to_video"),
        ),
        PromptGuide(
            name="audio_generation",
            description="How to write prompts for music generation",
            text=AUDIO_GENERATION_PROMPT,
            tools=("generate_music",),
        ),
        PromptGuide(
            name="sound_effect",
            description="How to write prompts for sound effect generation",
            text=SOUND_EFFECT_PROMPT,
            tools=("generate_sound_effect",),
        ),
    )
}


def build_prompt(name: str, request: Optional[str] = None) -> str:
    """
    Assemble a guide plus the user's request.

    Args:
        name:    Guide name (see PROMPT_GUIDES).
        request: Optional free-text request from the user.

    Returns:
        The guide text, followed by a "Tools:" line and the request.

    Raises:
        KeyError: unknown guide name.
    """
    guide = PROMPT_GUIDES[name]
    parts = [guide.text, f"\nTools: {', '.join(guide.tools)}"]

    request = (request or "").strip()
    if request:
        parts.append(f"\nRequest: {request[:_MAX_REQUEST_CHARS]}")

    return "\n".join(parts)
