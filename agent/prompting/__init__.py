"""
Prompt Builder layer.

Exports the media prompt-writing guides and build_prompt() assembler.
"""

from .prompt_builder import PROMPT_GUIDES, PromptGuide, build_prompt

__all__ = ["PROMPT_GUIDES", "PromptGuide", "build_prompt"]
