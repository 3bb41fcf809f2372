"""Prompt assembly and quality scoring."""

from .builder import PromptBuilder, build_prompt
from .models import PromptElements, QualityScore, SavedPrompt
from .quality import analyze_prompt_quality, quality_label

__all__ = [
    "PromptBuilder",
    "PromptElements",
    "QualityScore",
    "SavedPrompt",
    "analyze_prompt_quality",
    "build_prompt",
    "quality_label",
]
