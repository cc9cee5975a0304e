"""
Content Generation Feature
"""

from content_creator.features.content_generation.prompts import PromptPair, build_prompts
from content_creator.features.content_generation.handler import GenerationHandler

__all__ = [
    "PromptPair",
    "build_prompts",
    "GenerationHandler",
]
