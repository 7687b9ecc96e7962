# inator_studio/llm/__init__.py
"""
LLM module - prompt building and the generation service.
"""
from .generation import GenerationService, build_prompt, DEFAULT_RESULT

__all__ = ["GenerationService", "build_prompt", "DEFAULT_RESULT"]
