# inator_studio/llm/generation.py
"""
Generation service - turns a title/description pair into an -inator name.

NOTE: No retries and no fallback provider. If the call fails, the request fails.
"""
from inator_studio.core.config import LLMSettings
from inator_studio.core.exceptions import ServiceUnavailable
from inator_studio.core.logging import log
from inator_studio.llm.providers import gemini


DEFAULT_RESULT = "The Generic-inator"
NAME_SUFFIX = "-inator"


def build_prompt(title: str, description: str) -> str:
    return (
        f"Create a funny {NAME_SUFFIX} name for: {title}. "
        f"Description: {description}. "
        f"Must end with {NAME_SUFFIX}. "
        "Keep it creative and Doofenshmirtz-style."
    )


class GenerationService:
    """
    Wraps the configured provider.

    Callers are expected to have validated that title and description are
    non-blank.
    """

    def __init__(self, llm_settings: LLMSettings):
        self.settings = llm_settings

    @property
    def available(self) -> bool:
        return self.settings.configured

    async def generate(self, title: str, description: str) -> str:
        """
        Returns:
            The generated name, or DEFAULT_RESULT if the provider returned no text

        Raises:
            ServiceUnavailable: no API key configured
            GenerationFailed: the provider call errored
        """
        if not self.available:
            raise ServiceUnavailable(self.settings.provider)

        log("GENERATE", f"Generating name for: {title}")
        text = await gemini.call(
            build_prompt(title, description),
            api_key=self.settings.gemini_api_key,
            model=self.settings.default_model,
            api_base=self.settings.api_base,
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
            timeout=self.settings.timeout_seconds,
        )

        result = text.strip()
        return result or DEFAULT_RESULT
