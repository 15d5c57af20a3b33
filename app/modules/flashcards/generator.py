"""Content generation backends for the flashcards pipeline.

The pipeline only needs "prompt in, text out", expressed as the
``ContentGenerator`` protocol so tests can swap in scripted fakes. The Gemini
implementation uses pydantic-ai with the Google provider. Provider imports
are kept lazy to avoid import-time errors when credentials are missing.
"""

from __future__ import annotations

from typing import Optional, Protocol

from pydantic_ai import Agent

from app.core.logging import get_logger

FLASHCARDS_MODEL_NAME = "gemini-2.5-pro"

logger = get_logger(__name__)


class ContentGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


def _build_google_model(
    model_name: str, api_key: str, *, thinking_budget: int | None = None
):
    """Build the Google Gemini model provider (lazy import).

    thinking_budget is only applied when provided.
    """
    from pydantic_ai.models.google import GoogleModel, GoogleModelSettings
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=api_key)
    settings_obj = None
    if thinking_budget is not None:
        settings_obj = GoogleModelSettings(
            google_thinking_config={"thinking_budget": thinking_budget}
        )
    return GoogleModel(model_name, provider=provider, settings=settings_obj)


class GeminiContentGenerator:
    """Plain-text Gemini backend; one agent run per prompt."""

    def __init__(
        self,
        api_key: str,
        *,
        model_name: str = FLASHCARDS_MODEL_NAME,
        thinking_budget: Optional[int] = None,
    ) -> None:
        if not api_key:
            raise ValueError("Gemini API key is required")
        self.api_key = api_key
        self.model_name = model_name
        self.thinking_budget = thinking_budget
        self._agent: Optional[Agent[None, str]] = None

    def _get_agent(self) -> Agent[None, str]:
        if self._agent is None:
            model = _build_google_model(
                self.model_name, self.api_key, thinking_budget=self.thinking_budget
            )
            # Transport retries are handled by the pipeline's invoker
            self._agent = Agent[None, str](model=model, output_type=str, retries=0)
        return self._agent

    async def generate(self, prompt: str) -> str:
        logger.debug("Calling %s with %d prompt chars", self.model_name, len(prompt))
        res = await self._get_agent().run(prompt)
        return res.output
