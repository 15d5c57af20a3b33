"""Flashcards service class and simple module entrypoint.

Provides a high-level class for generating flashcards that can be used in API
handlers or the CLI. Configuration is passed in explicitly; only
``from_settings`` reads the application settings.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from app.core.logging import get_logger
from app.modules.flashcards.classifier import classify
from app.modules.flashcards.errors import FlashcardGenerationError, GenerationFailed
from app.modules.flashcards.fallback import fallback
from app.modules.flashcards.generator import (
    FLASHCARDS_MODEL_NAME,
    ContentGenerator,
    GeminiContentGenerator,
)
from app.modules.flashcards.models.flashcards import Classification, Flashcard
from app.modules.flashcards.parser import parse
from app.modules.flashcards.prompts import (
    DEFAULT_LANGUAGE,
    build_prompt,
    resolve_language,
    truncate_input,
)
from app.modules.flashcards.retry import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    SleepFn,
    invoke,
)

logger = get_logger(__name__)


class FlashcardsGenerator:
    """classify -> prompt -> invoke with retry -> parse, or offline fallback."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        content_generator: Optional[ContentGenerator] = None,
        model_name: str = FLASHCARDS_MODEL_NAME,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY,
        default_language: str = DEFAULT_LANGUAGE,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        api_key = (api_key or "").strip()
        if content_generator is None and api_key:
            content_generator = GeminiContentGenerator(api_key, model_name=model_name)
        self.content_generator = content_generator
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.default_language = default_language
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings) -> "FlashcardsGenerator":
        gen = settings.generation
        return cls(
            api_key=settings.gemini_api_key,
            model_name=gen.model_name,
            max_attempts=gen.max_attempts,
            base_delay=gen.base_delay,
            default_language=gen.default_language,
        )

    @property
    def has_backend(self) -> bool:
        return self.content_generator is not None

    async def generate(
        self,
        text: str,
        topic: Optional[str] = None,
        language: Optional[str] = None,
    ) -> list[Flashcard]:
        """Generate flashcards for ``text``.

        An explicit ``topic`` skips classification and is treated as a short
        topic. Raises ``GenerationFailed`` when the backend keeps failing or
        answers with an unusable shape.
        """
        if self.content_generator is None:
            logger.warning("No API key found, using mock data")
            return fallback(text)

        lang = resolve_language(language or self.default_language)
        if topic and topic.strip():
            classification = Classification.SHORT_TOPIC
            subject = truncate_input(topic)
        else:
            subject = truncate_input(text)
            classification = classify(subject)

        prompt = build_prompt(classification, subject, lang)
        logger.info(
            "Generating flashcards (%s, %s, %d prompt chars)",
            classification.value,
            lang,
            len(prompt),
            extra={"classification": classification.value},
        )

        try:
            raw = await invoke(
                lambda: self.content_generator.generate(prompt),
                self.max_attempts,
                base_delay=self.base_delay,
                sleep=self._sleep,
            )
            cards = parse(classification, raw, subject)
        except FlashcardGenerationError as e:
            logger.error(
                "Error generating flashcards: %s",
                e,
                extra={"classification": classification.value},
            )
            raise GenerationFailed(e) from e

        logger.info(
            "Generated %d flashcards",
            len(cards),
            extra={"classification": classification.value},
        )
        return cards

    def generate_sync(
        self,
        text: str,
        topic: Optional[str] = None,
        language: Optional[str] = None,
    ) -> list[Flashcard]:
        """Synchronous wrapper if an event loop is unavailable."""
        return asyncio.run(self.generate(text, topic=topic, language=language))

    @staticmethod
    def to_jsonable(cards: list[Flashcard]) -> list[dict]:
        return [c.model_dump() for c in cards]
