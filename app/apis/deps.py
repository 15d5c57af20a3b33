from __future__ import annotations

from functools import lru_cache

from app.core.config import settings
from app.modules.flashcards.main import FlashcardsGenerator


@lru_cache(maxsize=1)
def get_flashcards_generator() -> FlashcardsGenerator:
    """Build the generator once from settings.

    Routes depend on this so tests can override it with
    ``app.dependency_overrides``.
    """
    return FlashcardsGenerator.from_settings(settings)
