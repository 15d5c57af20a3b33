"""Input shape detection: question, short topic or long passage."""

from __future__ import annotations

import re

from app.modules.flashcards.models.flashcards import Classification

SHORT_TOPIC_MAX_WORDS = 20

_INTERROGATIVE_RE = re.compile(r"^(what|who|when|where|why|how|which)\b", re.IGNORECASE)


def is_question(text: str) -> bool:
    trimmed = text.strip()
    return trimmed.endswith("?") or bool(_INTERROGATIVE_RE.match(trimmed))


def count_words(text: str) -> int:
    return len(text.split())


def classify(text: str) -> Classification:
    """Return the classification for ``text``; first matching rule wins.

    Empty input has zero words and is therefore a short topic.
    """
    if is_question(text):
        return Classification.QUESTION
    if count_words(text) <= SHORT_TOPIC_MAX_WORDS:
        return Classification.SHORT_TOPIC
    return Classification.LONG_PASSAGE
