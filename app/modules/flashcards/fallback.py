"""Deterministic offline cards used when no backend credential is configured."""

from __future__ import annotations

from app.modules.flashcards.models.flashcards import Flashcard

MEDIUM_INPUT_CHARS = 500
LONG_INPUT_CHARS = 1000

_BASE_CARDS = (
    Flashcard(
        id="mock-1",
        question="What is the main topic of the provided text?",
        answer=(
            "Based on the content you provided, this flashcard demonstrates the "
            "AI's ability to analyze and create questions from your text."
        ),
    ),
    Flashcard(
        id="mock-2",
        question="How does AI flashcard generation work?",
        answer=(
            "AI analyzes the input text to identify key concepts, facts, and "
            "important information, then formulates clear questions with "
            "comprehensive answers to aid in learning and retention."
        ),
    ),
    Flashcard(
        id="mock-3",
        question="What are the benefits of using AI-generated flashcards?",
        answer=(
            "AI-generated flashcards save time, ensure consistent quality, "
            "identify key concepts automatically, and can process large amounts "
            "of text quickly to create comprehensive study materials."
        ),
    ),
)

_MEDIUM_CARD = Flashcard(
    id="mock-4",
    question="What makes effective flashcard questions?",
    answer=(
        "Effective flashcard questions are clear, specific, focused on one "
        "concept, and promote active recall rather than passive recognition."
    ),
)

_LONG_CARD = Flashcard(
    id="mock-5",
    question="How can flashcards improve learning outcomes?",
    answer=(
        "Flashcards improve learning through spaced repetition, active recall, "
        "and by breaking complex information into digestible chunks that "
        "enhance memory retention."
    ),
)


def fallback(text: str) -> list[Flashcard]:
    """Return 3 cards, plus one past 500 characters and one past 1000."""
    cards = list(_BASE_CARDS)
    if len(text) > MEDIUM_INPUT_CHARS:
        cards.append(_MEDIUM_CARD)
    if len(text) > LONG_INPUT_CHARS:
        cards.append(_LONG_CARD)
    return cards
