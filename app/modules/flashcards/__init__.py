"""Flashcards module exports."""

from .models.flashcards import Classification, Flashcard
from .classifier import classify
from .errors import (
    FlashcardGenerationError,
    GenerationFailed,
    MalformedResponse,
    RemoteInvocationFailed,
)
from .fallback import fallback
from .generator import ContentGenerator, GeminiContentGenerator
from .main import FlashcardsGenerator
from .parser import parse
from .prompts import build_prompt
from .retry import invoke

__all__ = [
    "Classification",
    "Flashcard",
    "classify",
    "build_prompt",
    "invoke",
    "parse",
    "fallback",
    "ContentGenerator",
    "GeminiContentGenerator",
    "FlashcardsGenerator",
    "FlashcardGenerationError",
    "GenerationFailed",
    "MalformedResponse",
    "RemoteInvocationFailed",
]
