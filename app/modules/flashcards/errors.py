"""Failure taxonomy for the flashcard pipeline.

Classification and prompt building are total; only invocation and parsing
raise, and both surface to the caller as ``GenerationFailed``.
"""

from __future__ import annotations

from typing import Optional


class FlashcardGenerationError(Exception):
    pass


class MalformedResponse(FlashcardGenerationError):
    """Backend output has no usable array shape or lacks required fields."""

    def __init__(self, message: str, *, raw: Optional[str] = None) -> None:
        super().__init__(message)
        self.raw = raw


class RemoteInvocationFailed(FlashcardGenerationError):
    """All attempts against the backend failed; keeps the last cause."""

    def __init__(self, attempts: int, last_error: BaseException) -> None:
        super().__init__(
            f"Remote generation failed after {attempts} attempt(s): {last_error}"
        )
        self.attempts = attempts
        self.last_error = last_error


class GenerationFailed(FlashcardGenerationError):
    """Caller-facing failure of a whole generation call."""

    def __init__(self, cause: FlashcardGenerationError) -> None:
        super().__init__("Failed to generate flashcards")
        self.cause = cause
