"""Pydantic models for flashcard generation.

Cards are frozen once built: the parser and the fallback generator are the
only producers, and callers (API, CLI, exporters) only read them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Classification(str, Enum):
    """Shape of the user input; selects the prompt template."""

    QUESTION = "question"
    SHORT_TOPIC = "short_topic"
    LONG_PASSAGE = "long_passage"


class Flashcard(BaseModel):
    """Simple question/answer flashcard."""

    model_config = ConfigDict(frozen=True)

    id: str
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
