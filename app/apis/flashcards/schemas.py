from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.modules.flashcards.models.flashcards import Flashcard


class GenerateRequest(BaseModel):
    text: str = Field(..., description="Question, topic or passage to study")
    topic: Optional[str] = Field(
        default=None, description="Explicit topic; skips input classification"
    )
    language: Optional[str] = Field(
        default=None, description="Answer language, defaults to English"
    )


class GenerateResponse(BaseModel):
    count: int
    fallback: bool = False
    flashcards: list[Flashcard] = Field(default_factory=list)


class ExportRequest(BaseModel):
    flashcards: list[Flashcard] = Field(default_factory=list)


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    PDF = "pdf"
