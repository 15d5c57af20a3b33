from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from app.core.config import settings
from app.core.logging import get_logger
from app.apis.deps import get_flashcards_generator
from app.modules.flashcards.errors import GenerationFailed
from app.modules.flashcards.export import EXPORT_FORMATS, export_cards
from app.modules.flashcards.main import FlashcardsGenerator
from .schemas import ExportFormat, ExportRequest, GenerateRequest, GenerateResponse


router = APIRouter()

logger = get_logger(__name__)


@router.post(
    f"/{settings.app.version}/flashcards/generate",
    response_model=GenerateResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["flashcards"],
)
async def generate_flashcards(
    req: GenerateRequest,
    generator: FlashcardsGenerator = Depends(get_flashcards_generator),
) -> GenerateResponse:
    if not req.text.strip() and not (req.topic and req.topic.strip()):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Please paste some text to generate flashcards from.",
        )
    try:
        cards = await generator.generate(req.text, topic=req.topic, language=req.language)
    except GenerationFailed as e:
        logger.error("Flashcard generation failed: %s", e.cause)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate flashcards. Please check your API key and try again.",
        ) from e
    return GenerateResponse(
        count=len(cards), fallback=not generator.has_backend, flashcards=cards
    )


@router.post(
    f"/{settings.app.version}/flashcards/export/{{fmt}}",
    tags=["flashcards"],
)
async def export_flashcards(fmt: ExportFormat, req: ExportRequest) -> Response:
    media_type, filename = EXPORT_FORMATS[fmt.value]
    body = export_cards(req.flashcards, fmt.value)
    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
