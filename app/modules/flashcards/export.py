"""Serialize a flashcard batch to JSON, CSV or PDF bytes."""

from __future__ import annotations

import io
import json
from typing import Iterable
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer

from app.modules.flashcards.models.flashcards import Flashcard

PDF_TITLE = "FlashAI - Generated Flashcards"

EXPORT_FORMATS = {
    "json": ("application/json", "flashcards.json"),
    "csv": ("text/csv", "flashcards.csv"),
    "pdf": ("application/pdf", "flashcards.pdf"),
}


def to_json(cards: Iterable[Flashcard]) -> str:
    return json.dumps([c.model_dump() for c in cards], indent=2, ensure_ascii=False)


def _csv_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def to_csv(cards: Iterable[Flashcard]) -> str:
    """Header plus one row per card; every field quoted, quotes doubled."""
    rows = [("Question", "Answer")]
    rows.extend((c.question, c.answer) for c in cards)
    return "\n".join(",".join(_csv_field(f) for f in row) for row in rows)


def to_pdf(cards: Iterable[Flashcard]) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, title=PDF_TITLE)
    styles = getSampleStyleSheet()
    story = [Paragraph(PDF_TITLE, styles["Title"]), Spacer(1, 20)]

    for i, card in enumerate(cards, 1):
        # Keep each card's block on a single page
        story.append(
            KeepTogether(
                [
                    Paragraph(f"Card {i}", styles["Heading2"]),
                    Paragraph(f"<b>Q:</b> {escape(card.question)}", styles["Normal"]),
                    Spacer(1, 6),
                    Paragraph(f"<b>A:</b> {escape(card.answer)}", styles["Normal"]),
                    Spacer(1, 15),
                ]
            )
        )

    doc.build(story)
    return buffer.getvalue()


def export_cards(cards: Iterable[Flashcard], fmt: str) -> bytes:
    """Render ``cards`` in ``fmt`` (json, csv or pdf) as bytes."""
    fmt = fmt.lower()
    if fmt == "json":
        return to_json(cards).encode("utf-8")
    if fmt == "csv":
        return to_csv(cards).encode("utf-8")
    if fmt == "pdf":
        return to_pdf(cards)
    raise ValueError(f"Unsupported export format: {fmt}")
