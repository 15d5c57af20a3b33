"""Turn raw backend text into flashcards.

Models are asked for a bare JSON array but often wrap it in prose or code
fences, so the first greedy ``[ ... ]`` span is extracted before decoding.
Nested or multiple arrays in the surrounding prose are not disambiguated:
whatever the greedy match covers is what gets decoded.
"""

from __future__ import annotations

import json
import re
import time
from typing import Any

from app.core.logging import get_logger
from app.modules.flashcards.errors import MalformedResponse
from app.modules.flashcards.models.flashcards import Classification, Flashcard

logger = get_logger(__name__)

_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)

_ID_PREFIXES = {
    Classification.QUESTION: "qa",
    Classification.SHORT_TOPIC: "topic",
    Classification.LONG_PASSAGE: "card",
}


def _batch_stamp() -> int:
    return int(time.time() * 1000)


def make_id(classification: Classification, stamp: int, index: int) -> str:
    return f"{_ID_PREFIXES[classification]}-{stamp}-{index}"


def extract_json_array(raw_text: str) -> str:
    match = _ARRAY_RE.search(raw_text or "")
    if not match:
        raise MalformedResponse(
            "No valid JSON array found in model response", raw=raw_text
        )
    return match.group(0)


def _field(item: dict[str, Any], key: str, index: int, raw: str) -> str:
    value = item.get(key)
    if isinstance(value, (dict, list)) or value is None:
        raise MalformedResponse(f"Card {index} has no usable '{key}'", raw=raw)
    text = str(value).strip()
    if not text:
        raise MalformedResponse(f"Card {index} has an empty '{key}'", raw=raw)
    return text


def parse_cards(classification: Classification, raw_text: str) -> list[Flashcard]:
    """Decode the embedded array; any shape problem fails the whole batch."""
    payload = extract_json_array(raw_text)
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and runaway nesting
        raise MalformedResponse(f"Invalid JSON array: {e}", raw=raw_text) from e

    if not isinstance(data, list):
        raise MalformedResponse("Response is not a list", raw=raw_text)

    stamp = _batch_stamp()
    cards: list[Flashcard] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise MalformedResponse(f"Card {index} is not an object", raw=raw_text)
        cards.append(
            Flashcard(
                id=make_id(classification, stamp, index),
                question=_field(item, "question", index, raw_text),
                answer=_field(item, "answer", index, raw_text),
            )
        )
    logger.info("Parsed %d flashcards", len(cards))
    return cards


def parse_answer(question: str, raw_text: str) -> list[Flashcard]:
    answer = (raw_text or "").strip()
    if not answer:
        raise MalformedResponse("Model returned an empty answer", raw=raw_text)
    return [
        Flashcard(
            id=make_id(Classification.QUESTION, _batch_stamp(), 0),
            question=question,
            answer=answer,
        )
    ]


def parse(
    classification: Classification, raw_text: str, source_text: str
) -> list[Flashcard]:
    """Map a backend response to flashcards in response order."""
    if classification is Classification.QUESTION:
        return parse_answer(source_text, raw_text)
    return parse_cards(classification, raw_text)
