"""Prompt templates, one per input classification.

Inputs are truncated to ``MAX_INPUT_CHARS`` before a template is filled;
oversized text is never rejected.
"""

from __future__ import annotations

from typing import Optional

from app.modules.flashcards.models.flashcards import Classification

MAX_INPUT_CHARS = 15000
DEFAULT_LANGUAGE = "English"


QUESTION_PROMPT = (
    "You are a helpful AI tutor. The user has asked the following question:\n"
    '"{text}"\n\n'
    "Answer in {language}, concisely but completely.\n"
    "Only return plain text, no JSON, no extra formatting."
)

SHORT_TOPIC_PROMPT = (
    "You are an expert AI tutor. Generate **unlimited** question-answer pairs "
    "about the following topic.\n"
    "Answer in {language}.\n"
    "Format strictly as a JSON array:\n"
    "[\n"
    "  {{\n"
    '    "question": "Question about the topic",\n'
    '    "answer": "Comprehensive answer in {language}"\n'
    "  }}\n"
    "]\n"
    "Topic: {text}"
)

LONG_PASSAGE_PROMPT = (
    "Based on the following text, create 15-20 flashcards with clear questions "
    "and comprehensive answers.\n"
    "Answer in {language}.\n"
    "Format strictly as a JSON array:\n"
    "[\n"
    "  {{\n"
    '    "question": "Clear, specific question about the content",\n'
    '    "answer": "Comprehensive answer that fully explains the concept"\n'
    "  }}\n"
    "]\n"
    "Text to analyze:\n"
    "{text}"
)

_TEMPLATES = {
    Classification.QUESTION: QUESTION_PROMPT,
    Classification.SHORT_TOPIC: SHORT_TOPIC_PROMPT,
    Classification.LONG_PASSAGE: LONG_PASSAGE_PROMPT,
}


def truncate_input(text: str, limit: int = MAX_INPUT_CHARS) -> str:
    return text[:limit] if len(text) > limit else text


def resolve_language(language: Optional[str]) -> str:
    lang = (language or "").strip()
    return lang or DEFAULT_LANGUAGE


def build_prompt(
    classification: Classification,
    text: str,
    language: Optional[str] = DEFAULT_LANGUAGE,
) -> str:
    """Fill the template for ``classification``.

    Questions are embedded as typed; topics and passages are trimmed.
    """
    text = truncate_input(text)
    if classification is not Classification.QUESTION:
        text = text.strip()
    return _TEMPLATES[classification].format(
        text=text, language=resolve_language(language)
    )
