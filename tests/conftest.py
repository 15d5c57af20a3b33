from __future__ import annotations

import pytest

from app.modules.flashcards.models.flashcards import Flashcard


class ScriptedGenerator:
    """ContentGenerator fake: replays responses, raising any exception instances."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def scripted():
    return ScriptedGenerator


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def sample_cards():
    return [
        Flashcard(id="c-1", question="What is H2O?", answer="Water"),
        Flashcard(id="c-2", question='Who said "hi"?', answer="A, then B"),
    ]


@pytest.fixture
def array_response():
    return (
        "Sure! Here are your flashcards:\n"
        "```json\n"
        "[\n"
        '  {"question": "What is photosynthesis?", "answer": "Light to chemical energy."},\n'
        '  {"question": "Where does it happen?", "answer": "In chloroplasts."},\n'
        '  {"question": "What gas is released?", "answer": "Oxygen."}\n'
        "]\n"
        "```\n"
        "Let me know if you need more."
    )
