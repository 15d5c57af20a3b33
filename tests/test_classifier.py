import pytest

from app.modules.flashcards.classifier import classify
from app.modules.flashcards.models.flashcards import Classification


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "Is the sky blue?",
        "  photosynthesis?  ",
        " ".join(["word"] * 40) + "?",
    ],
)
def test_trailing_question_mark_is_question(text):
    assert classify(text) is Classification.QUESTION


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "What is the capital of France",
        "how plants grow",
        "WHY the Roman Empire fell",
        "  which came first",
        "Where " + " ".join(["x"] * 30),
    ],
)
def test_interrogative_prefix_is_question(text):
    assert classify(text) is Classification.QUESTION


@pytest.mark.unit
@pytest.mark.parametrize("text", ["whatever happened", "however", "Whose book", "Whenever"])
def test_interrogative_needs_word_boundary(text):
    assert classify(text) is Classification.SHORT_TOPIC


@pytest.mark.unit
def test_empty_input_is_short_topic():
    assert classify("") is Classification.SHORT_TOPIC
    assert classify("   ") is Classification.SHORT_TOPIC


@pytest.mark.unit
def test_twenty_words_is_short_topic_boundary():
    assert classify(" ".join(["cell"] * 20)) is Classification.SHORT_TOPIC
    assert classify(" ".join(["cell"] * 21)) is Classification.LONG_PASSAGE


@pytest.mark.unit
def test_words_split_on_any_whitespace():
    text = "\n".join(["mitosis"] * 10) + "\t" + "\t".join(["meiosis"] * 10)
    assert classify(text) is Classification.SHORT_TOPIC


@pytest.mark.unit
def test_long_passage():
    text = (
        "The mitochondria is an organelle found in most eukaryotic cells and is "
        "responsible for producing the bulk of the chemical energy needed to power "
        "the cell's biochemical reactions."
    )
    assert classify(text) is Classification.LONG_PASSAGE
