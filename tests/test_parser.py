import json
import sys

import pytest

from app.modules.flashcards.errors import MalformedResponse
from app.modules.flashcards.models.flashcards import Classification
from app.modules.flashcards.parser import extract_json_array, parse


@pytest.mark.unit
def test_array_in_prose_parsed_in_order(array_response):
    cards = parse(Classification.SHORT_TOPIC, array_response, "photosynthesis")
    assert [c.question for c in cards] == [
        "What is photosynthesis?",
        "Where does it happen?",
        "What gas is released?",
    ]
    assert [c.answer for c in cards] == [
        "Light to chemical energy.",
        "In chloroplasts.",
        "Oxygen.",
    ]
    ids = [c.id for c in cards]
    assert len(set(ids)) == len(ids)
    assert all(i.startswith("topic-") for i in ids)


@pytest.mark.unit
def test_long_passage_ids_use_card_prefix(array_response):
    cards = parse(Classification.LONG_PASSAGE, array_response, "passage")
    assert all(c.id.startswith("card-") for c in cards)
    assert [c.id.rsplit("-", 1)[1] for c in cards] == ["0", "1", "2"]


@pytest.mark.unit
def test_question_uses_trimmed_raw_text_as_answer():
    cards = parse(Classification.QUESTION, "\n  Paris.  \n", "What is the capital of France?")
    assert len(cards) == 1
    assert cards[0].question == "What is the capital of France?"
    assert cards[0].answer == "Paris."
    assert cards[0].id.startswith("qa-")


@pytest.mark.unit
def test_question_ignores_brackets_in_answer():
    cards = parse(Classification.QUESTION, "A list [1, 2] is ordered.", "What is a list?")
    assert cards[0].answer == "A list [1, 2] is ordered."


@pytest.mark.unit
def test_empty_question_answer_is_malformed():
    with pytest.raises(MalformedResponse):
        parse(Classification.QUESTION, "   ", "Why?")


@pytest.mark.unit
def test_no_array_is_malformed():
    with pytest.raises(MalformedResponse) as info:
        parse(Classification.SHORT_TOPIC, "I cannot help with that.", "topic")
    assert info.value.raw == "I cannot help with that."


@pytest.mark.unit
def test_extract_is_greedy_across_newlines():
    raw = 'intro [\n{"question": "a", "answer": "b"}\n] middle [ignored?] end'
    assert extract_json_array(raw).startswith("[\n{")
    assert extract_json_array(raw).endswith("[ignored?]")


@pytest.mark.unit
def test_greedy_match_spanning_two_arrays_fails_whole_batch():
    raw = '[{"question": "a", "answer": "b"}] and also [{"question": "c", "answer": "d"}]'
    with pytest.raises(MalformedResponse):
        parse(Classification.SHORT_TOPIC, raw, "topic")


@pytest.mark.unit
def test_invalid_json_is_malformed():
    with pytest.raises(MalformedResponse):
        parse(Classification.LONG_PASSAGE, '[{"question": "a", "answer": }]', "text")


@pytest.mark.unit
@pytest.mark.parametrize(
    "items",
    [
        [{"question": "a"}],
        [{"answer": "b"}],
        [{"question": "a", "answer": "  "}],
        [{"question": {"x": 1}, "answer": "b"}],
        ["just a string"],
        [{"question": "ok", "answer": "ok"}, {"question": "", "answer": "x"}],
    ],
)
def test_missing_fields_reject_entire_batch(items):
    with pytest.raises(MalformedResponse):
        parse(Classification.SHORT_TOPIC, json.dumps(items), "topic")


@pytest.mark.unit
def test_scalar_fields_are_stringified():
    cards = parse(Classification.SHORT_TOPIC, '[{"question": "2+2?", "answer": 4}]', "math")
    assert cards[0].answer == "4"


@pytest.mark.unit
def test_empty_array_yields_empty_batch():
    assert parse(Classification.SHORT_TOPIC, "[]", "topic") == []


@pytest.mark.unit
@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit"
)
def test_oversized_integer_is_malformed():
    raw = '[{"question": "a", "answer": ' + "1" * 5000 + "}]"
    with pytest.raises(MalformedResponse):
        parse(Classification.SHORT_TOPIC, raw, "topic")


@pytest.mark.unit
def test_runaway_nesting_is_malformed():
    raw = "[" * 100000 + "]" * 100000
    with pytest.raises(MalformedResponse):
        parse(Classification.LONG_PASSAGE, raw, "text")
