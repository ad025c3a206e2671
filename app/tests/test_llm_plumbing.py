import json
import logging

import pytest

from interview_core.logger import log_event
from interview_core.models import LLMSettings, Round
from interview_core.services.llm_openai import OpenAILLMClient
from interview_core.utils.llm_json import extract_json, finite_number, require_object


def test_extract_json_tolerates_fences_and_prose():
    assert extract_json('```json\n{"a": 1}\n```') == {"a": 1}
    assert extract_json('Here you go: {"a": {"b": 2}} thanks') == {"a": {"b": 2}}
    assert extract_json("no json at all") == {}
    assert extract_json("") == {}


def test_require_object_raises_on_empty_or_array():
    with pytest.raises(ValueError):
        require_object("[1, 2]")
    with pytest.raises(ValueError):
        require_object("{}")


def test_finite_number():
    assert finite_number(3) == 3.0
    assert finite_number(False) is None
    assert finite_number(float("inf")) is None
    assert finite_number("3") is None


def test_openai_client_requires_key():
    with pytest.raises(RuntimeError):
        OpenAILLMClient(api_key="")


def test_openai_client_maps_usage_and_response_format():
    class _Usage:
        prompt_tokens = 12
        completion_tokens = 3

    class _Msg:
        content = '{"score": 5}'

    class _Choice:
        message = _Msg()

    class _Response:
        model = "gpt-4o"
        usage = _Usage()
        choices = [_Choice()]

    seen = {}

    class _Completions:
        def create(self, **kwargs):
            seen.update(kwargs)
            return _Response()

    class _Chat:
        completions = _Completions()

    class _SDK:
        chat = _Chat()

    client = OpenAILLMClient(api_key="test-key", client=_SDK())
    settings = LLMSettings(model="gpt-4o", response_format={"type": "json_object"})

    text, meta = client.chat([{"role": "user", "content": "hi"}], settings, system="sys")

    assert text == '{"score": 5}'
    assert meta["tokens_in"] == 12 and meta["tokens_out"] == 3
    assert seen["messages"][0] == {"role": "system", "content": "sys"}
    assert seen["response_format"] == {"type": "json_object"}


def test_log_event_redacts_free_text(caplog):
    with caplog.at_level(logging.INFO, logger="interview_core.events"):
        log_event("controller", "judged", "i-1", transcript="secret answer", round=Round.RCA)

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["interview_id"] == "i-1"
    assert payload["round"] == "RCA"
    assert payload["transcript"] == {"redacted": True, "length": 13}


def test_log_event_hides_question_text_and_lists(caplog):
    question = "How would you improve Google Maps for commuters?"
    with caplog.at_level(logging.INFO, logger="interview_core.events"):
        log_event(
            "controller",
            "question_selected",
            "i-2",
            question=question,
            avoid=["Q one", "Q two"],
            scores={"Problem Framing": 60},
        )

    raw = caplog.records[-1].getMessage()
    payload = json.loads(raw)
    assert question not in raw
    assert payload["question"] == {"redacted": True, "length": len(question)}
    assert payload["avoid"] == {"redacted": True, "items": 2}
    assert payload["scores"] == {"Problem Framing": 60}
