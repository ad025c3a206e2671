import pytest

from interview_core.models import Difficulty, LLMSettings, Round
from interview_core.prompts import DefaultPromptFactory
from interview_core.services.question_generator import generate_fallback_question


def _generate(llm, avoid=()):
    return generate_fallback_question(
        llm=llm,
        prompts=DefaultPromptFactory(),
        settings=LLMSettings(model="gen"),
        round=Round.PRODUCT_IMPROVEMENT,
        difficulty=Difficulty.HARD,
        rubric_text="Practice Questions:\n- How would you improve Google Search?",
        avoid=avoid,
    )


def test_strips_quotes_and_passes_avoid_list(fake_llm):
    llm = fake_llm('  "How would you improve Notion for students?"  ')

    question, meta = _generate(llm, avoid=["How would you improve Google Search?"])

    assert question == "How would you improve Notion for students?"
    assert meta["tokens_out"] == 5
    call = llm.calls[0]
    assert "How would you improve Google Search?" in call["messages"][0]["content"]
    assert "ROUND: PRODUCT_IMPROVEMENT" in call["system"]
    assert "DIFFICULTY: HARD" in call["system"]


def test_overlong_reply_is_clipped(fake_llm):
    question, _ = _generate(fake_llm("word " * 100))

    assert len(question) <= 241
    assert question.endswith("…")


def test_empty_reply_raises(fake_llm):
    with pytest.raises(ValueError):
        _generate(fake_llm('""'))
