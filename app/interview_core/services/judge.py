"""
Purpose: Ask an LLM judge to evaluate an interview transcript and turn its
reply into a validated Judgement (raw 0-10 score + category percentages).
Scoring the Judgement is score_aggregator's job, not this module's.

Testing: Fake LLMClient returning canned JSON; bounds (missing fields,
out-of-range numbers, non-JSON replies).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..interfaces import LLMClient, PromptFactory
from ..models import Difficulty, Judgement, LLMSettings, Round
from ..prompts.common import READY_TRIGGER, render_transcript
from ..utils.llm_json import finite_number, require_object, to_str_list

logger = logging.getLogger("interview_core.judge")

MAX_CATEGORY_SCORE = 100.0
MAX_RAW_SCORE = 10.0


def has_participation(transcript: Sequence[dict]) -> bool:
    """True if the candidate said anything besides the automated start trigger."""
    for m in transcript:
        if m.get("role") != "user":
            continue
        text = (m.get("content") or "").strip()
        if text and READY_TRIGGER not in text:
            return True
    return False


def _score_map(raw: Any) -> dict[str, float]:
    scores: dict[str, float] = {}
    if not isinstance(raw, Mapping):
        return scores
    for category, value in raw.items():
        number = finite_number(value)
        if number is None:
            logger.warning("Dropping non-numeric score for %r", category)
            continue
        scores[str(category)] = max(0.0, min(MAX_CATEGORY_SCORE, number))
    return scores


def parse_judgement(obj: Mapping[str, Any]) -> Judgement:
    if not isinstance(obj, Mapping):
        raise ValueError("Expected a JSON object.")
    raw = finite_number(obj.get("score"))
    if raw is not None and not 0 <= raw <= MAX_RAW_SCORE:
        logger.warning("Judge score %s outside 0-10; ignoring it", raw)
        raw = None

    breakdown = obj.get("rubric_breakdown")
    return Judgement(
        raw_score=raw,
        scores=_score_map(obj.get("scores")),
        summary=str(obj.get("summary") or "").strip(),
        strengths=to_str_list(obj.get("strengths")),
        improvements=to_str_list(obj.get("improvements")),
        actual_root_cause=str(obj.get("actual_root_cause") or "").strip(),
        rubric_breakdown=[b for b in breakdown if isinstance(b, dict)]
        if isinstance(breakdown, list)
        else [],
    )


def evaluate_transcript(
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
    round: Round,
    difficulty: Difficulty,
    rubric_text: str,
    transcript: Sequence[dict],
) -> tuple[Judgement, dict]:
    """Return (Judgement, meta) for a finished interview."""
    user_prompt = prompts.evaluation_instruction(
        round=round,
        difficulty=difficulty,
        rubric=rubric_text,
        transcript=render_transcript(transcript),
    )
    logger.info("Calling judge for %s/%s (%d chars)", round.value, difficulty.value, len(user_prompt))

    text, meta = llm.chat(
        messages=[{"role": "user", "content": user_prompt}],
        settings=settings,
        system=prompts.build_evaluation_system(),
    )
    obj = require_object(
        text, err="LLM did not return a valid JSON object for the evaluation."
    )
    return parse_judgement(obj), meta
