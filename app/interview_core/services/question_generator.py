"""
Purpose: Generate a fresh interview question when the practice bank for a
(round, difficulty) bucket is exhausted.
Why: Keeps free-form generation out of the selector; the selector only says
"Exhausted" and the caller lands here.

Testing: Fake LLMClient; check cleanup of quotes/overlong replies.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..interfaces import LLMClient, PromptFactory
from ..models import Difficulty, LLMSettings, Round

logger = logging.getLogger("interview_core.question_generator")

MAX_QUESTION_CHARS = 240


def _clean_question(text: str) -> str:
    q = (text or "").strip().strip('"').strip("“”").strip()
    if len(q) > MAX_QUESTION_CHARS:
        # keep it spoken-friendly
        q = q[:MAX_QUESTION_CHARS].rsplit(" ", 1)[0].strip() + "…"
    return q


def generate_fallback_question(
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
    round: Round,
    difficulty: Difficulty,
    rubric_text: str,
    avoid: Sequence[str] = (),
) -> tuple[str, dict]:
    system = prompts.build_generation_system(
        round=round, difficulty=difficulty, rubric=rubric_text
    )
    text, meta = llm.chat(
        messages=[
            {"role": "user", "content": prompts.generation_instruction(round=round, avoid=avoid)}
        ],
        settings=settings,
        system=system,
    )
    question = _clean_question(text)
    if not question:
        raise ValueError("LLM returned an empty question.")
    logger.info("Generated fallback question for %s/%s", round.value, difficulty.value)
    return question, meta
