"""Fallback question generation prompts (bank exhausted)."""

from __future__ import annotations
from textwrap import dedent
from typing import Sequence

from ..catalog import ROUND_STYLES
from ..models import Difficulty, Round


def build_generation_system(*, round: Round, difficulty: Difficulty, rubric: str) -> str:
    return dedent(
        f"""\
        You are a senior product management interviewer.

        ROUND: {round.value}
        DIFFICULTY: {difficulty.value}

        RUBRIC:
        {{rubric}}

        GENERATION RULES:
        - The candidate has exhausted all practice questions.
        - Generate a NEW, UNIQUE question.
        - It must follow the exact same style as the "Practice Questions".
        - Expected style: {ROUND_STYLES.get(round, 'one clear interview question')}
        - Pick a company NOT in the practice list if possible.
        - Plain text only. No markdown, no quotes, no preamble.
        """
    ).replace("{rubric}", rubric)


def generation_instruction(*, round: Round, avoid: Sequence[str] = ()) -> str:
    avoid_block = ""
    if avoid:
        bullets = "\n".join(f"- {q}" for q in avoid)
        avoid_block = f"\nDo NOT repeat any of these questions:\n{bullets}\n"
    return (
        f"CONTEXT: We are doing a {round.value} interview.\n"
        "The candidate has done many before. Generate a NEW, FRESH question.\n"
        f"{avoid_block}"
        "Keep it under 25 words. Just the question."
    )
