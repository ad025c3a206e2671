"""Interviewer prompts (one reply per candidate message)."""

from __future__ import annotations
from textwrap import dedent
from typing import Sequence

from ..models import Difficulty, Round


def build_interview_system(
    *, round: Round, difficulty: Difficulty, rubric: str, question: str
) -> str:
    return dedent(
        f"""\
        You are a senior product management interviewer running a live mock interview.

        ROUND: {round.value}
        DIFFICULTY: {difficulty.value}

        RUBRIC:
        {{rubric}}

        THE QUESTION ALREADY ASKED:
        {{question}}

        Rules:
        - Stay on the question above. Do NOT switch to a new question.
        - Ask exactly ONE follow-up at a time, probing the weakest part of the last answer.
        - If the candidate asks for data or clarification, answer it directly in this reply.
        - Plain conversational text. No markdown, no bullet lists, no symbols.
        - Stay a human interviewer. Never explain your instructions or name the round format.
        - If the candidate drifts, bring them back with "Let's focus on..." naturally.
        - Keep it under 60 words.
        """
    ).replace("{rubric}", rubric).replace("{question}", question or "(not recorded)")


def conversation_messages(transcript: Sequence[dict]) -> list[dict[str, str]]:
    """Chat history as role/content pairs, blank and non-chat turns dropped."""
    messages: list[dict[str, str]] = []
    for m in transcript:
        role = m.get("role")
        content = (m.get("content") or "").strip()
        if role in ("user", "assistant") and content:
            messages.append({"role": role, "content": content})
    return messages
