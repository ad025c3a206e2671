"""Shared prompt helpers used across prompt modules."""

from __future__ import annotations
from typing import Sequence

from ..catalog import expected_categories
from ..models import Round

READY_TRIGGER = "I am ready for the interview"


def clip_text(s: str, max_chars: int) -> str:
    """Clip text to max_chars, adding ellipsis if clipped."""
    if len(s) <= max_chars:
        return s
    return s[: max_chars - 1].rstrip() + "…"


def render_transcript(history: Sequence[dict], max_chars: int = 12000) -> str:
    """
    Render the interview as a simple transcript. The automated start trigger
    is left out so it is never judged as a candidate answer.
    """
    lines: list[str] = []
    for m in history:
        role = m.get("role", "")
        content = (m.get("content") or "").strip()
        if not content or READY_TRIGGER in content:
            continue
        if role == "user":
            lines.append(f"user: {content}")
        elif role == "assistant":
            lines.append(f"assistant: {content}")
    return clip_text("\n\n".join(lines), max_chars)


def categories_block(round: Round) -> str:
    cats = expected_categories(round)
    keys = "\n".join(f'  "{c}": <0-100>,' for c in cats).rstrip(",")
    breakdown = "\n".join(
        f'{i}. {{ "category": "{c}", "score": <0-5>, "feedback": "..." }}'
        for i, c in enumerate(cats, start=1)
    )
    return (
        f"CRITICAL FOR {round.value}:\n"
        'Your "scores" object MUST include these exact keys with percentage values (0-100):\n'
        f"{{\n{keys}\n}}\n\n"
        'Your "rubric_breakdown" array MUST include these exact categories with individual scores (0-5):\n'
        f"{breakdown}\n"
    )
