"""Transcript evaluation (judge) prompts."""

from __future__ import annotations
from textwrap import dedent

from ..models import Difficulty, Round
from .common import categories_block


def build_evaluation_system() -> str:
    return (
        "You are a HARSH senior Product Management Interview Bar Raiser.\n"
        "You have extremely high standards and rarely give scores above 70%.\n"
        "You are evaluating a CANDIDATE's performance in a mock interview.\n\n"
        "Rules:\n"
        '- ONLY evaluate the candidate\'s responses (marked as "user" in the transcript).\n'
        "- Do NOT give credit for anything the interviewer said or hinted at.\n"
        "- Penalize vague answers, missing structure, no data requests, jumping to solutions.\n"
        "- Return EXACTLY one JSON object and nothing else."
    )


def evaluation_instruction(
    *,
    round: Round,
    difficulty: Difficulty,
    rubric: str,
    transcript: str,
) -> str:
    head = dedent(
        f"""\
        Context:
        - Round: {round.value}
        - Difficulty: {difficulty.value}

        Output ONLY this JSON object (no code fences, no commentary):
        {{
          "score": <number 0-10>,
          "summary": "<2-3 sentences>",
          "strengths": ["<point>", "..."],
          "improvements": ["<point>", "..."],
          "scores": {{"<Rubric Category>": <percentage 0-100>, "...": 0}},
          "actual_root_cause": "<1-2 sentences on the TRUE root cause, RCA rounds only>",
          "rubric_breakdown": [
            {{"category": "<Category>", "score": <0-5>, "feedback": "<specific feedback>"}}
          ]
        }}
        """
    )
    return (
        f"{head}\n"
        f"{categories_block(round)}\n"
        "Rubric / Assessment Pointers:\n"
        f"{rubric}\n\n"
        'Transcript (evaluate ONLY the "user" messages):\n'
        f"{transcript}\n"
    )
