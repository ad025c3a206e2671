"""
Purpose: Canonical practice questions per (round, difficulty) bucket.
Why: The rubric documents embed the question list; the selector needs it as
plain data, parsed once at load time and read-only afterwards.

What is inside:
extract_practice_questions(text) -> tuple[str, ...]
QuestionBank.load / get / buckets / from_library

Testing: Pure string fixtures; no I/O.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ..models import Difficulty, Round

if TYPE_CHECKING:
    from .rubrics import RubricLibrary

logger = logging.getLogger("interview_core.question_bank")

_PRACTICE_BLOCK = re.compile(
    r"Practice Questions.*:\s*((?:- .+\n?)+)", re.IGNORECASE
)
_LEADING_DASH = re.compile(r"^-\s*")
_MIN_QUESTION_CHARS = 11


def extract_practice_questions(text: str) -> tuple[str, ...]:
    """
    Return the bullet lines of the first "Practice Questions:" section,
    in document order. Lines under 11 characters are dropped.
    Anything unparseable gives an empty tuple.
    """
    if not isinstance(text, str) or not text:
        return ()
    m = _PRACTICE_BLOCK.search(text)
    if not m:
        return ()

    questions: list[str] = []
    for line in m.group(1).split("\n"):
        q = _LEADING_DASH.sub("", line).strip()
        if len(q) >= _MIN_QUESTION_CHARS:
            questions.append(q)
    return tuple(questions)


class QuestionBank:
    def __init__(self) -> None:
        self._buckets: dict[tuple[Round, Difficulty], tuple[str, ...]] = {}

    def load(
        self, round: Round, difficulty: Difficulty, rubric_text: str
    ) -> tuple[str, ...]:
        """Parse a rubric into its bucket. Replaces any earlier bucket."""
        questions = extract_practice_questions(rubric_text)
        self._buckets[(round, difficulty)] = questions
        logger.info(
            "Found %d practice questions for %s/%s.",
            len(questions),
            round.value,
            difficulty.value,
        )
        return questions

    def get(self, round: Round, difficulty: Difficulty) -> tuple[str, ...]:
        return self._buckets.get((round, difficulty), ())

    def buckets(self) -> list[tuple[Round, Difficulty]]:
        return list(self._buckets)

    def __len__(self) -> int:
        return sum(len(qs) for qs in self._buckets.values())

    @classmethod
    def from_library(cls, library: "RubricLibrary") -> "QuestionBank":
        bank = cls()
        for rubric in library.rubrics():
            bank.load(rubric.round, rubric.difficulty, rubric.content)
        return bank
