"""Facade exposing the prompt modules as one DefaultPromptFactory."""

from __future__ import annotations
from typing import Sequence

from ..models import Difficulty, Round
from . import evaluation as _evaluation
from . import generation as _generation
from . import interview as _interview


class DefaultPromptFactory:
    # GENERATION (bank exhausted)
    def build_generation_system(
        self, *, round: Round, difficulty: Difficulty, rubric: str
    ) -> str:
        return _generation.build_generation_system(
            round=round, difficulty=difficulty, rubric=rubric
        )

    def generation_instruction(
        self, *, round: Round, avoid: Sequence[str] = ()
    ) -> str:
        return _generation.generation_instruction(round=round, avoid=avoid)

    # INTERVIEWER TURN
    def build_interview_system(
        self, *, round: Round, difficulty: Difficulty, rubric: str, question: str
    ) -> str:
        return _interview.build_interview_system(
            round=round, difficulty=difficulty, rubric=rubric, question=question
        )

    # EVALUATION
    def build_evaluation_system(self) -> str:
        return _evaluation.build_evaluation_system()

    def evaluation_instruction(
        self,
        *,
        round: Round,
        difficulty: Difficulty,
        rubric: str,
        transcript: str,
    ) -> str:
        return _evaluation.evaluation_instruction(
            round=round, difficulty=difficulty, rubric=rubric, transcript=transcript
        )
