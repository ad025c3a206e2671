"""
Purpose: Interview records & question history storage (in-memory; a document
database in production).
Why: The selector needs each user's past questions per bucket; the readiness
view needs scored sessions.

What is inside:
InMemoryInterviewStore with create/get/set_question/save_insights and the
HistoryStore query records_for(user, round, difficulty).

Testing:
In-memory: simple state tests.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from ..models import (
    AskRecord,
    Difficulty,
    Insights,
    InterviewRecord,
    Round,
    SelectionTier,
    utcnow,
)


class InMemoryInterviewStore:
    def __init__(self) -> None:
        self._interviews: dict[str, InterviewRecord] = {}

    def create(
        self,
        user_id: str,
        round: Round,
        difficulty: Difficulty,
        *,
        interview_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        question_text: Optional[str] = None,
    ) -> InterviewRecord:
        rec = InterviewRecord(
            interview_id=interview_id or uuid.uuid4().hex,
            user_id=user_id,
            round=round,
            difficulty=difficulty,
            created_at=created_at or utcnow(),
            question_text=question_text,
        )
        self._interviews[rec.interview_id] = rec
        return rec

    def get(self, interview_id: str) -> InterviewRecord:
        rec = self._interviews.get(interview_id)
        if rec is None:
            raise ValueError(f"Unknown interview: {interview_id!r}")
        return rec

    def set_question(
        self,
        interview_id: str,
        question_text: str,
        tier: Optional[SelectionTier] = None,
    ) -> InterviewRecord:
        rec = self.get(interview_id)
        rec.question_text = question_text
        rec.selection_tier = tier
        return rec

    def save_insights(self, interview_id: str, insights: Insights) -> InterviewRecord:
        rec = self.get(interview_id)
        rec.insights = insights
        rec.insights_generated_at = utcnow()
        return rec

    def records_for(
        self,
        user_id: str,
        round: Round,
        difficulty: Difficulty,
        *,
        exclude_interview_id: Optional[str] = None,
    ) -> list[AskRecord]:
        return [
            AskRecord(
                question=rec.question_text,
                user_id=rec.user_id,
                round=rec.round,
                difficulty=rec.difficulty,
                last_asked_at=rec.created_at,
                interview_id=rec.interview_id,
            )
            for rec in self._interviews.values()
            if rec.user_id == user_id
            and rec.round == round
            and rec.difficulty == difficulty
            and rec.question_text
            and rec.interview_id != exclude_interview_id
        ]

    def sessions_for(self, user_id: str) -> list[InterviewRecord]:
        """Scored interviews of a user, oldest first."""
        scored = [
            rec
            for rec in self._interviews.values()
            if rec.user_id == user_id and rec.insights is not None
        ]
        return sorted(scored, key=lambda rec: rec.created_at)

    def __len__(self) -> int:
        return len(self._interviews)

    def reset(self) -> None:
        self._interviews = {}
