"""
Seams between the interview core and its collaborators. Selection, judging
and the controller only see these Protocols, so the OpenAI client and the
in-memory store can be replaced by fakes or a database-backed store.

Common protocols:
- LLMClient.chat(messages, settings) -> (reply, meta)
- PromptFactory: generation, interviewer and evaluation prompts
- HistoryStore.records_for(user, round, difficulty) -> past AskRecords
- InterviewStore: HistoryStore plus the interview lifecycle writes

Testing: Use simple fake implementations to test the controller without network calls.
"""

from __future__ import annotations
from typing import Iterable, Optional, Protocol, Sequence
from .models import (
    AskRecord,
    Difficulty,
    Insights,
    InterviewRecord,
    LLMSettings,
    Round,
    SelectionTier,
)


class LLMClient(Protocol):
    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]: ...


class PromptFactory(Protocol):
    def build_generation_system(
        self, *, round: Round, difficulty: Difficulty, rubric: str
    ) -> str: ...

    def generation_instruction(
        self, *, round: Round, avoid: Sequence[str] = ()
    ) -> str: ...

    def build_interview_system(
        self, *, round: Round, difficulty: Difficulty, rubric: str, question: str
    ) -> str: ...

    def build_evaluation_system(self) -> str: ...

    def evaluation_instruction(
        self,
        *,
        round: Round,
        difficulty: Difficulty,
        rubric: str,
        transcript: str,
    ) -> str: ...


class HistoryStore(Protocol):
    def records_for(
        self,
        user_id: str,
        round: Round,
        difficulty: Difficulty,
        *,
        exclude_interview_id: Optional[str] = None,
    ) -> Iterable[AskRecord]: ...


class InterviewStore(HistoryStore, Protocol):
    def create(
        self,
        user_id: str,
        round: Round,
        difficulty: Difficulty,
        *,
        interview_id: Optional[str] = None,
    ) -> InterviewRecord: ...

    def get(self, interview_id: str) -> InterviewRecord: ...

    def set_question(
        self, interview_id: str, question_text: str, tier: Optional[SelectionTier] = None
    ) -> InterviewRecord: ...

    def save_insights(self, interview_id: str, insights: Insights) -> InterviewRecord: ...

    def sessions_for(self, user_id: str) -> list[InterviewRecord]: ...
