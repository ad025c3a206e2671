"""
Purpose: The single orchestration point for an interview's lifecycle.
It centralizes "start" (pick the opening question) and "complete" (score the
transcript) so request handlers / the UI never touch selection or scoring rules.

Key responsibilities:
- Map external round/difficulty ids to the closed enums.
- Build the user's QuestionHistory from the store and run the selector.
- On an exhausted bank, generate a question via the LLM. The interview is
  stored only once its opening question exists.
- Interviewer turn: one LLM reply per candidate message.
- Judge the transcript (or short-circuit to the zero-participation record),
  aggregate the headline score with the round's weight table, persist it.
- Readiness summary for the dashboard.

Testing: Pure unit tests with fakes: InMemoryInterviewStore, a fake LLMClient
and a seeded random.Random.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Mapping, Optional, Sequence

from .catalog import DEFAULT_WEIGHT_TABLES
from .interfaces import InterviewStore, LLMClient, PromptFactory
from .logger import log_event
from .models import (
    Difficulty,
    Exhausted,
    Insights,
    InterviewRecord,
    LLMSettings,
    ReadinessReport,
    Round,
    SelectionTier,
)
from .prompts import DefaultPromptFactory
from .prompts.interview import conversation_messages
from .services.judge import evaluate_transcript, has_participation, parse_judgement
from .services.question_bank import QuestionBank
from .services.question_generator import generate_fallback_question
from .services.question_selector import load_question_history, select_next
from .services.readiness import readiness_report
from .services.rubrics import RubricLibrary
from .services.score_aggregator import build_insights, zero_participation_insights

logger = logging.getLogger("interview_core.controller")


class InterviewController:
    def __init__(
        self,
        bank: QuestionBank,
        store: InterviewStore,
        *,
        llm: Optional[LLMClient] = None,
        library: Optional[RubricLibrary] = None,
        weight_tables: Optional[Mapping[Round, Mapping[str, float]]] = None,
        rng: Optional[random.Random] = None,
        generation_settings: Optional[LLMSettings] = None,
        interview_settings: Optional[LLMSettings] = None,
        judge_settings: Optional[LLMSettings] = None,
    ):
        self.bank = bank
        self.store = store
        self.llm: Optional[LLMClient] = llm
        self.library = library or RubricLibrary()
        self.prompts: PromptFactory = DefaultPromptFactory()
        self.rng = rng

        tables = dict(DEFAULT_WEIGHT_TABLES)
        tables.update(self.library.weight_tables)
        tables.update(weight_tables or {})
        self.weight_tables: dict[Round, Mapping[str, float]] = tables

        self.generation_settings = generation_settings or LLMSettings(
            model="gpt-4o", temperature=0.7, max_tokens=60
        )
        self.interview_settings = interview_settings or LLMSettings(
            model="gpt-4o-mini", temperature=0.7, max_tokens=300
        )
        self.judge_settings = judge_settings or LLMSettings(
            model="gpt-4o",
            temperature=0.2,
            max_tokens=1500,
            response_format={"type": "json_object"},
        )
        self.tokens_in: int = 0
        self.tokens_out: int = 0

    def is_ready(self) -> bool:
        """True if the controller can reply as interviewer, generate and judge."""
        return self.llm is not None

    def _track(self, meta: dict) -> None:
        self.tokens_in += int(meta.get("tokens_in", 0))
        self.tokens_out += int(meta.get("tokens_out", 0))

    def start_interview(
        self,
        user_id: str,
        round_id: str,
        difficulty: str = "MEDIUM",
        *,
        interview_id: Optional[str] = None,
    ) -> InterviewRecord:
        """Pick (or generate) the opening question, then store the interview.
        Nothing is stored when no question can be produced."""
        round = Round.from_external(round_id)
        level = Difficulty.parse(difficulty)

        history = load_question_history(
            self.store, user_id, round, level, exclude_interview_id=interview_id
        )
        log_event(
            "controller",
            "history_loaded",
            interview_id,
            user_id=user_id,
            round=round,
            difficulty=level,
            unique_questions=len(history),
        )

        result = select_next(self.bank.get(round, level), history, rng=self.rng)
        if isinstance(result, Exhausted):
            question = self._generate(round, level, avoid=list(history))
            tier = SelectionTier.GENERATED
        else:
            question, tier = result.question, result.tier

        interview = self.store.create(user_id, round, level, interview_id=interview_id)
        log_event(
            "controller", "question_selected", interview.interview_id, tier=tier, round=round
        )
        return self.store.set_question(interview.interview_id, question, tier)

    def _generate(self, round: Round, difficulty: Difficulty, avoid: Sequence[str]) -> str:
        if self.llm is None:
            raise RuntimeError(
                f"Question bank exhausted for {round.value}/{difficulty.value} "
                "and no LLM client is configured."
            )
        question, meta = generate_fallback_question(
            llm=self.llm,
            prompts=self.prompts,
            settings=self.generation_settings,
            round=round,
            difficulty=difficulty,
            rubric_text=self.library.content_for(round, difficulty),
            avoid=avoid,
        )
        self._track(meta)
        return question

    def reply(self, interview_id: str, transcript: Sequence[dict]) -> str:
        """Interviewer's next message, given the whole conversation so far."""
        interview = self.store.get(interview_id)
        if self.llm is None:
            raise RuntimeError("No LLM client configured to run the interviewer.")

        system = self.prompts.build_interview_system(
            round=interview.round,
            difficulty=interview.difficulty,
            rubric=self.library.content_for(interview.round, interview.difficulty),
            question=interview.question_text or "",
        )
        messages = conversation_messages(transcript)
        text, meta = self.llm.chat(messages, self.interview_settings, system=system)
        self._track(meta)

        answer = (text or "").strip()
        if not answer:
            raise ValueError("Interviewer returned an empty reply.")
        log_event(
            "controller", "interviewer_replied", interview_id, turns=len(messages), reply=answer
        )
        return answer

    def complete_interview(
        self, interview_id: str, transcript: Sequence[dict]
    ) -> Insights:
        """Judge the transcript and persist the insights with the headline score."""
        interview = self.store.get(interview_id)

        if not has_participation(transcript):
            log_event("controller", "no_participation", interview_id)
            insights = zero_participation_insights(interview.round)
            self.store.save_insights(interview_id, insights)
            return insights

        if self.llm is None:
            raise RuntimeError("No LLM client configured to evaluate the transcript.")

        judgement, meta = evaluate_transcript(
            llm=self.llm,
            prompts=self.prompts,
            settings=self.judge_settings,
            round=interview.round,
            difficulty=interview.difficulty,
            rubric_text=self.library.evaluation_content_for(
                interview.round, interview.difficulty
            ),
            transcript=transcript,
        )
        self._track(meta)
        insights = build_insights(judgement, self.weight_tables.get(interview.round))
        log_event(
            "controller",
            "insights_generated",
            interview_id,
            raw_score=judgement.raw_score,
            score=insights.score,
        )
        self.store.save_insights(interview_id, insights)
        return insights

    def score_judgement(self, interview_id: str, payload: Mapping[str, Any]) -> Insights:
        """Score an already-obtained judge JSON object (no LLM call)."""
        interview = self.store.get(interview_id)
        judgement = parse_judgement(payload)
        insights = build_insights(judgement, self.weight_tables.get(interview.round))
        self.store.save_insights(interview_id, insights)
        return insights

    def readiness(self, user_id: str) -> ReadinessReport:
        return readiness_report(self.store.sessions_for(user_id))
