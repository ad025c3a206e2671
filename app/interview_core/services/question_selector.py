"""
Purpose: Pick the next practice question for a user in one (round, difficulty)
bucket without premature repeats.

Policy, each tier tried only when the previous one is empty:
1. never used: uniform random over bank questions absent from history;
2. least recently used: history restricted to questions still in the bank,
   oldest first (absent timestamps count as oldest), random among the oldest 3;
3. first bank entry, deterministically;
4. Exhausted (empty bank): the caller generates a question instead.

Testing: Pure functions; pass a seeded random.Random as rng or assert on
distributions over many trials.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Sequence

from ..interfaces import HistoryStore
from ..models import (
    AskRecord,
    Difficulty,
    Exhausted,
    FromBank,
    QuestionHistory,
    Round,
    SelectionResult,
    SelectionTier,
    instant_of,
)

logger = logging.getLogger("interview_core.selector")

LRU_POOL_SIZE = 3


def build_question_history(
    records: Iterable[AskRecord],
    *,
    exclude_interview_id: Optional[str] = None,
) -> QuestionHistory:
    """Most recent AskRecord per question text, ignoring the in-progress interview."""
    history: QuestionHistory = {}
    for rec in records:
        if not rec.question or rec.interview_id == exclude_interview_id:
            continue
        seen = history.get(rec.question)
        if seen is None or instant_of(rec.last_asked_at) > instant_of(seen.last_asked_at):
            history[rec.question] = rec
    return history


def load_question_history(
    store: HistoryStore,
    user_id: str,
    round: Round,
    difficulty: Difficulty,
    *,
    exclude_interview_id: Optional[str] = None,
) -> QuestionHistory:
    records = store.records_for(
        user_id, round, difficulty, exclude_interview_id=exclude_interview_id
    )
    return build_question_history(records, exclude_interview_id=exclude_interview_id)


def select_next(
    bank: Sequence[str],
    history: QuestionHistory,
    *,
    rng: Optional[random.Random] = None,
) -> SelectionResult:
    rng = rng if rng is not None else random

    available = [q for q in bank if q not in history]
    if available:
        question = rng.choice(available)
        logger.info("Picking from %d never-used questions.", len(available))
        return FromBank(question, SelectionTier.NEVER_USED)

    if not bank:
        logger.info("No practice questions available. Bank exhausted.")
        return Exhausted()

    in_bank = set(bank)
    # sorted() is stable: equal instants keep history order
    stale_first = sorted(
        ((q, rec) for q, rec in history.items() if q in in_bank),
        key=lambda item: instant_of(item[1].last_asked_at),
    )
    if stale_first:
        pool = stale_first[:LRU_POOL_SIZE]
        question, rec = rng.choice(pool)
        logger.info(
            "All %d questions used. Selected LRU question (last used %s) from %d oldest candidates.",
            len(bank),
            rec.last_asked_at or "unknown",
            len(pool),
        )
        return FromBank(question, SelectionTier.LEAST_RECENT)

    logger.info("No history entry left in bank. Falling back to first question.")
    return FromBank(bank[0], SelectionTier.FIRST_IN_BANK)
