"""
Purpose: Turn a judge's per-category percentages into one 0-100 headline score.

Weighted mode (a weight table exists for the round): weighted mean over the
categories present in both the table and the scores map. No overlap falls back
to the judge's raw 0-10 score x10.
Unweighted mode: the raw 0-10 score x10; the category map is display-only.

Inputs are assumed validated (see judge.parse_judgement). Nothing here raises.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Optional

from ..catalog import expected_categories
from ..models import Insights, Judgement, Round

MAX_RAW_SCORE = 10
MAX_HEADLINE = 100

ZERO_PARTICIPATION_SUMMARY = "The interview was ended before any responses were provided."
ZERO_PARTICIPATION_IMPROVEMENT = "Participate in the interview to receive feedback."
ZERO_PARTICIPATION_ROOT_CAUSE = "N/A - No attempt made."


def _dec(value) -> Decimal:
    return Decimal(str(value))


def round_half_up(value) -> int:
    return int(_dec(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _clamp(score: int) -> int:
    return max(0, min(MAX_HEADLINE, score))


def _raw_to_headline(raw_overall_score: Optional[float]) -> int:
    if isinstance(raw_overall_score, bool) or not isinstance(raw_overall_score, (int, float)):
        return 0
    if not 0 <= raw_overall_score <= MAX_RAW_SCORE:
        return 0
    return _clamp(round_half_up(_dec(raw_overall_score) * 10))


def aggregate(
    scores: Mapping[str, float],
    weights: Optional[Mapping[str, float]] = None,
    raw_overall_score: Optional[float] = None,
) -> int:
    if not weights:
        return _raw_to_headline(raw_overall_score)

    weighted_sum = Decimal(0)
    weight_used = Decimal(0)
    for category, weight in weights.items():
        if category not in scores:
            continue
        weighted_sum += _dec(scores[category]) * _dec(weight)
        weight_used += _dec(weight)

    if weight_used > 0:
        return _clamp(round_half_up(weighted_sum / weight_used))
    return _raw_to_headline(raw_overall_score)


def build_insights(
    judgement: Judgement, weights: Optional[Mapping[str, float]] = None
) -> Insights:
    return Insights(
        score=aggregate(judgement.scores, weights, judgement.raw_score),
        scores=dict(judgement.scores),
        summary=judgement.summary,
        strengths=list(judgement.strengths),
        improvements=list(judgement.improvements),
        actual_root_cause=judgement.actual_root_cause,
        rubric_breakdown=list(judgement.rubric_breakdown),
    )


def zero_participation_insights(round: Round) -> Insights:
    """Record for an interview with no candidate answers: every category the
    round expects is present with an explicit 0."""
    categories = expected_categories(round)
    return Insights(
        score=aggregate({c: 0 for c in categories}, None, 0),
        scores={c: 0 for c in categories},
        summary=ZERO_PARTICIPATION_SUMMARY,
        strengths=[],
        improvements=[ZERO_PARTICIPATION_IMPROVEMENT],
        actual_root_cause=ZERO_PARTICIPATION_ROOT_CAUSE,
        rubric_breakdown=[],
    )
