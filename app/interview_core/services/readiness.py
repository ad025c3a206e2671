"""
Purpose: Dashboard numbers over a user's scored sessions.
Overall average, per-round averages, and which rounds read as strengths
(>= 70) or improvement areas (< 70).
"""

from __future__ import annotations

from typing import Iterable

from ..models import InterviewRecord, ReadinessReport, Round, RoundReadiness
from .score_aggregator import round_half_up

STRENGTH_THRESHOLD = 70
_TOP_N = 3


def _mean(values: list[int]) -> int:
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def readiness_report(sessions: Iterable[InterviewRecord]) -> ReadinessReport:
    by_round_scores: dict[Round, list[int]] = {r: [] for r in Round}
    all_scores: list[int] = []
    for s in sessions:
        if s.insights is None:
            continue
        all_scores.append(s.insights.score)
        by_round_scores[s.round].append(s.insights.score)

    by_round = [
        RoundReadiness(round=r, score=_mean(scores), count=len(scores))
        for r, scores in by_round_scores.items()
    ]
    best_first = sorted(by_round, key=lambda r: r.score, reverse=True)
    strengths = [
        r for r in best_first[:_TOP_N] if r.count > 0 and r.score >= STRENGTH_THRESHOLD
    ]
    worst_first = list(reversed(best_first))
    improvements = [
        r for r in worst_first[:_TOP_N] if r.count > 0 and r.score < STRENGTH_THRESHOLD
    ]

    return ReadinessReport(
        overall=_mean(all_scores),
        sessions=len(all_scores),
        by_round=by_round,
        strengths=strengths,
        improvements=improvements,
    )
