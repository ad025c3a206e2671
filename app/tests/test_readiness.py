from datetime import datetime, timedelta, timezone

from interview_core.models import Difficulty, Insights, InterviewRecord, Round
from interview_core.services.readiness import readiness_report

_T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _session(round: Round, score: int, n: int = 0) -> InterviewRecord:
    return InterviewRecord(
        interview_id=f"{round.value}-{n}-{score}",
        user_id="u1",
        round=round,
        difficulty=Difficulty.MEDIUM,
        created_at=_T0 + timedelta(days=n),
        insights=Insights(score=score),
    )


def test_empty_history():
    report = readiness_report([])

    assert report.overall == 0
    assert report.sessions == 0
    assert len(report.by_round) == len(Round)
    assert report.strengths == []
    assert report.improvements == []


def test_averages_strengths_and_improvements():
    sessions = [
        _session(Round.RCA, 80, 1),
        _session(Round.RCA, 71, 2),
        _session(Round.PRODUCT_STRATEGY, 90, 3),
        _session(Round.METRICS, 40, 4),
        _session(Round.GUESSTIMATES, 65, 5),
    ]

    report = readiness_report(sessions)

    # (80 + 71 + 90 + 40 + 65) / 5 = 69.2
    assert report.overall == 69
    by_round = {r.round: r for r in report.by_round}
    assert by_round[Round.RCA].score == 76  # 75.5 rounds up
    assert by_round[Round.RCA].count == 2
    assert by_round[Round.PRODUCT_DESIGN].count == 0
    assert [r.round for r in report.strengths] == [Round.PRODUCT_STRATEGY, Round.RCA]
    # worst three include two unplayed rounds, which are filtered out
    assert [r.round for r in report.improvements] == [Round.METRICS]


def test_unscored_sessions_are_ignored():
    pending = _session(Round.RCA, 0)
    pending.insights = None

    report = readiness_report([pending, _session(Round.RCA, 50)])

    assert report.sessions == 1
    assert report.overall == 50
