from collections import Counter
from datetime import datetime, timezone

from interview_core.models import (
    AskRecord,
    Difficulty,
    Exhausted,
    FromBank,
    Round,
    SelectionTier,
)
from interview_core.services.question_selector import (
    build_question_history,
    load_question_history,
    select_next,
)


def _rec(question, ts, interview_id=None):
    return AskRecord(
        question=question,
        user_id="u1",
        round=Round.RCA,
        difficulty=Difficulty.MEDIUM,
        last_asked_at=ts,
        interview_id=interview_id or f"i-{question}-{ts}",
    )


def _history(**timestamps):
    return {q: _rec(q, ts) for q, ts in timestamps.items()}


def test_fresh_bank_picks_every_question_eventually(rng):
    bank = ["Q1", "Q2", "Q3"]

    seen = Counter(select_next(bank, {}, rng=rng).question for _ in range(300))

    assert set(seen) == {"Q1", "Q2", "Q3"}


def test_never_repeats_while_unused_questions_remain(rng):
    bank = ["Q1", "Q2", "Q3", "Q4"]
    history = _history(Q1=100, Q3=50)

    for _ in range(200):
        result = select_next(bank, history, rng=rng)
        assert result.tier == SelectionTier.NEVER_USED
        assert result.question not in history


def test_empty_bank_is_exhausted_regardless_of_history(rng):
    assert select_next([], {}, rng=rng) == Exhausted()
    assert isinstance(select_next([], _history(Q1=1, Q2=2), rng=rng), Exhausted)


def test_small_bank_lru_picks_from_both():
    bank = ["Q1", "Q2"]
    history = _history(Q1=100, Q2=200)

    picks = {select_next(bank, history).question for _ in range(200)}

    assert picks == {"Q1", "Q2"}


def test_lru_only_picks_among_three_oldest(rng):
    bank = ["Q1", "Q2", "Q3", "Q4", "Q5"]
    history = _history(Q1=5, Q2=1, Q3=4, Q4=2, Q5=3)

    results = [select_next(bank, history, rng=rng) for _ in range(300)]

    assert {r.tier for r in results} == {SelectionTier.LEAST_RECENT}
    assert {r.question for r in results} == {"Q2", "Q4", "Q5"}


def test_missing_timestamps_sort_as_oldest(rng):
    bank = ["Q1", "Q2", "Q3", "Q4"]
    history = _history(Q1=10, Q2=None, Q3=20, Q4="not a date")

    picks = {select_next(bank, history, rng=rng).question for _ in range(200)}

    assert picks <= {"Q2", "Q4", "Q1"}
    assert "Q3" not in picks


def test_stale_history_entries_are_never_selected(rng):
    bank = ["Q1", "Q2", "Q3", "Q4"]
    history = _history(Removed=0, Gone=1, Q1=10, Q2=20, Q3=30, Q4=40)

    picks = {select_next(bank, history, rng=rng).question for _ in range(300)}

    assert picks == {"Q1", "Q2", "Q3"}


def test_lru_accepts_datetimes(rng):
    bank = ["Q1", "Q2", "Q3", "Q4"]
    history = {
        "Q1": _rec("Q1", datetime(2024, 1, 4, tzinfo=timezone.utc)),
        "Q2": _rec("Q2", datetime(2024, 1, 1, tzinfo=timezone.utc)),
        "Q3": _rec("Q3", datetime(2024, 1, 2, tzinfo=timezone.utc)),
        "Q4": _rec("Q4", datetime(2024, 1, 3, tzinfo=timezone.utc)),
    }

    picks = {select_next(bank, history, rng=rng).question for _ in range(200)}

    assert picks == {"Q2", "Q3", "Q4"}


def test_build_history_keeps_most_recent_and_skips_current_interview():
    records = [
        _rec("Q1", 100, "a"),
        _rec("Q1", 300, "b"),
        _rec("Q1", 200, "c"),
        _rec("Q2", 50, "current"),
        _rec("", 10, "d"),
        _rec("Q3", None, "e"),
        _rec("Q3", 5, "f"),
    ]

    history = build_question_history(records, exclude_interview_id="current")

    assert set(history) == {"Q1", "Q3"}
    assert history["Q1"].interview_id == "b"
    assert history["Q3"].interview_id == "f"


def test_from_bank_result_carries_question():
    result = select_next(["Only question in the bank"], {})

    assert result == FromBank("Only question in the bank", SelectionTier.NEVER_USED)


class _ListHistoryStore:
    """Any object with records_for() can feed the selector."""

    def __init__(self, records):
        self.records = records
        self.queries = []

    def records_for(self, user_id, round, difficulty, *, exclude_interview_id=None):
        self.queries.append((user_id, round, difficulty, exclude_interview_id))
        return list(self.records)


def test_load_question_history_reads_through_any_history_store():
    store = _ListHistoryStore(
        [
            _rec("Q1", "2024-05-01T10:00:00Z", interview_id="old"),
            _rec("Q1", "2024-05-03T10:00:00Z", interview_id="new"),
            _rec("Q2", 5, interview_id="current"),
        ]
    )

    history = load_question_history(
        store, "u1", Round.RCA, Difficulty.MEDIUM, exclude_interview_id="current"
    )

    assert store.queries == [("u1", Round.RCA, Difficulty.MEDIUM, "current")]
    assert set(history) == {"Q1"}
    assert history["Q1"].interview_id == "new"
