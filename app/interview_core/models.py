"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- Round / Difficulty (closed enums + the external id mapping).
- AskRecord (one historical "question asked" fact) and the selection result.
- Judgement (parsed judge output) and Insights (what gets persisted).
- InterviewRecord (one interview, as the store keeps it).

Testing: Trivial; mostly types. Round/Difficulty parsing and instant_of
are the only behaviour here.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Union
from enum import Enum
from datetime import datetime, timezone


class Round(str, Enum):
    PRODUCT_IMPROVEMENT = "PRODUCT_IMPROVEMENT"
    PRODUCT_DESIGN = "PRODUCT_DESIGN"
    RCA = "RCA"
    METRICS = "METRICS"
    GUESSTIMATES = "GUESSTIMATES"
    PRODUCT_STRATEGY = "PRODUCT_STRATEGY"

    @classmethod
    def from_external(cls, value: str) -> "Round":
        """Map a frontend round id ('product-sense', 'rca', ...) or an
        internal name ('RCA') to a Round. Unmapped values raise ValueError."""
        key = (value or "").strip()
        if key.lower() in EXTERNAL_ROUND_IDS:
            return EXTERNAL_ROUND_IDS[key.lower()]
        try:
            return cls(key.upper())
        except ValueError:
            raise ValueError(f"Unknown round: {value!r}") from None


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None


EXTERNAL_ROUND_IDS: dict[str, Round] = {
    "product-sense": Round.PRODUCT_IMPROVEMENT,
    "technical": Round.PRODUCT_DESIGN,
    "rca": Round.RCA,
    "metrics": Round.METRICS,
    "guesstimates": Round.GUESSTIMATES,
    "strategy": Round.PRODUCT_STRATEGY,
}


class SelectionTier(str, Enum):
    NEVER_USED = "never_used"
    LEAST_RECENT = "least_recent"
    FIRST_IN_BANK = "first_in_bank"
    EXHAUSTED = "exhausted"
    GENERATED = "generated"


Instant = Union[datetime, int, float, str, None]


def instant_of(value: Any) -> float:
    """Epoch seconds for a 'comparable instant, possibly absent'.
    Absent or unparseable values are 0.0, i.e. they sort as oldest."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat only accepts a "Z" suffix from 3.11 on
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).timestamp()
        except ValueError:
            return 0.0
    return 0.0


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AskRecord:
    question: str
    user_id: str
    round: Round
    difficulty: Difficulty
    last_asked_at: Instant
    interview_id: str


QuestionHistory = dict[str, AskRecord]


@dataclass(frozen=True)
class FromBank:
    question: str
    tier: SelectionTier


@dataclass(frozen=True)
class Exhausted:
    tier: SelectionTier = SelectionTier.EXHAUSTED


SelectionResult = Union[FromBank, Exhausted]


@dataclass(frozen=True)
class Rubric:
    round: Round
    difficulty: Difficulty
    title: str
    content: str


@dataclass
class Judgement:
    raw_score: Optional[float]
    scores: dict[str, float] = field(default_factory=dict)
    summary: str = ""
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    actual_root_cause: str = ""
    rubric_breakdown: list[dict] = field(default_factory=list)


@dataclass
class Insights:
    score: int
    scores: dict[str, float] = field(default_factory=dict)
    summary: str = ""
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    actual_root_cause: str = ""
    rubric_breakdown: list[dict] = field(default_factory=list)


@dataclass
class InterviewRecord:
    interview_id: str
    user_id: str
    round: Round
    difficulty: Difficulty
    created_at: datetime = field(default_factory=utcnow)
    question_text: Optional[str] = None
    selection_tier: Optional[SelectionTier] = None
    insights: Optional[Insights] = None
    insights_generated_at: Optional[datetime] = None


@dataclass(frozen=True)
class RoundReadiness:
    round: Round
    score: int
    count: int


@dataclass
class ReadinessReport:
    overall: int
    sessions: int
    by_round: list[RoundReadiness] = field(default_factory=list)
    strengths: list[RoundReadiness] = field(default_factory=list)
    improvements: list[RoundReadiness] = field(default_factory=list)


@dataclass
class LLMSettings:
    model: str
    temperature: float = 0.7
    top_p: float = 1.0
    max_tokens: int = 512
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    response_format: Optional[dict] = None
