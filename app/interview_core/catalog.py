"""
Static round catalog: display labels, the rubric categories a judge must
return per round, and the default per-round weight tables.
"""

from __future__ import annotations

from .models import Round

ROUND_LABELS: dict[Round, str] = {
    Round.PRODUCT_IMPROVEMENT: "Product Improvement",
    Round.PRODUCT_DESIGN: "Product Design",
    Round.RCA: "Root Cause Analysis",
    Round.METRICS: "Metrics",
    Round.GUESSTIMATES: "Guesstimates",
    Round.PRODUCT_STRATEGY: "Product Strategy",
}

# Question style the fallback generator must follow.
ROUND_STYLES: dict[Round, str] = {
    Round.PRODUCT_IMPROVEMENT: '"How would you improve X?" or "Redesign Y for users."',
    Round.PRODUCT_DESIGN: '"Design a X for Y audience."',
    Round.RCA: '"X metric dropped by Y%."',
    Round.METRICS: '"How would you measure the success of X?"',
    Round.GUESSTIMATES: '"Estimate the number of X in Y."',
    Round.PRODUCT_STRATEGY: '"Company X faces Y. What should their strategy be?"',
}

EXPECTED_CATEGORIES: dict[Round, tuple[str, ...]] = {
    Round.RCA: (
        "Problem Framing",
        "MECE Thinking",
        "Structure Thinking",
        "Prioritization & Root Cause",
        "Solution Quality",
    ),
    Round.PRODUCT_IMPROVEMENT: (
        "Product Insight",
        "User Empathy",
        "Problem Framing",
        "Solution Creativity",
        "Design Judgment",
    ),
    Round.PRODUCT_STRATEGY: (
        "Strategic Framing",
        "Systems Thinking",
        "First-Principles Reasoning",
        "Strategic Options",
        "Strategic Choice & Prioritization",
        "Long-Term Vision",
        "Risks & Trade-offs",
        "Metrics & Success Criteria",
        "Communication & Leadership",
    ),
}

# Used for rounds that declare no category set of their own.
GENERIC_CATEGORIES: tuple[str, ...] = (
    "Problem Framing",
    "MECE Thinking",
    "Structure Thinking",
    "Prioritization",
    "Root Cause Identification",
    "Solution Quality",
    "Communication",
)

DEFAULT_WEIGHT_TABLES: dict[Round, dict[str, float]] = {
    Round.PRODUCT_STRATEGY: {
        "Strategic Framing": 0.15,
        "Systems Thinking": 0.15,
        "First-Principles Reasoning": 0.10,
        "Strategic Options": 0.10,
        "Strategic Choice & Prioritization": 0.20,
        "Long-Term Vision": 0.10,
        "Risks & Trade-offs": 0.10,
        "Metrics & Success Criteria": 0.05,
        "Communication & Leadership": 0.05,
    },
}


def expected_categories(round: Round) -> tuple[str, ...]:
    return EXPECTED_CATEGORIES.get(round, GENERIC_CATEGORIES)


def round_label(round: Round) -> str:
    return ROUND_LABELS.get(round, round.value)
