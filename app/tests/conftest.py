import random
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


class FakeLLM:
    """LLMClient stand-in: replays canned replies and records every call."""

    def __init__(self, *replies: str):
        self.replies = list(replies)
        self.calls = []

    def chat(self, messages, settings, system=None):
        self.calls.append({"messages": messages, "settings": settings, "system": system})
        text = self.replies.pop(0) if self.replies else ""
        return text, {"model": settings.model, "tokens_in": 10, "tokens_out": 5}


@pytest.fixture
def fake_llm():
    return FakeLLM


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


RUBRIC_TEXT = """# Product Improvement — Easy

## Assessment Dimensions
- **Product Insight**: (0–5) Understanding the product.

Practice Questions:
- How would you improve Instagram's image upload experience?
- How would you improve Google Maps offline?
-   
- Too short
- How would you improve Spotify's playlist creation?

## Notes
- This bullet is outside the practice block.
"""


@pytest.fixture
def rubric_text() -> str:
    return RUBRIC_TEXT
