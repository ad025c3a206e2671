"""
Chat-completions adapter used for the two LLM calls around the core:
fallback question generation and transcript evaluation. Transient OpenAI
errors are retried with backoff; the reply comes back with token usage.

Testing: inject a fake SDK object via `client=`.
"""

from __future__ import annotations
import logging
import time
from typing import Optional

from openai import APIError, APITimeoutError, OpenAI, RateLimitError

from ..models import LLMSettings

logger = logging.getLogger("interview_core.llm_openai")

RETRY_DELAYS = (0.5, 1.0, 2.0, 4.0)


def _usage_of(response) -> dict[str, int]:
    usage = getattr(response, "usage", None)
    return {
        "tokens_in": int(getattr(usage, "prompt_tokens", 0) or 0),
        "tokens_out": int(getattr(usage, "completion_tokens", 0) or 0),
    }


class OpenAILLMClient:
    def __init__(self, api_key: str, *, client: Optional[OpenAI] = None):
        self.api_key = api_key
        if not self.api_key:
            raise RuntimeError("Missing OPENAI_API_KEY")
        if client is not None:
            self.client = client
            return
        try:
            self.client = OpenAI(api_key=self.api_key)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize OpenAI client: {e}") from e

    def _with_retries(self, fn, *args, **kwargs):
        for delay in RETRY_DELAYS:
            try:
                return fn(*args, **kwargs)
            except (RateLimitError, APITimeoutError, APIError) as e:
                logger.warning("OpenAI call failed (%s); retrying in %.1fs", type(e).__name__, delay)
                time.sleep(delay)
        return fn(*args, **kwargs)

    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]:
        payload = []
        if system:
            payload.append({"role": "system", "content": system})
        payload.extend(messages)

        kwargs = dict(
            model=settings.model,
            messages=payload,
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
            frequency_penalty=settings.frequency_penalty,
            presence_penalty=settings.presence_penalty,
        )
        if settings.response_format:
            kwargs["response_format"] = settings.response_format

        response = self._with_retries(self.client.chat.completions.create, **kwargs)
        reply = response.choices[0].message.content or ""
        return reply, {"model": response.model, **_usage_of(response), "raw": response}
