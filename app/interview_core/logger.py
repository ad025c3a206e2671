"""
Structured event log for the interview core: one JSON object per line on the
"interview_core.events" logger. Questions, candidate answers, interviewer
replies and rubric text are logged by size only.
"""

import json
import logging
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger("interview_core.events")

# Free text written by candidates, the LLM or rubric authors.
FREE_TEXT_FIELDS = frozenset(
    {
        "question",
        "question_text",
        "questions",
        "avoid",
        "answer",
        "reply",
        "transcript",
        "summary",
        "rubric",
        "prompt",
        "text",
    }
)


def _size_only(value: Any) -> dict:
    if isinstance(value, (list, tuple)):
        return {"redacted": True, "items": len(value)}
    return {"redacted": True, "length": len(str(value or ""))}


def _loggable(key: str, value: Any) -> Any:
    if key.lower() in FREE_TEXT_FIELDS:
        return _size_only(value)
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(k): _loggable(str(k), v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_loggable(key, item) for item in value]
    return str(value)


def log_event(component: str, event: str, interview_id: str, **fields) -> None:
    payload = {
        "component": component or "interview_core",
        "event": event or "unknown",
        "interview_id": interview_id or "",
    }
    payload.update({str(k): _loggable(str(k), v) for k, v in fields.items()})
    logger.info(json.dumps(payload, ensure_ascii=False, default=str))
