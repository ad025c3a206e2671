"""Utilities for robustly extracting JSON (and typed fields) from LLM responses."""

from __future__ import annotations
import json
import math
import re
from typing import Any, Optional

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def _strip_code_fences(text: str) -> str:
    """Remove surrounding ```...``` fences (with or without 'json') if present."""
    t = text.strip()
    if t.startswith("```") and t.endswith("```"):
        t = re.sub(r"^```[A-Za-z0-9_-]*\s*", "", t, flags=re.DOTALL)
        t = re.sub(r"\s*```$", "", t, flags=re.DOTALL)
    return t.strip()


def extract_json(text: str) -> Any:
    """
    Parse the JSON object in an LLM reply.
    - Handles code fences and leading/trailing prose.
    - Returns {} when nothing parses.
    """
    if not text:
        return {}
    t = _strip_code_fences(text)

    try:
        return json.loads(t)
    except json.JSONDecodeError:
        pass

    m = _JSON_OBJECT.search(t)
    if not m:
        return {}
    try:
        return json.loads(m.group(0))
    except json.JSONDecodeError:
        return {}


def require_object(text: str, err: str = "Expected a JSON object.") -> dict:
    """Strict: must return an object, else raise."""
    data = extract_json(text)
    if not isinstance(data, dict) or not data:
        raise ValueError(err)
    return data


def finite_number(x: Any) -> Optional[float]:
    """float(x) for real numbers (bools excluded, NaN/inf rejected), else None."""
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return None
    value = float(x)
    return value if math.isfinite(value) else None


def to_str_list(x: Any) -> list[str]:
    """Convert None, str, or list[str] to list[str].
    Discard empty/whitespace-only strings.
    """
    if x is None:
        return []
    if isinstance(x, list):
        return [item.strip() for item in x if isinstance(item, str) and item.strip()]
    if isinstance(x, str):
        s = x.strip()
        return [s] if s else []
    return []
