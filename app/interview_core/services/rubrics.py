"""
Purpose: Load rubric documents (assessment guidance + practice questions)
per (round, difficulty), plus optional per-round weight tables.

Sources:
- one JSON document: {"rubrics": {ROUND: {DIFFICULTY: {title, content}}},
  "weights": {ROUND: {category: weight}}}
- a directory of <round>_<difficulty>.md / .txt / .pdf files

Bad entries are skipped (logged), never raised, so one broken rubric does not
take the whole library down.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..models import Difficulty, Round, Rubric

logger = logging.getLogger("interview_core.rubrics")

DEFAULT_INTERVIEW_RUBRIC = "Conduct a professional product management interview."
DEFAULT_EVALUATION_RUBRIC = "Evaluate based on standard PM interview criteria."

_TEXT_SUFFIXES = {".md", ".txt"}


def extract_pdf_text(file_like) -> str:
    try:
        reader = PdfReader(file_like)
        parts = []
        for page in reader.pages:
            txt = page.extract_text() or ""
            if txt.strip():
                parts.append(txt)
        return "\n\n".join(parts).strip()
    except (PdfReadError, OSError, ValueError) as e:
        logger.warning("Could not read PDF rubric %s: %s", file_like, e)
        return ""


def _parse_bucket(round_key: str, difficulty_key: str):
    try:
        return Round.from_external(round_key), Difficulty.parse(difficulty_key)
    except ValueError as e:
        logger.warning("Skipping rubric %s/%s: %s", round_key, difficulty_key, e)
        return None


def _parse_weights(raw: Any) -> dict[str, float]:
    out: dict[str, float] = {}
    if not isinstance(raw, Mapping):
        return out
    for category, weight in raw.items():
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            continue
        if weight < 0:
            continue
        out[str(category)] = float(weight)
    return out


class RubricLibrary:
    def __init__(
        self,
        rubrics: Iterable[Rubric] = (),
        weight_tables: Optional[Mapping[Round, Mapping[str, float]]] = None,
    ) -> None:
        self._rubrics: dict[tuple[Round, Difficulty], Rubric] = {}
        for r in rubrics:
            self.add(r)
        self.weight_tables: dict[Round, dict[str, float]] = {
            k: dict(v) for k, v in (weight_tables or {}).items()
        }

    def add(self, rubric: Rubric) -> None:
        self._rubrics[(rubric.round, rubric.difficulty)] = rubric

    def get(self, round: Round, difficulty: Difficulty) -> Optional[Rubric]:
        return self._rubrics.get((round, difficulty))

    def rubrics(self) -> list[Rubric]:
        return list(self._rubrics.values())

    def content_for(
        self,
        round: Round,
        difficulty: Difficulty,
        default: str = DEFAULT_INTERVIEW_RUBRIC,
    ) -> str:
        rubric = self.get(round, difficulty)
        if rubric is None:
            logger.warning(
                "No rubric found for %s - %s, using default",
                round.value,
                difficulty.value,
            )
            return default
        return rubric.content

    def evaluation_content_for(self, round: Round, difficulty: Difficulty) -> str:
        """Rubric used when judging; falls back to RCA/MEDIUM, then a generic line."""
        rubric = self.get(round, difficulty) or self.get(Round.RCA, Difficulty.MEDIUM)
        return rubric.content if rubric else DEFAULT_EVALUATION_RUBRIC

    def __len__(self) -> int:
        return len(self._rubrics)

    @classmethod
    def from_json(cls, source: Union[str, Path, Mapping[str, Any]]) -> "RubricLibrary":
        if isinstance(source, Mapping):
            data = source
        else:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)

        library = cls()
        for round_key, by_difficulty in (data.get("rubrics") or {}).items():
            if not isinstance(by_difficulty, Mapping):
                continue
            for difficulty_key, entry in by_difficulty.items():
                bucket = _parse_bucket(round_key, difficulty_key)
                if bucket is None or not isinstance(entry, Mapping):
                    continue
                library.add(
                    Rubric(
                        round=bucket[0],
                        difficulty=bucket[1],
                        title=str(entry.get("title") or ""),
                        content=str(entry.get("content") or ""),
                    )
                )

        for round_key, table in (data.get("weights") or {}).items():
            try:
                round = Round.from_external(round_key)
            except ValueError as e:
                logger.warning("Skipping weight table: %s", e)
                continue
            weights = _parse_weights(table)
            if weights:
                library.weight_tables[round] = weights

        logger.info("Loaded %d rubrics from JSON.", len(library))
        return library

    @classmethod
    def from_directory(cls, path: Union[str, Path]) -> "RubricLibrary":
        library = cls()
        for file in sorted(Path(path).iterdir()):
            suffix = file.suffix.lower()
            if suffix not in _TEXT_SUFFIXES and suffix != ".pdf":
                continue
            round_key, sep, difficulty_key = file.stem.rpartition("_")
            if not sep:
                logger.warning("Skipping rubric file without bucket name: %s", file.name)
                continue
            bucket = _parse_bucket(round_key, difficulty_key)
            if bucket is None:
                continue
            if suffix == ".pdf":
                content = extract_pdf_text(str(file))
            else:
                try:
                    content = file.read_text(encoding="utf-8")
                except (UnicodeDecodeError, OSError) as e:
                    logger.warning("Skipping unreadable rubric file %s: %s", file.name, e)
                    continue
            library.add(
                Rubric(round=bucket[0], difficulty=bucket[1], title=file.stem, content=content)
            )
        logger.info("Loaded %d rubrics from %s.", len(library), path)
        return library
