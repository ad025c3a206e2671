from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_APP_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_RUBRICS_PATH = _APP_ROOT / "data" / "rubrics.json"


def ensure_env_loaded() -> None:
    # .env at the repo root wins over one next to app/, never over the real env
    for env_path in (_APP_ROOT.parent / ".env", _APP_ROOT / ".env"):
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            return
    load_dotenv(override=False)


@dataclass(frozen=True)
class Settings:
    openai_api_key: str
    model: str
    generation_model: str
    judge_model: str
    rubrics_path: Path
    log_level: str


def load_settings() -> Settings:
    ensure_env_loaded()
    return Settings(
        openai_api_key=str(os.getenv("OPENAI_API_KEY") or "").strip(),
        model=str(os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip(),
        generation_model=str(os.getenv("GENERATION_MODEL") or "gpt-4o").strip(),
        judge_model=str(os.getenv("JUDGE_MODEL") or "gpt-4o").strip(),
        rubrics_path=Path(os.getenv("RUBRICS_PATH") or DEFAULT_RUBRICS_PATH),
        log_level=str(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
