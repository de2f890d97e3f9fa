"""
Application-wide configuration constants and the environment-backed settings layer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

ENV_PREFIX = "INFOCO"

DEFAULT_AI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_AI_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("dashboard", "Dashboard"),
    TabConfig("employees", "Funcionários"),
    TabConfig("tasks", "Tarefas"),
    TabConfig("municipalities", "Municípios"),
    TabConfig("ai_analysis", "Análise com IA"),
]


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: Optional[str] = None) -> Optional[str]:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v.strip()
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    log_dir: Optional[Path]

    seed_demo_data: bool

    ai_api_key: Optional[str]
    ai_base_url: str
    ai_model: str
    ai_timeout_seconds: float
    ai_max_retries: int

    @staticmethod
    def from_env() -> "Settings":
        timeout = _env_float(_k("AI_TIMEOUT_SECONDS"), 60.0)
        if timeout <= 0:
            timeout = 60.0
        max_retries = max(_env_int(_k("AI_MAX_RETRIES"), 0), 0)

        return Settings(
            app_name=_env(_k("APP_NAME"), "Infoco Gestão"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            log_dir=_env_path(_k("LOG_DIR")),
            seed_demo_data=_env_bool(_k("SEED_DEMO_DATA"), True),
            ai_api_key=_first_env(_k("AI_API_KEY"), "GEMINI_API_KEY", "API_KEY"),
            ai_base_url=_env(_k("AI_BASE_URL"), DEFAULT_AI_BASE_URL).strip() or DEFAULT_AI_BASE_URL,
            ai_model=_env(_k("AI_MODEL"), DEFAULT_AI_MODEL).strip() or DEFAULT_AI_MODEL,
            ai_timeout_seconds=timeout,
            ai_max_retries=max_retries,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
