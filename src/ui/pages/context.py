from __future__ import annotations

from dataclasses import dataclass

from src.config import Settings
from src.data.store import DataStore
from src.services.ai_analysis import AiAnalysisService


@dataclass
class PageContext:
    store: DataStore
    settings: Settings
    ai_service: AiAnalysisService
