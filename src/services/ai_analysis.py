"""
Question answering over the dashboard data through a generative-text API.

The request goes to an OpenAI-compatible chat completions endpoint (Gemini by
default). One call per question: the client is built with the configured
timeout and retry count, and this module never loops on failure.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, List, Optional

from openai import OpenAI

from src.config import Settings
from src.data.models import DataSnapshot

logger = logging.getLogger(__name__)

COMMUNICATION_ERROR_MESSAGE = (
    "Falha ao se comunicar com o serviço de IA. Tente novamente em instantes."
)
MISSING_KEY_MESSAGE = (
    "Serviço de IA não configurado: defina INFOCO_AI_API_KEY (ou GEMINI_API_KEY) no .env."
)

SYSTEM_INSTRUCTION = """Você é um assistente de análise de dados do sistema de gestão Infoco.
Analise os dados em JSON enviados junto com a pergunta e responda de forma clara, concisa e útil.
Os dados têm três listas:
- 'employees': funcionários da empresa.
- 'tasks': tarefas atribuídas aos funcionários (employeeId), com data, status e horas.
- 'financeData': valores pagos e pendentes por município.
Use markdown na resposta (**negrito** para termos importantes, *itálico* e listas com hífens).
Responda apenas com base nos dados fornecidos. Se a informação não estiver disponível, diga isso educadamente. Não invente informações."""


class AiServiceError(RuntimeError):
    """The only error surfaced to the UI by the analysis service."""


def build_messages(question: str, context: DataSnapshot) -> List[Dict[str, Any]]:
    data_json = json.dumps(context.to_payload(), ensure_ascii=False, indent=2)
    return [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": f"**PERGUNTA DO USUÁRIO:**\n{question}"},
                {"type": "text", "text": f"\n\n---\n\n**DADOS PARA ANÁLISE (JSON):**\n{data_json}"},
            ],
        },
    ]


def _response_text(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None) if message is not None else None
    return content.strip() if isinstance(content, str) else ""


class AiAnalysisService:
    def __init__(self, settings: Settings, client: Optional[Any] = None) -> None:
        self.settings = settings
        self._client = client

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        api_key = self.settings.ai_api_key
        if not api_key:
            raise AiServiceError(MISSING_KEY_MESSAGE)
        self._client = OpenAI(
            api_key=api_key,
            base_url=self.settings.ai_base_url,
            timeout=self.settings.ai_timeout_seconds,
            max_retries=self.settings.ai_max_retries,
        )
        return self._client

    def analyze(self, question: str, context: DataSnapshot) -> str:
        question = (question or "").strip()
        if not question:
            raise ValueError("A pergunta não pode estar vazia.")

        client = self._get_client()
        messages = build_messages(question, context)

        logger.info(
            "AI analysis: model=%s employees=%d tasks=%d municipalities=%d",
            self.settings.ai_model,
            len(context.employees),
            len(context.tasks),
            len(context.finance_data),
        )
        t0 = time.monotonic()
        try:
            response = client.chat.completions.create(
                model=self.settings.ai_model,
                messages=messages,
            )
        except Exception as exc:
            logger.exception("AI analysis call failed after %.2fs", time.monotonic() - t0)
            raise AiServiceError(COMMUNICATION_ERROR_MESSAGE) from exc

        text = _response_text(response)
        if not text:
            logger.error("AI analysis returned an empty response (model=%s)", self.settings.ai_model)
            raise AiServiceError(COMMUNICATION_ERROR_MESSAGE)

        logger.info("AI analysis answered in %.2fs (%d chars)", time.monotonic() - t0, len(text))
        return text
