# tests/test_ai_analysis.py

from __future__ import annotations

import dataclasses
import json

import pytest

from src.config import Settings
from src.data.seed import demo_snapshot
from src.services import ai_analysis
from src.services.ai_analysis import (
    COMMUNICATION_ERROR_MESSAGE,
    SYSTEM_INSTRUCTION,
    AiAnalysisService,
    AiServiceError,
)
from tests.fakes import FakeChatClient


def test_analyze_returns_stripped_text_from_single_call(settings: Settings) -> None:
    client = FakeChatClient(text="\n  **3** tarefas pendentes.  \n")
    service = AiAnalysisService(settings, client=client)

    answer = service.analyze("Quantas tarefas pendentes?", demo_snapshot())

    assert answer == "**3** tarefas pendentes."
    assert len(client.calls) == 1
    assert client.calls[0]["model"] == "test-model"
    assert "stream" not in client.calls[0]


def test_prompt_has_system_instruction_then_question_then_json(settings: Settings) -> None:
    client = FakeChatClient()
    snapshot = demo_snapshot()

    AiAnalysisService(settings, client=client).analyze("  Quem tem mais horas?  ", snapshot)

    system, user = client.calls[0]["messages"]
    assert system == {"role": "system", "content": SYSTEM_INSTRUCTION}
    assert user["role"] == "user"
    question_part, data_part = user["content"]
    assert question_part["text"].endswith("\nQuem tem mais horas?")
    payload = json.loads(data_part["text"].split("(JSON):**\n", 1)[1])
    assert payload == snapshot.to_payload()


def test_network_failure_raises_generic_error_without_retry(settings: Settings) -> None:
    failure = ConnectionError("connection reset")
    client = FakeChatClient(error=failure)

    with pytest.raises(AiServiceError) as excinfo:
        AiAnalysisService(settings, client=client).analyze("Resumo?", demo_snapshot())

    assert str(excinfo.value) == COMMUNICATION_ERROR_MESSAGE
    assert excinfo.value.__cause__ is failure
    assert len(client.calls) == 1


@pytest.mark.parametrize("text", ["", "   \n", None])
def test_empty_response_raises_same_error_class(settings: Settings, text) -> None:
    client = FakeChatClient(text=text)

    with pytest.raises(AiServiceError) as excinfo:
        AiAnalysisService(settings, client=client).analyze("Resumo?", demo_snapshot())

    assert str(excinfo.value) == COMMUNICATION_ERROR_MESSAGE
    assert len(client.calls) == 1


def test_response_without_choices_is_an_error(settings: Settings) -> None:
    client = FakeChatClient(choices=False)
    with pytest.raises(AiServiceError):
        AiAnalysisService(settings, client=client).analyze("Resumo?", demo_snapshot())


def test_blank_question_is_rejected_before_any_call(settings: Settings) -> None:
    client = FakeChatClient()
    with pytest.raises(ValueError):
        AiAnalysisService(settings, client=client).analyze("   ", demo_snapshot())
    assert client.calls == []


def test_missing_api_key_raises_service_error(settings: Settings, monkeypatch) -> None:
    def _unexpected(**kwargs):
        raise AssertionError("client must not be built without a key")

    monkeypatch.setattr(ai_analysis, "OpenAI", _unexpected)
    service = AiAnalysisService(dataclasses.replace(settings, ai_api_key=None))

    with pytest.raises(AiServiceError):
        service.analyze("Resumo?", demo_snapshot())


def test_client_gets_explicit_timeout_and_retry_policy(settings: Settings, monkeypatch) -> None:
    built = {}
    fake = FakeChatClient(text="ok")

    def _factory(**kwargs):
        built.update(kwargs)
        return fake

    monkeypatch.setattr(ai_analysis, "OpenAI", _factory)
    service = AiAnalysisService(settings)

    assert service.analyze("Resumo?", demo_snapshot()) == "ok"
    service.analyze("De novo?", demo_snapshot())

    assert built == {
        "api_key": "test-key",
        "base_url": "http://localhost:9/v1/",
        "timeout": 5.0,
        "max_retries": 0,
    }
    assert len(fake.calls) == 2
