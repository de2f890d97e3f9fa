# tests/fakes.py

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List, Optional


class FakeChatClient:
    """
    Stand-in for the OpenAI client used by the analysis service.

    - Records every chat.completions.create call for assertions
    - Returns ``text`` as the single choice, or raises ``error``
    """

    def __init__(self, text: Optional[str] = "ok", error: Optional[Exception] = None, choices: bool = True) -> None:
        self.text = text
        self.error = error
        self.choices = choices
        self.calls: List[Dict[str, Any]] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if not self.choices:
            return SimpleNamespace(choices=[])
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.text))])
