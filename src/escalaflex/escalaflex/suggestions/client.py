from __future__ import annotations

from typing import Optional, Protocol

import openai

from .model import SuggestionRequest, SuggestionResult
from .prompt import build_messages


class SuggestionClient(Protocol):
    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        raise NotImplementedError


class OpenAISuggestionClient(SuggestionClient):
    """Single request/response call to the OpenAI chat API, no retries."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        client: Optional[openai.AsyncOpenAI] = None,
    ):
        self._model = model
        self._client = client or openai.AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        completion = await self._client.chat.completions.create(
            model=self._model,
            response_format={"type": "json_object"},
            messages=build_messages(request),
        )
        content = completion.choices[0].message.content or "{}"
        return SuggestionResult.model_validate_json(content)
