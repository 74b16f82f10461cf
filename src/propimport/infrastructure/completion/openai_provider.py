"""OpenAI-compatible completion provider."""

import openai
from openai import AsyncOpenAI

from propimport.domain.exceptions import CompletionError


class OpenAICompletionProvider:
    """JSON-mode chat completions using OpenAI-compatible API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model

    async def complete_json(self, instruction: str, content: str) -> str | None:
        """Return raw message content of a json_object completion."""
        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": instruction},
                    {"role": "user", "content": content},
                ],
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            raise CompletionError(f"Completion request failed: {e}") from e
        if not completion.choices:
            return None
        return completion.choices[0].message.content
