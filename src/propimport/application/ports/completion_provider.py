"""Completion provider port - OpenAI compatible chat API."""

from typing import Protocol


class CompletionProvider(Protocol):
    """Port for schema-constrained JSON completions."""

    async def complete_json(self, instruction: str, content: str) -> str | None: ...
