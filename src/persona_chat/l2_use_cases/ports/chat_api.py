"""Port: OpenAI-compatible chat API."""

from __future__ import annotations

from typing import Protocol

from persona_chat.l1_entities.chat_message import ChatMessage
from persona_chat.l1_entities.settings import ConnectionSettings


class ChatApi(Protocol):
    """Abstract remote API. Raises ChatClientError subclasses, never SDK types."""

    async def list_models(self, settings: ConnectionSettings) -> list[str]:
        """Return model identifiers in server order."""
        ...

    async def chat_completion(
        self,
        settings: ConnectionSettings,
        model: str,
        system_prompt: str,
        history: list[ChatMessage],
        new_message: str,
    ) -> str:
        """Send one non-streaming completion request. Returns the reply text."""
        ...
