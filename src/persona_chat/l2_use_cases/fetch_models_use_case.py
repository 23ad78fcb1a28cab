"""Use case: fetch the model list for the connection form."""

from __future__ import annotations

from persona_chat.l1_entities.errors import ValidationError
from persona_chat.l1_entities.settings import ConnectionSettings
from persona_chat.l2_use_cases.ports.chat_api import ChatApi


class FetchModelsUseCase:
    """Lists models for the given (possibly unsaved) connection values."""

    def __init__(self, chat_api: ChatApi) -> None:
        self._api = chat_api

    async def execute(self, settings: ConnectionSettings) -> list[str]:
        """Returns model ids. Raises ChatClientError; ValidationError before any network call."""
        if not settings.is_complete:
            raise ValidationError('Enter the API base URL and API key first.')
        return await self._api.list_models(settings)
