"""Use case: validate the session and run one chat turn."""

from __future__ import annotations

from persona_chat.l1_entities.errors import ValidationError
from persona_chat.l1_entities.session import ChatSession
from persona_chat.l2_use_cases.ports.chat_api import ChatApi

MISSING_CONNECTION = 'Configure the API base URL and key in Settings and select a model first.'
MISSING_CHARACTER = 'Set up a character first (Character button, top right).'


def check_ready(session: ChatSession) -> None:
    """Raise ValidationError unless a request may be sent for *session*."""
    if not session.settings.is_complete or not session.selected_model:
        raise ValidationError(MISSING_CONNECTION)
    if not session.character.prompt:
        raise ValidationError(MISSING_CHARACTER)


class SendMessageUseCase:
    """Runs a single chat completion against the session's history. Does not mutate the session."""

    def __init__(self, chat_api: ChatApi) -> None:
        self._api = chat_api

    async def execute(self, session: ChatSession, text: str) -> str:
        check_ready(session)
        return await self._api.chat_completion(
            settings=session.settings,
            model=session.selected_model,
            system_prompt=session.character.prompt,
            history=list(session.history),
            new_message=text,
        )
