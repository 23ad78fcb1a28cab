"""ConversationController — single dispatch point for user actions; owns the ChatSession."""

from __future__ import annotations

import logging

from persona_chat.l1_entities.errors import ChatClientError, ValidationError
from persona_chat.l1_entities.session import ChatSession
from persona_chat.l1_entities.settings import CharacterProfile, ConnectionSettings
from persona_chat.l2_use_cases.fetch_models_use_case import FetchModelsUseCase
from persona_chat.l2_use_cases.ports.chat_api import ChatApi
from persona_chat.l2_use_cases.ports.chat_view import ChatView
from persona_chat.l2_use_cases.send_message_use_case import SendMessageUseCase, check_ready
from persona_chat.l2_use_cases.settings_use_case import SettingsRepository
from persona_chat.l3_interface_adapters.controllers.actions import (
    Action,
    CloseCharacter,
    FetchModels,
    LoadSession,
    Navigate,
    OpenCharacter,
    SaveCharacter,
    SaveSettings,
    SelectModel,
    Send,
)
from persona_chat.l3_interface_adapters.controllers.view_controller import ViewController

log = logging.getLogger('pchat.controller')


class ConversationController:
    """Central orchestrator bridging use cases to the UI.

    Only this class mutates the session. Replies are applied only if the
    character has not changed since the request was sent.
    """

    def __init__(
        self,
        chat_api: ChatApi,
        repository: SettingsRepository,
        view: ChatView,
        session: ChatSession | None = None,
    ) -> None:
        self._repository = repository
        self._view = view
        self._send_uc = SendMessageUseCase(chat_api)
        self._fetch_uc = FetchModelsUseCase(chat_api)

        self.session = session or ChatSession()
        self.views = ViewController(view)
        self.pending_requests = 0

    async def dispatch(self, action: Action) -> None:
        if isinstance(action, Send):
            await self.send(action.text)
        elif isinstance(action, FetchModels):
            await self.fetch_models(action.api_url, action.api_key)
        elif isinstance(action, SaveSettings):
            self.save_settings(action.api_url, action.api_key)
        elif isinstance(action, SaveCharacter):
            self.save_character(action.name, action.prompt)
        elif isinstance(action, SelectModel):
            self.session.select_model(action.model)
        elif isinstance(action, Navigate):
            self.views.switch_page(action.page_id)
        elif isinstance(action, OpenCharacter):
            self.views.open_modal()
        elif isinstance(action, CloseCharacter):
            self.views.close_modal()
        elif isinstance(action, LoadSession):
            self.load()
        else:
            raise TypeError(f'Unknown action: {action!r}')

    def load(self) -> None:
        settings = self._repository.load_settings()
        if settings is not None:
            self.session.settings = settings
            self._view.show_settings(settings)
        character = self._repository.load_character()
        if character is not None:
            self.session.character = character
            self._view.show_character(character)
        log.info(
            'Session loaded (settings=%s, character=%r)',
            'yes' if settings is not None else 'no',
            self.session.character.name,
        )

    def save_settings(self, api_url: str, api_key: str) -> None:
        settings = ConnectionSettings(api_url=api_url, api_key=api_key)
        self._repository.save_settings(settings)
        self.session.settings = settings
        self._view.alert('Settings saved.')

    def save_character(self, name: str, prompt: str) -> None:
        character = CharacterProfile(name=name, prompt=prompt)
        self._repository.save_character(character)
        self.session.replace_character(character)
        self._view.show_character(character)
        self.views.close_modal()
        self._view.clear_transcript()
        self._view.alert('Character saved.')
        log.info('Character %r saved; conversation cleared', character.name)

    async def fetch_models(self, api_url: str, api_key: str) -> None:
        settings = ConnectionSettings(api_url=api_url, api_key=api_key)
        try:
            models = await self._fetch_uc.execute(settings)
        except ChatClientError as e:
            log.error('Fetching models failed: %s', e)
            self._view.alert(f'Fetching models failed: {e}')
            return
        self.session.replace_models(models)
        self._view.show_models(self.session.models, self.session.selected_model)
        self._view.alert(f'Fetched {len(models)} models.')

    async def send(self, text: str) -> None:
        text = text.strip()
        if not text:
            return
        try:
            check_ready(self.session)
        except ValidationError as e:
            self._view.alert(str(e))
            return

        self._view.render_message(text, 'user')
        self._view.clear_input()

        epoch = self.session.character_epoch
        self.pending_requests += 1
        try:
            reply = await self._send_uc.execute(self.session, text)
        except ChatClientError as e:
            log.error('Chat request failed: %s', e)
            if epoch == self.session.character_epoch:
                self._view.render_message(f'Error: {e}', 'error')
            return
        finally:
            self.pending_requests -= 1

        if epoch != self.session.character_epoch:
            log.info('Discarding reply for a replaced character')
            return
        self._view.render_message(reply, 'assistant')
        self.session.append_turn(text, reply)
