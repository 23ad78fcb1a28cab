"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from persona_chat.l1_entities.chat_message import ChatMessage
from persona_chat.l1_entities.errors import ValidationError
from persona_chat.l1_entities.session import ChatSession
from persona_chat.l1_entities.settings import CharacterProfile, ConnectionSettings
from persona_chat.l2_use_cases.settings_use_case import SettingsRepository
from persona_chat.l3_interface_adapters.controllers.conversation_controller import ConversationController

# --- Protocol-conforming Fakes ---


class FakeChatApi:
    """Fake chat API for L2/L3 tests. Set ``gate`` to hold replies until it is set."""

    def __init__(self, reply: str = 'Fake reply', models: list[str] | None = None):
        self._reply = reply
        self._models = models if models is not None else ['gpt-x', 'gpt-y']
        self._error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.list_models_calls: list[ConnectionSettings] = []
        self.chat_calls: list[dict] = []

    async def list_models(self, settings: ConnectionSettings) -> list[str]:
        self.list_models_calls.append(settings)
        if not settings.is_complete:
            raise ValidationError('API base URL and API key are required.')
        if self._error is not None:
            raise self._error
        return list(self._models)

    async def chat_completion(
        self,
        settings: ConnectionSettings,
        model: str,
        system_prompt: str,
        history: list[ChatMessage],
        new_message: str,
    ) -> str:
        self.chat_calls.append(
            {
                'settings': settings,
                'model': model,
                'system_prompt': system_prompt,
                'history': list(history),
                'new_message': new_message,
            }
        )
        if self.gate is not None:
            await self.gate.wait()
        if self._error is not None:
            raise self._error
        return self._reply

    def set_reply(self, reply: str) -> None:
        self._reply = reply

    def set_error(self, error: Exception | None) -> None:
        self._error = error


class FakeStore:
    """In-memory KeyValueStore."""

    def __init__(self, records: dict[str, dict] | None = None):
        self.records: dict[str, dict] = dict(records or {})
        self.save_calls: list[tuple[str, dict]] = []

    def load(self, key: str) -> dict | None:
        return self.records.get(key)

    def save(self, key: str, value: dict) -> None:
        self.save_calls.append((key, value))
        self.records[key] = dict(value)


class FakeChatView:
    """Records every ChatView call."""

    def __init__(self):
        self.entries: list[tuple[str, str]] = []
        self.alerts: list[str] = []
        self.models: list[str] = []
        self.selected: str | None = None
        self.settings: ConnectionSettings | None = None
        self.character: CharacterProfile | None = None
        self.page: str | None = None
        self.modal_visible = False
        self.modal_stuck = False
        self.input_cleared = 0
        self.transcript_cleared = 0

    def render_message(self, text: str, sender: str) -> None:
        self.entries.append((sender, text))

    def clear_transcript(self) -> None:
        self.entries.clear()
        self.transcript_cleared += 1

    def clear_input(self) -> None:
        self.input_cleared += 1

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def show_models(self, models: list[str], selected: str | None) -> None:
        self.models = list(models)
        self.selected = selected

    def show_settings(self, settings: ConnectionSettings) -> None:
        self.settings = settings

    def show_character(self, character: CharacterProfile) -> None:
        self.character = character

    def show_page(self, page_id: str) -> None:
        self.page = page_id

    def show_modal(self, visible: bool) -> bool:
        if not visible and self.modal_stuck:
            return False
        self.modal_visible = visible
        return True


# --- Standard Fixtures ---


@pytest.fixture
def tmp_data_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'data'
    d.mkdir()
    return d


@pytest.fixture
def fake_api() -> FakeChatApi:
    return FakeChatApi()


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def fake_view() -> FakeChatView:
    return FakeChatView()


@pytest.fixture
def ready_session() -> ChatSession:
    """A session that satisfies every precondition for sending."""
    session = ChatSession(
        settings=ConnectionSettings(api_url='https://x/v1', api_key='k'),
        character=CharacterProfile(name='Bob', prompt='You are Bob'),
    )
    session.replace_models(['gpt-x'])
    return session


@pytest.fixture
def controller(fake_api, fake_store, fake_view, ready_session) -> ConversationController:
    return ConversationController(
        chat_api=fake_api,
        repository=SettingsRepository(fake_store),
        view=fake_view,
        session=ready_session,
    )
