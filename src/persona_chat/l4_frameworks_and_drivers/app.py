"""Textual App — thin TUI shell: compose, event → action translation, ChatView rendering."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, ContentSwitcher, Input, Label, Select, Static

from persona_chat.l1_entities.settings import CharacterProfile, ConnectionSettings
from persona_chat.l2_use_cases.ports.chat_api import ChatApi
from persona_chat.l2_use_cases.ports.key_value_store import KeyValueStore
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
from persona_chat.l3_interface_adapters.controllers.conversation_controller import ConversationController
from persona_chat.l3_interface_adapters.controllers.view_controller import CHAT_PAGE, SETTINGS_PAGE
from persona_chat.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from persona_chat.l4_frameworks_and_drivers.messages import CharacterCloseRequested, CharacterSaveRequested
from persona_chat.l4_frameworks_and_drivers.widgets.alert_modal import AlertModal
from persona_chat.l4_frameworks_and_drivers.widgets.character_modal import CharacterModal
from persona_chat.l4_frameworks_and_drivers.widgets.status_bar import StatusBar
from persona_chat.l4_frameworks_and_drivers.widgets.transcript_panel import TranscriptPanel

log = logging.getLogger('pchat.app')

_NAV_BUTTONS = {'nav-chat': CHAT_PAGE, 'nav-settings': SETTINGS_PAGE}


class ChatApp(TextualApp):
    """Main TUI application. Implements the ChatView port for ConversationController."""

    CSS_PATH = 'app.tcss'
    TITLE = 'persona-chat'

    BINDINGS = [
        Binding('ctrl+q', 'quit_app', 'Quit', priority=True),
        Binding('f1', "navigate('chat-page')", 'Chat'),
        Binding('f2', "navigate('settings-page')", 'Settings'),
        Binding('f3', 'open_character', 'Character'),
    ]

    def __init__(
        self,
        chat_api: ChatApi,
        store: KeyValueStore,
        log_dir: Path | None = None,
        log_level: str = 'DEBUG',
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        if log_dir is not None:
            setup_file_logging(log_dir, log_level)

        self._controller = ConversationController(
            chat_api=chat_api,
            repository=SettingsRepository(store),
            view=self,
        )
        self._character = CharacterProfile()
        self._character_modal: CharacterModal | None = None

    @property
    def controller(self) -> ConversationController:
        return self._controller

    def compose(self) -> ComposeResult:
        with Horizontal(id='header'):
            yield Static(self._title_text(), id='title')
            yield Button('Character', id='character-settings-btn')
        with ContentSwitcher(initial=CHAT_PAGE, id='pages'):
            with Vertical(id=CHAT_PAGE):
                yield TranscriptPanel(id='chat-window')
                with Horizontal(id='input-row'):
                    yield Input(placeholder='Type a message…', id='message-input')
                    yield Button('Send', id='send-btn', variant='primary')
            with VerticalScroll(id=SETTINGS_PAGE):
                yield Label('API base URL')
                yield Input(placeholder='https://api.openai.com/v1', id='api-url-input')
                yield Label('API key')
                yield Input(password=True, placeholder='sk-…', id='api-key-input')
                yield Label('Model')
                yield Select([], prompt='Fetch models first', id='model-select')
                with Horizontal(id='settings-buttons'):
                    yield Button('Fetch Models', id='fetch-models-btn')
                    yield Button('Save', id='save-settings-btn', variant='primary')
        with Horizontal(id='nav'):
            yield Button('Chat', id='nav-chat', classes='active')
            yield Button('Settings', id='nav-settings')
        yield StatusBar(id='status-bar')

    def _title_text(self) -> str:
        if self._character.name:
            return f'persona-chat | {self._character.name}'
        return 'persona-chat'

    async def on_mount(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.keybinding_hints = r'\[F1] chat  \[F2] settings  \[F3] character  \[^Q] quit'
        await self._controller.dispatch(LoadSession())
        self.query_one('#message-input', Input).focus()
        self.set_interval(0.2, self._refresh_status_bar)

    def _refresh_status_bar(self) -> None:
        try:
            bar = self.query_one('#status-bar', StatusBar)
        except Exception:  # noqa: S110 -- TUI race guard; widget may not exist during shutdown  # pragma: no cover
            return
        session = self._controller.session
        bar.model = session.selected_model or ''
        bar.character = session.character.name
        bar.pending = self._controller.pending_requests

    # --- ChatView port ---

    def render_message(self, text: str, sender: str) -> None:
        self.query_one('#chat-window', TranscriptPanel).add_entry(text, sender)

    def clear_transcript(self) -> None:
        self.query_one('#chat-window', TranscriptPanel).clear_entries()

    def clear_input(self) -> None:
        self.query_one('#message-input', Input).value = ''

    def alert(self, message: str) -> None:
        self.push_screen(AlertModal(message))

    def show_models(self, models: list[str], selected: str | None) -> None:
        select = self.query_one('#model-select', Select)
        select.set_options([(m, m) for m in models])
        if selected is not None:
            select.value = selected

    def show_settings(self, settings: ConnectionSettings) -> None:
        self.query_one('#api-url-input', Input).value = settings.api_url
        self.query_one('#api-key-input', Input).value = settings.api_key

    def show_character(self, character: CharacterProfile) -> None:
        self._character = character
        self.query_one('#title', Static).update(self._title_text())

    def show_page(self, page_id: str) -> None:
        self.query_one('#pages', ContentSwitcher).current = page_id
        for button_id, target in _NAV_BUTTONS.items():
            self.query_one(f'#{button_id}', Button).set_class(target == page_id, 'active')

    def show_modal(self, visible: bool) -> bool:
        if visible:
            if self._character_modal is None:
                self._character_modal = CharacterModal(self._character)
                self.push_screen(self._character_modal)
            return True
        modal = self._character_modal
        if modal is None:
            return True
        if self.screen is not modal:
            log.warning('Character modal is not the active screen; leaving it open')
            return False
        modal.dismiss()
        self._character_modal = None
        return True

    # --- Event → action translation ---

    def _dispatch(self, action: Action, *, group: str = 'ui', exclusive: bool = False) -> None:
        async def _task() -> None:
            try:
                await self._controller.dispatch(action)
            except Exception as e:
                log.error('Action %s failed: %s', type(action).__name__, e, exc_info=True)
                self.render_message(f'Error: {e}', 'error')

        self.run_worker(_task, group=group, exclusive=exclusive)

    def _submit_message(self) -> None:
        text = self.query_one('#message-input', Input).value
        self._dispatch(Send(text), group='chat')

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == 'message-input':
            self._submit_message()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == 'send-btn':
            self._submit_message()
        elif button_id in _NAV_BUTTONS:
            await self.action_navigate(_NAV_BUTTONS[button_id])
        elif button_id == 'character-settings-btn':
            await self.action_open_character()
        elif button_id == 'save-settings-btn':
            self._dispatch(SaveSettings(*self._connection_form()))
        elif button_id == 'fetch-models-btn':
            self._dispatch(FetchModels(*self._connection_form()), group='models', exclusive=True)

    def _connection_form(self) -> tuple[str, str]:
        return (
            self.query_one('#api-url-input', Input).value,
            self.query_one('#api-key-input', Input).value,
        )

    async def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != 'model-select':
            return
        model = event.value if isinstance(event.value, str) else None
        await self._controller.dispatch(SelectModel(model))

    async def on_character_save_requested(self, message: CharacterSaveRequested) -> None:
        await self._controller.dispatch(SaveCharacter(name=message.name, prompt=message.prompt))

    async def on_character_close_requested(self, message: CharacterCloseRequested) -> None:
        await self._controller.dispatch(CloseCharacter())

    # --- Actions ---

    async def action_navigate(self, page_id: str) -> None:
        await self._controller.dispatch(Navigate(page_id))

    async def action_open_character(self) -> None:
        await self._controller.dispatch(OpenCharacter())

    def action_quit_app(self) -> None:
        self.exit()
