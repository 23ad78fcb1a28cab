"""Character modal — name and system prompt of the persona."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static, TextArea

from persona_chat.l1_entities.settings import CharacterProfile
from persona_chat.l4_frameworks_and_drivers.messages import CharacterCloseRequested, CharacterSaveRequested


class CharacterModal(ModalScreen[None]):
    """Edits the character profile. Never dismisses itself; the App closes it on request."""

    DEFAULT_CSS = """
    CharacterModal {
        align: center middle;
    }

    CharacterModal > #character-dialog {
        width: 80%;
        max-width: 90;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    CharacterModal #character-title {
        text-style: bold;
        margin-bottom: 1;
    }

    CharacterModal #char-prompt {
        height: 10;
    }

    CharacterModal #character-buttons {
        height: auto;
        margin-top: 1;
        align-horizontal: right;
    }
    """

    BINDINGS = [('escape', 'close', 'Close')]

    def __init__(self, character: CharacterProfile, **kwargs) -> None:
        super().__init__(**kwargs)
        self._character = character

    def compose(self) -> ComposeResult:
        with Vertical(id='character-dialog'):
            yield Static('Character', id='character-title')
            yield Input(value=self._character.name, placeholder='Name', id='char-name')
            yield TextArea(self._character.prompt, id='char-prompt')
            with Horizontal(id='character-buttons'):
                yield Button('Close', id='close-btn')
                yield Button('Save', id='save-character-btn', variant='primary')

    def on_mount(self) -> None:
        self.query_one('#char-prompt', TextArea).border_title = 'System prompt'
        self.query_one('#char-name', Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == 'save-character-btn':
            self.post_message(
                CharacterSaveRequested(
                    name=self.query_one('#char-name', Input).value,
                    prompt=self.query_one('#char-prompt', TextArea).text,
                )
            )
        else:
            self.action_close()

    def on_click(self, event: events.Click) -> None:
        # Only clicks on the overlay itself land here with the screen as target.
        if event.widget is self:
            self.action_close()

    def action_close(self) -> None:
        self.post_message(CharacterCloseRequested())
