"""Port: everything the controller needs from the user interface."""

from __future__ import annotations

from typing import Literal, Protocol

from persona_chat.l1_entities.settings import CharacterProfile, ConnectionSettings

EntryKind = Literal['user', 'assistant', 'error']


class ChatView(Protocol):
    """Abstract chat UI. The Textual app implements it; tests use a recording fake."""

    def render_message(self, text: str, sender: EntryKind) -> None:
        """Append one entry to the transcript and scroll it into view."""
        ...

    def clear_transcript(self) -> None: ...

    def clear_input(self) -> None: ...

    def alert(self, message: str) -> None:
        """Show a blocking notice the user has to acknowledge."""
        ...

    def show_models(self, models: list[str], selected: str | None) -> None: ...

    def show_settings(self, settings: ConnectionSettings) -> None: ...

    def show_character(self, character: CharacterProfile) -> None: ...

    def show_page(self, page_id: str) -> None: ...

    def show_modal(self, visible: bool) -> bool:
        """Show or hide the character modal. Return False if the change could not be applied."""
        ...
