"""Chat session state entity."""

from __future__ import annotations

from pydantic import BaseModel, Field

from persona_chat.l1_entities.chat_message import ChatMessage
from persona_chat.l1_entities.settings import CharacterProfile, ConnectionSettings


class ChatSession(BaseModel):
    """Mutable session context: settings, character, history and model selection.

    ``character_epoch`` changes whenever the character is replaced, so an
    in-flight request can tell that its reply belongs to a stale conversation.
    """

    settings: ConnectionSettings = Field(default_factory=ConnectionSettings)
    character: CharacterProfile = Field(default_factory=CharacterProfile)
    history: list[ChatMessage] = Field(default_factory=list)
    models: list[str] = Field(default_factory=list)
    selected_model: str | None = None
    character_epoch: int = 0

    def replace_character(self, character: CharacterProfile) -> None:
        """Swap in a new character and drop the whole conversation."""
        self.character = character
        self.history = []
        self.character_epoch += 1

    def replace_models(self, models: list[str]) -> None:
        """Replace the model list wholesale; selection falls back to the first entry."""
        self.models = list(models)
        self.selected_model = self.models[0] if self.models else None

    def select_model(self, model: str | None) -> None:
        if model is not None and model not in self.models:
            raise ValueError(f'Unknown model: {model}')
        self.selected_model = model

    def append_turn(self, user_text: str, reply: str) -> None:
        self.history.append(ChatMessage(sender='user', text=user_text))
        self.history.append(ChatMessage(sender='assistant', text=reply))
