"""Chat message entity — one entry of the in-memory conversation history."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Sender = Literal['user', 'assistant']


class ChatMessage(BaseModel):
    """A single turn in the conversation, as shown in the transcript."""

    sender: Sender
    text: str

    model_config = {'frozen': True}

    @property
    def role(self) -> str:
        """Wire role for the chat completions payload."""
        return self.sender
