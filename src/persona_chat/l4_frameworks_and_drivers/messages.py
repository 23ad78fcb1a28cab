"""Textual Message subclasses — contracts between the character modal and the App."""

from __future__ import annotations

from textual.message import Message


class CharacterSaveRequested(Message):
    """Posted by the character modal when the user presses Save."""

    def __init__(self, name: str, prompt: str) -> None:
        super().__init__()
        self.name = name
        self.prompt = prompt


class CharacterCloseRequested(Message):
    """Posted by the character modal on Escape, the close button, or a click outside the dialog."""
