"""Prompt building — turns the session into a chat completions message list."""

from __future__ import annotations

from persona_chat.l1_entities.chat_message import ChatMessage


def build_chat_messages(system_prompt: str, history: list[ChatMessage], new_message: str) -> list[dict[str, str]]:
    """System prompt first, then history in order, then the new user message."""
    messages = [{'role': 'system', 'content': system_prompt}]
    messages.extend({'role': m.role, 'content': m.text} for m in history)
    messages.append({'role': 'user', 'content': new_message})
    return messages
