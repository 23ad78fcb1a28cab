"""Named user actions dispatched through ConversationController.dispatch."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadSession:
    """Startup: read persisted records into the session and the form fields."""


@dataclass(frozen=True)
class Send:
    text: str


@dataclass(frozen=True)
class SaveSettings:
    api_url: str
    api_key: str


@dataclass(frozen=True)
class SaveCharacter:
    name: str
    prompt: str


@dataclass(frozen=True)
class FetchModels:
    """Values come from the settings form, which may not be saved yet."""

    api_url: str
    api_key: str


@dataclass(frozen=True)
class SelectModel:
    model: str | None


@dataclass(frozen=True)
class Navigate:
    page_id: str


@dataclass(frozen=True)
class OpenCharacter:
    pass


@dataclass(frozen=True)
class CloseCharacter:
    pass


Action = (
    LoadSession | Send | SaveSettings | SaveCharacter | FetchModels | SelectModel | Navigate | OpenCharacter | CloseCharacter
)
