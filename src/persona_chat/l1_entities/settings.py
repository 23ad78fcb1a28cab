"""Persisted records — connection settings and the character profile."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ConnectionSettings(BaseModel):
    """Base URL and bearer token of the OpenAI-compatible endpoint.

    Stored with the ``apiUrl`` / ``apiKey`` keys; Python code uses the snake_case names.
    """

    api_url: str = Field(default='', alias='apiUrl')
    api_key: str = Field(default='', alias='apiKey')

    model_config = {'populate_by_name': True, 'frozen': True}

    @field_validator('api_url', 'api_key', mode='before')
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @property
    def is_complete(self) -> bool:
        return bool(self.api_url and self.api_key)

    def to_record(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class CharacterProfile(BaseModel):
    """Persona definition; ``prompt`` becomes the system message of every request."""

    name: str = ''
    prompt: str = ''

    model_config = {'frozen': True}

    @field_validator('name', 'prompt', mode='before')
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    def to_record(self) -> dict[str, str]:
        return self.model_dump()
