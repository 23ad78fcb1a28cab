"""Use case: load and save the two persisted records."""

from __future__ import annotations

import logging

import pydantic

from persona_chat.l1_entities.settings import CharacterProfile, ConnectionSettings
from persona_chat.l2_use_cases.ports.key_value_store import KeyValueStore

log = logging.getLogger('pchat.store')

SETTINGS_KEY = 'aiChatSettings'
CHARACTER_KEY = 'aiChatCharacter'


class SettingsRepository:
    """Typed access to the settings and character records of a KeyValueStore."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load_settings(self) -> ConnectionSettings | None:
        return self._load(SETTINGS_KEY, ConnectionSettings)

    def load_character(self) -> CharacterProfile | None:
        return self._load(CHARACTER_KEY, CharacterProfile)

    def save_settings(self, settings: ConnectionSettings) -> None:
        self._store.save(SETTINGS_KEY, settings.to_record())

    def save_character(self, character: CharacterProfile) -> None:
        self._store.save(CHARACTER_KEY, character.to_record())

    def _load(self, key, model_cls):
        record = self._store.load(key)
        if record is None:
            return None
        missing = [f.alias or name for name, f in model_cls.model_fields.items() if (f.alias or name) not in record]
        if missing:
            log.warning('Ignoring incomplete %s record, missing: %s', key, ', '.join(missing))
            return None
        try:
            return model_cls.model_validate(record)
        except pydantic.ValidationError as e:
            log.warning('Ignoring malformed %s record: %s', key, e)
            return None
