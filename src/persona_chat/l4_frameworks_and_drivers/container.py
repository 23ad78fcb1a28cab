"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from persona_chat.l1_entities.config import AppConfig
from persona_chat.l2_use_cases.ports.chat_api import ChatApi
from persona_chat.l2_use_cases.ports.key_value_store import KeyValueStore
from persona_chat.l3_interface_adapters.gateways.json_file_store import JsonFileStore
from persona_chat.l3_interface_adapters.gateways.openai_chat_api import OpenAIChatApi
from persona_chat.l4_frameworks_and_drivers.config import resolve_data_dir


class DependencyContainer:
    """Creates the concrete gateways. The App builds the controller around itself."""

    def __init__(self, config: AppConfig, data_dir: Path | None = None) -> None:
        self.config = config
        self.data_dir = data_dir or resolve_data_dir(config)
        self.store: KeyValueStore = JsonFileStore(self.data_dir)
        self.chat_api: ChatApi = OpenAIChatApi()
