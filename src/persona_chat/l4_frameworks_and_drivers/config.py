"""Config defaults and the build_app_config factory — lives in L4, not domain."""

from __future__ import annotations

import copy
from pathlib import Path

from persona_chat.l1_entities.config import AppConfig
from persona_chat.l3_interface_adapters.gateways.paths import DATA_DIR
from persona_chat.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'storage': {
        'directory': None,
    },
    'logging': {
        'level': 'DEBUG',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


def resolve_data_dir(config: AppConfig) -> Path:
    """Directory holding the stored records and the debug log."""
    if config.storage.directory:
        return Path(config.storage.directory).expanduser()
    return DATA_DIR
