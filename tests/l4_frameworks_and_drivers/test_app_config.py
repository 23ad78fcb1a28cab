"""Tests for L4 config defaults and build_app_config factory."""

from __future__ import annotations

import copy
from pathlib import Path

from persona_chat.l3_interface_adapters.gateways.paths import DATA_DIR
from persona_chat.l4_frameworks_and_drivers.config import APP_CONFIG_DEFAULTS, build_app_config, resolve_data_dir


class TestBuildAppConfig:
    def test_defaults_produce_valid_config(self):
        cfg = build_app_config({})
        assert cfg.storage.directory is None
        assert cfg.logging.level == 'DEBUG'

    def test_user_overrides_take_precedence(self):
        cfg = build_app_config({'logging': {'level': 'INFO'}})
        assert cfg.logging.level == 'INFO'
        assert cfg.storage.directory is None  # default preserved

    def test_build_does_not_mutate_defaults(self):
        snapshot = copy.deepcopy(APP_CONFIG_DEFAULTS)
        build_app_config({'storage': {'directory': '/tmp/x'}})
        assert APP_CONFIG_DEFAULTS == snapshot


class TestResolveDataDir:
    def test_default_is_platform_dir(self):
        assert resolve_data_dir(build_app_config({})) == DATA_DIR

    def test_configured_directory(self, tmp_path: Path):
        cfg = build_app_config({'storage': {'directory': str(tmp_path)}})
        assert resolve_data_dir(cfg) == tmp_path
