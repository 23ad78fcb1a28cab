"""Tests for YAML config loader gateway."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from persona_chat.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader, deep_merge


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    p = tmp_path / 'config.yaml'
    p.write_text('storage:\n  directory: "./chat-data"\nlogging:\n  level: INFO\n', encoding='utf-8')
    return p


class TestYamlConfigLoader:
    def test_load_raw(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml))
        assert raw == {'storage': {'directory': './chat-data'}, 'logging': {'level': 'INFO'}}

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            YamlConfigLoader().load_raw(str(tmp_path / 'nonexistent.yaml'))

    def test_overrides_merge(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml), overrides={'storage': {'directory': '/elsewhere'}})
        assert raw['storage']['directory'] == '/elsewhere'
        assert raw['logging']['level'] == 'INFO'

    def test_empty_yaml_is_empty_dict(self, tmp_path: Path):
        p = tmp_path / 'empty.yaml'
        p.write_text('', encoding='utf-8')
        assert YamlConfigLoader().load_raw(str(p)) == {}

    def test_default_paths_searched(self, tmp_path: Path):
        p = tmp_path / 'config.yml'
        p.write_text('logging:\n  level: WARNING\n', encoding='utf-8')
        with patch(
            'persona_chat.l3_interface_adapters.gateways.yaml_config_loader.DEFAULT_CONFIG_PATHS',
            [tmp_path / 'config.yaml', p],
        ):
            raw = YamlConfigLoader().load_raw()
        assert raw == {'logging': {'level': 'WARNING'}}

    def test_no_config_anywhere(self, tmp_path: Path):
        with patch(
            'persona_chat.l3_interface_adapters.gateways.yaml_config_loader.DEFAULT_CONFIG_PATHS',
            [tmp_path / 'config.yaml'],
        ):
            assert YamlConfigLoader().load_raw() == {}


class TestDeepMerge:
    def test_nested_merge(self):
        base = {'a': {'x': 1, 'y': 2}, 'b': 3}
        result = deep_merge(base, {'a': {'y': 99, 'z': 100}, 'c': 4})
        assert result == {'a': {'x': 1, 'y': 99, 'z': 100}, 'b': 3, 'c': 4}

    def test_override_dict_over_non_dict(self):
        assert deep_merge({'a': 'scalar'}, {'a': {'nested': True}})['a'] == {'nested': True}
