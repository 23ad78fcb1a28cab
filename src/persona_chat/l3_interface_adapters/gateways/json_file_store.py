"""Gateway: JSON-file key-value store — implements KeyValueStore port."""

from __future__ import annotations

import json
import logging
from pathlib import Path

log = logging.getLogger('pchat.store')


class JsonFileStore:
    """One ``<key>.json`` file per record inside a data directory."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        return self._data_dir / f'{key}.json'

    def load(self, key: str) -> dict | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            value = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            log.warning('Treating unreadable record %s as absent: %s', path.name, e)
            return None
        if not isinstance(value, dict):
            log.warning('Treating non-object record %s as absent', path.name)
            return None
        return value

    def save(self, key: str, value: dict) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        tmp = path.with_suffix('.json.tmp')
        tmp.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding='utf-8')
        tmp.replace(path)
        log.debug('Saved %s', path.name)
