"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_dir: Path, level: str = 'DEBUG') -> None:
    """Configure file-based logging for the ``pchat`` logger tree."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'pchat_debug.log'
    root = logging.getLogger('pchat')
    if any(isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path.resolve() for h in root.handlers):
        return
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
    root.setLevel(level.upper())
    root.addHandler(handler)
    logging.getLogger('pchat.app').info('Debug logging started → %s', log_path)
