"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class StorageConfig(BaseModel):
    directory: str | None = None  # None → platformdirs user data dir


class LoggingConfig(BaseModel):
    level: str


class AppConfig(BaseModel):
    storage: StorageConfig
    logging: LoggingConfig
