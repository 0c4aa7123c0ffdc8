from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="E5E_", case_sensitive=False)

    handler: str | None = None
    capture_mode: Literal["buffer", "pipe"] = "buffer"
    payload_source: Literal["inline", "file"] = "inline"
    log_level: str = "info"
    log_format: str = "json"
    log_dir: Path | None = None


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
