"""
Tests for RuntimeConfig.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from e5e.core.config import RuntimeConfig, get_runtime_config


class TestRuntimeConfig:
    def test_default_values(self, monkeypatch) -> None:
        for name in ("E5E_HANDLER", "E5E_CAPTURE_MODE", "E5E_PAYLOAD_SOURCE", "E5E_LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        config = RuntimeConfig()

        assert config.handler is None
        assert config.capture_mode == "buffer"
        assert config.payload_source == "inline"
        assert config.log_level == "info"
        assert config.log_format == "json"
        assert config.log_dir is None

    def test_env_variables(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("E5E_HANDLER", "app.handlers:Entrypoints")
        monkeypatch.setenv("E5E_CAPTURE_MODE", "pipe")
        monkeypatch.setenv("e5e_payload_source", "file")
        monkeypatch.setenv("E5E_LOG_DIR", str(tmp_path))

        config = get_runtime_config()

        assert config.handler == "app.handlers:Entrypoints"
        assert config.capture_mode == "pipe"
        assert config.payload_source == "file"
        assert config.log_dir == tmp_path

    def test_config_is_cached(self) -> None:
        assert get_runtime_config() is get_runtime_config()

    def test_invalid_capture_mode(self) -> None:
        with pytest.raises(ValidationError):
            RuntimeConfig(capture_mode="socket")

    def test_invalid_payload_source(self, monkeypatch) -> None:
        monkeypatch.setenv("E5E_PAYLOAD_SOURCE", "stdin")

        with pytest.raises(ValidationError):
            RuntimeConfig()
