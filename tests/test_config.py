"""
Unit tests for configuration loading and logging setup utilities.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pytest
import yaml
from rich.logging import RichHandler

from dayboard.backend.core.utils.config import apply_env_overrides, get_default_config, load_config
from dayboard.backend.core.utils.logging_setup import resolve_level, setup_from_config, setup_logging

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default_config.yaml"


def _write(config: dict) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8") as f:
        yaml.dump(config, f, allow_unicode=True)
        return f.name


class TestLoadConfig:
    def test_load_valid_config(self) -> None:
        path = _write({"backend": {"mode": "rest", "url": "https://x.example.co"}, "server": {"port": 9000}})
        loaded = load_config(path, environ={})

        assert loaded["backend"]["mode"] == "rest"
        assert loaded["backend"]["url"] == "https://x.example.co"
        assert loaded["server"]["port"] == 9000

    def test_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.yaml")

    def test_missing_sections_get_defaults(self) -> None:
        loaded = load_config(_write({"auth": {"email_domain": "example.org"}}), environ={})

        assert loaded["auth"]["email_domain"] == "example.org"
        assert loaded["backend"]["mode"] == "memory"
        assert loaded["weather"]["units"] == "metric"
        assert loaded["storage"]["path"] == "data/local_storage.json"

    def test_partial_section_is_merged(self) -> None:
        loaded = load_config(_write({"weather": {"lang": "en"}}), environ={})
        assert loaded["weather"]["lang"] == "en"
        assert loaded["weather"]["units"] == "metric"

    def test_numeric_strings_only_in_numeric_settings(self) -> None:
        config = {
            "server": {"port": "8080"},
            "weather": {"api_key": "12345", "default_location": {"name": "X", "latitude": "35.5", "longitude": "127"}},
        }
        loaded = load_config(_write(config), environ={})

        assert loaded["server"]["port"] == 8080
        assert loaded["weather"]["api_key"] == "12345"
        assert loaded["weather"]["default_location"]["latitude"] == pytest.approx(35.5)
        assert loaded["weather"]["default_location"]["name"] == "X"

    def test_default_config_loads(self) -> None:
        """The shipped default_config.yaml should load without errors."""
        config = load_config(DEFAULT_CONFIG, environ={})
        assert config["backend"]["mode"] == "memory"
        assert config["auth"]["email_domain"] == "todoapp.com"
        assert config["weather"]["default_location"]["latitude"] == pytest.approx(35.8242)
        assert config["weather"]["default_location"]["name"] == "전주"
        assert config["calendar"]["timezone"] == "Asia/Seoul"


class TestEnvOverrides:
    def test_secrets_from_environment(self) -> None:
        config = apply_env_overrides(
            get_default_config(),
            {
                "DAYBOARD_BACKEND_URL": "https://y.example.co",
                "DAYBOARD_BACKEND_KEY": "anon",
                "DAYBOARD_WEATHER_KEY": "owm",
                "DAYBOARD_PLACES_KEY": "kakao",
            },
        )
        assert config["backend"]["url"] == "https://y.example.co"
        assert config["backend"]["anon_key"] == "anon"
        assert config["weather"]["api_key"] == "owm"
        assert config["places"]["api_key"] == "kakao"

    def test_cors_origins(self) -> None:
        config = apply_env_overrides(get_default_config(), {"CORS_ORIGINS": "https://a.example,https://b.example"})
        assert config["server"]["cors_origins"] == ["https://a.example", "https://b.example"]

    def test_display_timezone(self) -> None:
        assert get_default_config()["calendar"]["timezone"] == "Asia/Seoul"
        config = apply_env_overrides(get_default_config(), {"DAYBOARD_TIMEZONE": "UTC"})
        assert config["calendar"]["timezone"] == "UTC"

    def test_empty_values_ignored(self) -> None:
        config = apply_env_overrides(get_default_config(), {"DAYBOARD_BACKEND_MODE": ""})
        assert config["backend"]["mode"] == "memory"


class TestLoggingSetup:
    def test_resolve_level(self) -> None:
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(logging.WARNING) == logging.WARNING
        assert resolve_level("nonsense") == logging.INFO

    def test_rich_console_and_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "dayboard.log"
        setup_logging("INFO", log_file)
        root = logging.getLogger()
        try:
            assert any(isinstance(h, RichHandler) for h in root.handlers)
            logging.getLogger("dayboard.test").info("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in log_file.read_text(encoding="utf-8")
            assert logging.getLogger("urllib3").level == logging.WARNING
        finally:
            for handler in list(root.handlers):
                handler.close()
            root.handlers.clear()

    def test_flags_beat_configured_level(self) -> None:
        root = logging.getLogger()
        try:
            assert setup_from_config({"level": "ERROR"}) == logging.ERROR
            assert setup_from_config({"level": "ERROR"}, verbose=True) == logging.INFO
            assert setup_from_config({"level": "ERROR"}, verbose=True, debug=True) == logging.DEBUG
            assert root.level == logging.DEBUG
            assert logging.getLogger("uvicorn.access").level == logging.WARNING
        finally:
            root.handlers.clear()
