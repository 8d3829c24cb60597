"""Tests for environment-driven settings."""

import os

import pytest

from optionstore.core.utils.config import (
    DEFAULT_LOG_FORMAT,
    get_settings,
    load_settings,
    reset_settings,
)


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_defaults(self):
        settings = load_settings()
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.log_format == DEFAULT_LOG_FORMAT
        assert settings.thread_safe is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPTIONSTORE_LOG_LEVEL", "debug")
        monkeypatch.setenv("OPTIONSTORE_LOG_FILE", "store.log")
        monkeypatch.setenv("OPTIONSTORE_LOG_FORMAT", "%(message)s")
        monkeypatch.setenv("OPTIONSTORE_THREAD_SAFE", "On")
        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_file == "store.log"
        assert settings.log_format == "%(message)s"
        assert settings.thread_safe is True

    @pytest.mark.parametrize("raw", ["0", "false", "NO", "off"])
    def test_false_values(self, monkeypatch, raw):
        monkeypatch.setenv("OPTIONSTORE_THREAD_SAFE", raw)
        assert load_settings().thread_safe is False

    def test_invalid_bool(self, monkeypatch):
        monkeypatch.setenv("OPTIONSTORE_THREAD_SAFE", "maybe")
        with pytest.raises(ValueError):
            load_settings()

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("OPTIONSTORE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            load_settings()

    def test_reads_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("OPTIONSTORE_THREAD_SAFE=1\n")
        monkeypatch.chdir(tmp_path)
        try:
            assert load_settings().thread_safe is True
            assert load_settings(use_dotenv=False).thread_safe is True
        finally:
            os.environ.pop("OPTIONSTORE_THREAD_SAFE", None)


class TestGetSettings:
    """Tests for the settings cache."""

    def test_is_cached_until_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("OPTIONSTORE_THREAD_SAFE", "1")
        assert get_settings() is first
        reset_settings()
        assert get_settings().thread_safe is True
