"""Tests for environment overrides in the config module."""

import pytest

from genvault import config


class TestRequestTimeout:

    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("GENVAULT_REQUEST_TIMEOUT", raising=False)
        assert config.env_positive_float("GENVAULT_REQUEST_TIMEOUT", 10.0) == 10.0

    def test_valid_value(self, monkeypatch):
        monkeypatch.setenv("GENVAULT_REQUEST_TIMEOUT", "2.5")
        assert config.env_positive_float("GENVAULT_REQUEST_TIMEOUT", 10.0) == 2.5

    @pytest.mark.parametrize("raw", ["ten", "", "0", "-3", "nan"])
    def test_bad_value_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("GENVAULT_REQUEST_TIMEOUT", raw)
        assert config.env_positive_float("GENVAULT_REQUEST_TIMEOUT", 10.0) == 10.0


class TestLogLevel:

    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("GENVAULT_LOG_LEVEL", raising=False)
        assert config.env_log_level("GENVAULT_LOG_LEVEL", "INFO") == "INFO"

    def test_name_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("GENVAULT_LOG_LEVEL", " debug ")
        assert config.env_log_level("GENVAULT_LOG_LEVEL", "INFO") == "DEBUG"

    @pytest.mark.parametrize("raw", ["verbose", "", "10"])
    def test_unknown_name_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("GENVAULT_LOG_LEVEL", raw)
        assert config.env_log_level("GENVAULT_LOG_LEVEL", "INFO") == "INFO"

    def test_module_level_is_a_known_name(self):
        assert config.LOG_LEVEL in config.LOG_LEVEL_NAMES
        assert config.REQUEST_TIMEOUT_SECONDS > 0
