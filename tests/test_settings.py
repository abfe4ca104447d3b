"""
Settings Tests - Unit Tests for Configuration and Validators

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cnbrates.config.settings (Settings model)
- cnbrates.shared.validators (validation helpers)
"""
import logging

import pytest
from pydantic import ValidationError

from cnbrates.config.settings import DEFAULT_CNB_URL, Settings
from cnbrates.shared.validators import (
    split_currency_codes,
    validate_currency_code,
    validate_url,
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("CNB_URL", "HTTP_TIMEOUT_SECONDS", "CNB_CURRENCIES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


class TestSettings:
    def test_defaults(self, clean_env):
        s = Settings()
        assert s.cnb_url == DEFAULT_CNB_URL
        assert s.http_timeout_seconds == 10
        assert "CZK" in s.currency_codes
        assert s.log_level_value == logging.WARNING

    def test_from_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("CNB_CURRENCIES", "eur, usd")
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "3")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        s = Settings()
        assert s.currency_codes == ["EUR", "USD"]
        assert s.http_timeout_seconds == 3
        assert s.log_level == "DEBUG"
        assert s.log_level_value == logging.DEBUG

    def test_invalid_currency(self, clean_env, monkeypatch):
        monkeypatch.setenv("CNB_CURRENCIES", "EUR,EURO")
        with pytest.raises(ValidationError, match="EURO"):
            Settings()

    def test_invalid_url(self, clean_env, monkeypatch):
        monkeypatch.setenv("CNB_URL", "ftp://example.com/daily.txt")
        with pytest.raises(ValidationError):
            Settings()

    def test_timeout_bounds(self, clean_env, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            Settings()


class TestValidators:
    def test_currency_code(self):
        assert validate_currency_code("CZK")
        assert not validate_currency_code("czk")
        assert not validate_currency_code("CZKK")
        assert not validate_currency_code("")

    def test_split_currency_codes(self):
        assert split_currency_codes("usd, EUR,jpy") == ["USD", "EUR", "JPY"]
        assert split_currency_codes("EUR USD") == ["EUR", "USD"]
        assert split_currency_codes("") == []
        assert split_currency_codes(" , ") == []

    def test_url(self):
        assert validate_url("https://www.cnb.cz/daily.txt")
        assert validate_url("http://localhost:8000/")
        assert not validate_url("www.cnb.cz")
        assert not validate_url("")
