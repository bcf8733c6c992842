"""
Tests for settings, the client factory, input validators and logging setup.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from pananames.api.client import PananamesClient
from pananames.api.exceptions import ValidationError
from pananames.api.factory import get_client
from pananames.utils.config import Settings, check_base_url, get_settings, reset_settings
from pananames.utils.logger import configure_logging, get_logger
from pananames.utils.validators import (
    require_options,
    validate_domain,
    validate_domain_list,
    validate_tld,
)


def _mock_settings(**overrides):
    """Return a minimal mock Settings object."""
    s = MagicMock()
    s.pananames_token = "from-settings"
    s.pananames_base_url = "https://api.test"
    s.pananames_user_agent = "settings-agent"
    s.pananames_timeout = 12.0
    s.log_level = "INFO"
    s.log_file = ""
    for key, value in overrides.items():
        setattr(s, key, value)
    return s


# ===========================================================================
# 1. Settings
# ===========================================================================

class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.pananames_token == ""
        assert settings.pananames_base_url == "https://api.pananames.com"
        assert settings.pananames_user_agent == "pananames-python"
        assert settings.pananames_timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_file == ""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PANANAMES_TOKEN", "env-token")
        monkeypatch.setenv("PANANAMES_BASE_URL", "http://localhost:9000")
        monkeypatch.setenv("PANANAMES_TIMEOUT", "5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.pananames_token == "env-token"
        assert settings.pananames_base_url == "http://localhost:9000"
        assert settings.pananames_timeout == 5.0
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("env,value", [
        ("LOG_LEVEL", "chatty"),
        ("PANANAMES_BASE_URL", "ftp://api.pananames.com"),
        ("PANANAMES_TIMEOUT", "0"),
    ])
    def test_invalid_values_rejected(self, monkeypatch, env, value):
        monkeypatch.setenv(env, value)
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_singleton(self):
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first

    @pytest.mark.parametrize("url,expected", [
        ("https://api.pananames.com", "https://api.pananames.com"),
        ("http://127.0.0.1:8080/some/path?q=1", "http://127.0.0.1:8080"),
    ])
    def test_check_base_url(self, url, expected):
        assert check_base_url(url) == expected

    @pytest.mark.parametrize("url", ["", "api.pananames.com", "mailto:me@example.com", "https://"])
    def test_check_base_url_rejects(self, url):
        with pytest.raises(ValueError):
            check_base_url(url)


# ===========================================================================
# 2. Client factory
# ===========================================================================

class TestGetClient:

    def test_builds_client_from_settings(self, session):
        client = get_client(config=_mock_settings(), session=session)

        assert isinstance(client, PananamesClient)
        assert client.base_url == "https://api.test/merchant/v2/"
        assert client.user_agent == "settings-agent"
        assert client.timeout == 12.0
        assert client.session is session
        assert client.new_request("GET", "tlds").headers["SIGNATURE"] == "from-settings"

    def test_explicit_token_wins(self):
        client = get_client("explicit", config=_mock_settings())
        assert client.new_request("GET", "tlds").headers["SIGNATURE"] == "explicit"

    def test_missing_token_raises(self):
        with pytest.raises(ValueError, match="PANANAMES_TOKEN"):
            get_client(config=_mock_settings(pananames_token=""))

    def test_uses_environment_when_no_config(self, monkeypatch):
        monkeypatch.setenv("PANANAMES_TOKEN", "env-token")
        with patch("pananames.api.factory.get_settings", return_value=Settings(_env_file=None)):
            client = get_client()
        assert client.new_request("GET", "tlds").headers["SIGNATURE"] == "env-token"

    def test_applies_log_level(self):
        with patch("pananames.api.factory.configure_logging") as mock_configure:
            get_client(config=_mock_settings(log_level="DEBUG"))
        mock_configure.assert_called_once_with("DEBUG", None)


# ===========================================================================
# 3. Validators
# ===========================================================================

class TestValidators:

    @pytest.mark.parametrize("raw,expected", [
        ("example.com", "example.com"),
        ("EXAMPLE.COM", "example.com"),
        ("  example.com  ", "example.com"),
        ("https://example.com/", "example.com"),
        ("пример.рф", "пример.рф"),
    ])
    def test_validate_domain(self, raw, expected):
        assert validate_domain(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "http://", "bad domain.com", "example.com/path", "a?b.com", "x" * 254])
    def test_validate_domain_rejects(self, raw):
        with pytest.raises(ValidationError):
            validate_domain(raw)

    def test_validate_domain_list(self):
        assert validate_domain_list(["A.com", "b.com"]) == ["a.com", "b.com"]

    @pytest.mark.parametrize("value", [None, [], "example.com"])
    def test_validate_domain_list_rejects(self, value):
        with pytest.raises(ValidationError):
            validate_domain_list(value)

    def test_validate_tld(self):
        assert validate_tld(".COM") == "com"
        with pytest.raises(ValidationError):
            validate_tld(".")

    def test_require_options(self):
        options = object()
        assert require_options(options, "Options") is options
        with pytest.raises(ValidationError, match="Options can't be None"):
            require_options(None, "Options")


# ===========================================================================
# 4. Logging
# ===========================================================================

class TestLogging:

    def test_get_logger(self):
        logger = get_logger("pananames.tests.sample", level="INFO")
        assert logger.name == "pananames.tests.sample"
        assert len(logger.handlers) == 1

    def test_no_duplicate_handlers(self):
        get_logger("pananames.tests.dup")
        logger = get_logger("pananames.tests.dup")
        assert len(logger.handlers) == 1

    def test_configure_logging_relevels_package_loggers(self):
        logger = get_logger("pananames.tests.level", level="INFO")

        configure_logging("WARNING")
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING

        configure_logging("INFO")
        assert logger.level == logging.INFO

    def test_file_logging_is_opt_in(self, tmp_path, monkeypatch):
        monkeypatch.setattr("pananames.utils.logger.LOGS_DIR", tmp_path / "logs")

        get_logger("pananames.tests.nofile")
        assert not (tmp_path / "logs").exists()

        logger = get_logger("pananames.tests.withfile", log_file="client.log")
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in (tmp_path / "logs" / "client.log").read_text(encoding="utf-8")
        for handler in logger.handlers:
            handler.close()
