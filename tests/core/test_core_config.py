"""Tests for settings, exception hierarchy and logging configuration."""

import logging

import pytest

from TCKN.core.exceptions import (
    ConfigError,
    InvalidInputError,
    ResponseParseError,
    TCKNError,
    TransportError,
    VerificationIndeterminateError,
)
from TCKN.core.logging_config import LoggerConfig
from TCKN.core.settings import KPS_PUBLIC_URL, Settings
from TCKN.services.kps.verifier import IdentityVerifier


def test_settings_defaults():
    cfg = Settings(_env_file=None)

    assert cfg.kps_endpoint_url == KPS_PUBLIC_URL
    assert cfg.get_timeout() is None
    assert cfg.turkish_casing is False
    assert cfg.get_log_level() == logging.INFO


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TCKN_REQUEST_TIMEOUT", "7.5")
    monkeypatch.setenv("TCKN_TURKISH_CASING", "true")
    monkeypatch.setenv("TCKN_LOG_LEVEL", "debug")

    cfg = Settings(_env_file=None)

    assert cfg.get_timeout() == 7.5
    assert cfg.turkish_casing is True
    assert cfg.get_log_level() == logging.DEBUG


def test_invalid_log_level_raises_config_error():
    with pytest.raises(ConfigError) as exc_info:
        Settings(_env_file=None, log_level="chatty").get_log_level()

    assert exc_info.value.details["provided_level"] == "chatty"


@pytest.mark.parametrize("timeout", [0, -3])
def test_non_positive_timeout_raises_config_error(timeout):
    with pytest.raises(ConfigError):
        Settings(_env_file=None, request_timeout=timeout).get_timeout()


def test_verifier_rejects_bad_timeout_setting():
    with pytest.raises(ConfigError):
        IdentityVerifier(settings=Settings(_env_file=None, request_timeout=0))


def test_verifier_builds_transport_with_configured_timeout():
    verifier = IdentityVerifier(settings=Settings(_env_file=None, request_timeout=3))
    assert verifier.transport.timeout == 3.0


def test_blank_endpoint_raises_config_error():
    with pytest.raises(ConfigError):
        Settings(_env_file=None, kps_endpoint_url="  ").get_endpoint_url()


def test_exception_hierarchy():
    assert issubclass(TransportError, VerificationIndeterminateError)
    assert issubclass(ResponseParseError, VerificationIndeterminateError)
    assert issubclass(InvalidInputError, TCKNError)
    assert not issubclass(InvalidInputError, VerificationIndeterminateError)

    error = InvalidInputError("first name required", details={"field": "first_name"})
    assert str(error) == "first name required"
    assert error.field == "first_name"
    assert TCKNError("x").details == {}


def test_logger_config_console_only_by_default(tmp_path):
    config = LoggerConfig(log_dir=str(tmp_path / "logs"))
    logger = config.get_logger("tckn.tests.console_only")

    assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    assert not (tmp_path / "logs").exists()


def test_logger_config_writes_rotating_file(tmp_path):
    config = LoggerConfig(log_dir=str(tmp_path / "logs"), log_file="test.log", log_to_file=True)
    logger = config.get_logger("tckn.tests.file")
    logger.info("Verification requested")

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")
    assert "| INFO     | tckn.tests.file:" in content
    assert "Verification requested" in content


def test_logger_configured_once(tmp_path):
    config = LoggerConfig(log_dir=str(tmp_path))
    first = config.get_logger("tckn.tests.once")
    second = config.get_logger("tckn.tests.once")

    assert first is second
    assert len(first.handlers) == 1


def test_configured_logger_does_not_propagate_to_root(tmp_path):
    config = LoggerConfig(log_dir=str(tmp_path))
    logger = config.get_logger("tckn.tests.no_propagate")

    assert logger.propagate is False
