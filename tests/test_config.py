import logging

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir
from core.logger import set_log_level, setup_logger


def test_defaults(monkeypatch):
    for key in (
        "CLIENTCHECK_DNS_NAMESERVERS",
        "CLIENTCHECK_DNS_LIFETIME_SECONDS",
        "CLIENTCHECK_PHONE_LEGACY_NINTH_DIGIT",
        "CLIENTCHECK_CPF_REMAP_REMAINDER_TEN",
        "CLIENTCHECK_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    settings = AppSettings(_env_file=None)
    assert settings.dns_nameservers == []
    assert settings.dns_lifetime_seconds is None
    assert settings.phone_legacy_ninth_digit is True
    assert settings.cpf_remap_remainder_ten is False
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CLIENTCHECK_DNS_NAMESERVERS", '["9.9.9.9"]')
    monkeypatch.setenv("CLIENTCHECK_DNS_LIFETIME_SECONDS", "1.5")
    monkeypatch.setenv("CLIENTCHECK_PHONE_LEGACY_NINTH_DIGIT", "false")
    monkeypatch.setenv("clientcheck_cpf_remap_remainder_ten", "true")

    settings = AppSettings(_env_file=None)
    assert settings.dns_nameservers == ["9.9.9.9"]
    assert settings.dns_lifetime_seconds == 1.5
    assert settings.phone_legacy_ninth_digit is False
    assert settings.cpf_remap_remainder_ten is True


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "clientcheck"


def test_user_config_dir_defaults_to_dot_config(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    assert get_user_config_dir() == tmp_path / ".config" / "clientcheck"


def test_user_config_dir_on_macos(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "darwin")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "Library" / "Application Support" / "clientcheck"


@pytest.mark.parametrize("appdata", ["roaming", ""])
def test_user_config_dir_on_windows(monkeypatch, tmp_path, appdata):
    monkeypatch.setattr("sys.platform", "win32")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path / appdata) if appdata else "")
    expected = tmp_path / "roaming" if appdata else tmp_path
    assert get_user_config_dir() == expected / "clientcheck"


def test_setup_logger_configures_once():
    logger = setup_logger("clientcheck.tests.once")
    again = setup_logger("clientcheck.tests.once")
    assert logger is again
    assert len(logger.handlers) == 1


def test_set_log_level_updates_configured_loggers():
    logger = setup_logger("clientcheck.tests.level")
    set_log_level("debug")
    assert logger.level == logging.DEBUG
    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("CLIENTCHECK_LOG_LEVEL", "debug")
    assert AppSettings(_env_file=None).log_level == "DEBUG"


@pytest.mark.parametrize(
    ("key", "value"),
    [("CLIENTCHECK_LOG_LEVEL", "verbose"), ("CLIENTCHECK_DNS_LIFETIME_SECONDS", "-1")],
)
def test_invalid_environment_is_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_setup_logger_ignores_invalid_environment(monkeypatch):
    monkeypatch.setenv("CLIENTCHECK_LOG_LEVEL", "verbose")
    monkeypatch.setenv("CLIENTCHECK_DNS_LIFETIME_SECONDS", "-1")
    logger = setup_logger("clientcheck.tests.bad_env")
    assert len(logger.handlers) == 1
