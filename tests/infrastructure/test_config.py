"""Tests for environment-driven settings."""

import pytest

from budgetmaster.domain.service.expiry_policy import ExpiryPrecedence
from budgetmaster.domain.service.status_policy import StatusPolicy
from budgetmaster.infrastructure.config import Settings

_VARS = (
    "BUDGETMASTER_DATABASE_URL",
    "BUDGETMASTER_SQL_ECHO",
    "BUDGETMASTER_LOG_LEVEL",
    "BUDGETMASTER_LOG_DIR",
    "BUDGETMASTER_STATUS_POLICY",
    "BUDGETMASTER_EXPIRY_PRECEDENCE",
    "BUDGETMASTER_DEFAULT_EXPIRY_DAYS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()
    assert settings.database_url == "sqlite:///budgetmaster.db"
    assert settings.sql_echo is False
    assert settings.log_dir is None
    assert settings.status_policy is StatusPolicy.UNRESTRICTED
    assert settings.expiry_precedence is ExpiryPrecedence.EXPLICIT_FIRST
    assert settings.default_expiry_days == 15


def test_overrides(monkeypatch):
    monkeypatch.setenv("BUDGETMASTER_DATABASE_URL", "postgresql://u:p@db/quotes")
    monkeypatch.setenv("BUDGETMASTER_SQL_ECHO", "true")
    monkeypatch.setenv("BUDGETMASTER_LOG_LEVEL", "debug")
    monkeypatch.setenv("BUDGETMASTER_STATUS_POLICY", "pending-only")
    monkeypatch.setenv("BUDGETMASTER_EXPIRY_PRECEDENCE", "derived")
    monkeypatch.setenv("BUDGETMASTER_DEFAULT_EXPIRY_DAYS", "30")

    settings = Settings.from_env()
    assert settings.database_url == "postgresql://u:p@db/quotes"
    assert settings.sql_echo is True
    assert settings.log_level == "DEBUG"
    assert settings.status_policy is StatusPolicy.PENDING_ONLY
    assert settings.expiry_precedence is ExpiryPrecedence.DERIVED_FIRST
    assert settings.default_expiry_days == 30


@pytest.mark.parametrize(
    "name, value",
    [
        ("BUDGETMASTER_STATUS_POLICY", "strict"),
        ("BUDGETMASTER_EXPIRY_PRECEDENCE", "newest"),
        ("BUDGETMASTER_DEFAULT_EXPIRY_DAYS", "two weeks"),
        ("BUDGETMASTER_DEFAULT_EXPIRY_DAYS", "-1"),
    ],
)
def test_invalid_values_fail_fast(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Settings.from_env()
