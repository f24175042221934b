"""Application settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from budgetmaster.domain.service.expiry_policy import (
    DEFAULT_EXPIRY_DAYS,
    ExpiryPrecedence,
)
from budgetmaster.domain.service.status_policy import StatusPolicy

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///budgetmaster.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    log_dir: str | None = None
    status_policy: StatusPolicy = StatusPolicy.UNRESTRICTED
    expiry_precedence: ExpiryPrecedence = ExpiryPrecedence.EXPLICIT_FIRST
    default_expiry_days: int = DEFAULT_EXPIRY_DAYS

    @staticmethod
    def from_env() -> Settings:
        """Build settings from ``BUDGETMASTER_*`` variables.

        Raises ValueError on values that cannot be interpreted, so a bad
        deployment fails at startup.
        """
        default_days = int(
            os.getenv("BUDGETMASTER_DEFAULT_EXPIRY_DAYS", str(DEFAULT_EXPIRY_DAYS))
        )
        if default_days < 0:
            raise ValueError("BUDGETMASTER_DEFAULT_EXPIRY_DAYS cannot be negative")

        return Settings(
            database_url=os.getenv("BUDGETMASTER_DATABASE_URL", Settings.database_url),
            sql_echo=os.getenv("BUDGETMASTER_SQL_ECHO", "0").lower() in _TRUTHY,
            log_level=os.getenv("BUDGETMASTER_LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("BUDGETMASTER_LOG_DIR") or None,
            status_policy=StatusPolicy(
                os.getenv("BUDGETMASTER_STATUS_POLICY", StatusPolicy.UNRESTRICTED.value)
            ),
            expiry_precedence=ExpiryPrecedence(
                os.getenv(
                    "BUDGETMASTER_EXPIRY_PRECEDENCE",
                    ExpiryPrecedence.EXPLICIT_FIRST.value,
                )
            ),
            default_expiry_days=default_days,
        )
