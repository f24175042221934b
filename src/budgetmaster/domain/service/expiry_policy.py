"""Domain service: expiry date derivation.

A budget is valid for ``expiry_days`` after its issue date.  Missing or
non-numeric day counts fall back to the default window; they never mean
"expires the same day".
"""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum

from budgetmaster.domain.exceptions import ValidationError

DEFAULT_EXPIRY_DAYS = 15


def parse_expiry_days(raw: str | int | None, default: int = DEFAULT_EXPIRY_DAYS) -> int:
    """Coerce a day count from user input, falling back to *default*."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        days = int(str(raw).strip())
    except ValueError:
        return default
    if days < 0:
        raise ValidationError("Expiry days cannot be negative")
    return days


def derive_expiry_date(
    issue_date: date,
    expiry_days: str | int | None,
    default: int = DEFAULT_EXPIRY_DAYS,
) -> date:
    return issue_date + timedelta(days=parse_expiry_days(expiry_days, default))


class ExpiryPrecedence(Enum):
    """Which source wins when an update carries both an explicit date and days."""

    EXPLICIT_FIRST = "explicit"
    DERIVED_FIRST = "derived"

    def resolve(
        self,
        issue_date: date,
        explicit: date | None,
        expiry_days: str | int | None,
        default: int = DEFAULT_EXPIRY_DAYS,
    ) -> date:
        if explicit is not None and (
            self is ExpiryPrecedence.EXPLICIT_FIRST or expiry_days is None
        ):
            return explicit
        return derive_expiry_date(issue_date, expiry_days, default)
