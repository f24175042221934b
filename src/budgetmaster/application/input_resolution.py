"""Turns raw form values into domain objects.

Budget lines are resolved leniently, the way the quote form has always
been read: a missing or unreadable quantity or price counts as zero.  A
value that *is* a number but breaks an invariant (e.g. a negative price)
is still rejected by the value objects.
"""

from __future__ import annotations

import math
import re
from datetime import date
from decimal import Decimal
from typing import Any

from budgetmaster.application.dto import BudgetItemInput
from budgetmaster.domain.exceptions import ValidationError
from budgetmaster.domain.model.budget import BudgetItem
from budgetmaster.domain.model.value_objects import ItemType, Money, Quantity

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_DECIMAL = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")
_ISO_DATE = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:T.*)?$")


def lenient_int(raw: Any) -> int:
    """Read the leading integer of *raw*; anything unreadable is 0."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0
    if isinstance(raw, Decimal):
        return int(raw) if raw.is_finite() else 0
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else 0


def lenient_decimal(raw: Any) -> Decimal:
    """Read the leading decimal number of *raw*; anything unreadable is 0."""
    if raw is None or isinstance(raw, bool):
        return Decimal("0")
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else Decimal("0")
    if isinstance(raw, int):
        return Decimal(raw)
    match = _LEADING_DECIMAL.match(str(raw))
    return Decimal(match.group(1)) if match else Decimal("0")


def resolve_item(spec: BudgetItemInput) -> BudgetItem:
    raw_price = spec.unit_price if spec.unit_price is not None else spec.price
    return BudgetItem.create(
        description=spec.description or "",
        item_type=ItemType.parse(spec.item_type),
        quantity=Quantity(lenient_int(spec.quantity)),
        unit_price=Money(lenient_decimal(raw_price)),
    )


def resolve_items(specs: list[BudgetItemInput] | None) -> list[BudgetItem]:
    return [resolve_item(spec) for spec in specs or []]


def parse_date(raw: str | date | None, field_name: str) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` date; blank input yields None.

    A trailing ``T...`` time part, as sent by datetime pickers, is ignored.
    """
    if raw is None:
        return None
    if isinstance(raw, date):
        return raw
    text = raw.strip()
    if not text:
        return None
    message = f"Invalid {field_name} {raw!r}, expected YYYY-MM-DD"
    match = _ISO_DATE.match(text)
    if match is None:
        raise ValidationError(message)
    try:
        return date.fromisoformat(match.group(1))
    except ValueError as exc:
        raise ValidationError(message) from exc


def require_date(raw: str | date | None, field_name: str) -> date:
    parsed = parse_date(raw, field_name)
    if parsed is None:
        raise ValidationError(f"{field_name.capitalize()} is required")
    return parsed


def blank_to_none(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = raw.strip()
    return text or None
