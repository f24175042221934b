"""Data Transfer Objects — plain containers that cross layer boundaries.

Input DTOs carry raw, possibly untyped values from the outer surface; the
handlers resolve them.  Output DTOs carry plain values for rendering
without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any


# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class BudgetItemInput:
    """One submitted line. ``unit_price`` wins over ``price`` when both are set."""

    description: str | None
    quantity: Any = None
    unit_price: Any = None
    price: Any = None
    item_type: str | None = None

    @staticmethod
    def from_form(raw: dict[str, Any]) -> BudgetItemInput:
        return BudgetItemInput(
            description=raw.get("description"),
            quantity=raw.get("quantity"),
            unit_price=raw.get("unitPrice"),
            price=raw.get("price"),
            item_type=raw.get("itemType"),
        )


@dataclass(frozen=True)
class BudgetInput:
    """A submitted budget form, used by both create and update.

    ``status`` is ignored on create.  ``total_amount`` is accepted for
    parity with the form but the stored total is always recomputed from
    the items.
    """

    customer_name: str | None = None
    issue_date: str | date | None = None
    customer_email: str | None = None
    expiry_days: Any = None
    expiry_date: str | date | None = None
    status: str | None = None
    notes: str | None = None
    total_amount: Any = None
    items: list[BudgetItemInput] | None = None

    @staticmethod
    def from_form(raw: dict[str, Any]) -> BudgetInput:
        """Build from a payload using the web form's camelCase field names."""
        items = raw.get("items")
        return BudgetInput(
            customer_name=raw.get("customerName"),
            issue_date=raw.get("issueDate"),
            customer_email=raw.get("customerEmail"),
            expiry_days=raw.get("expiryDays"),
            expiry_date=raw.get("expiryDate"),
            status=raw.get("status"),
            notes=raw.get("notes"),
            total_amount=raw.get("totalAmount"),
            items=(
                [BudgetItemInput.from_form(i) for i in items]
                if isinstance(items, list)
                else None
            ),
        )


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    item_type: str
    base_price: Decimal


@dataclass(frozen=True)
class BudgetItemDTO:
    id: int | None
    description: str
    item_type: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class BudgetDTO:
    """A budget as displayed to the user.  Listings leave ``items`` empty."""

    id: int
    customer_name: str
    customer_email: str | None
    issue_date: date
    expiry_date: date | None
    status: str
    total_amount: Decimal
    notes: str | None
    created_at: datetime
    items: list[BudgetItemDTO] = field(default_factory=list)


@dataclass(frozen=True)
class CreateFormDTO:
    products: list[ProductDTO]
    today: date


@dataclass(frozen=True)
class EditFormDTO:
    budget: BudgetDTO
    products: list[ProductDTO]


@dataclass(frozen=True)
class DashboardDTO:
    total_count: int
    pending_count: int
    approved_count: int
    rejected_count: int
    total_value: Decimal
    recent: list[BudgetDTO]
