"""Budget aggregate — the core of the domain.

A Budget is a quote sent to a customer. It is the aggregate root that owns
its line items: items are only ever written as a whole set through
``replace_items()``, never one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from budgetmaster.domain.exceptions import ValidationError
from budgetmaster.domain.model.value_objects import ItemType, Money, Quantity


class BudgetStatus(Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @staticmethod
    def parse(raw: str | BudgetStatus) -> BudgetStatus:
        if isinstance(raw, BudgetStatus):
            return raw
        for member in BudgetStatus:
            if member.value.lower() == str(raw).strip().lower():
                return member
        allowed = ", ".join(m.value for m in BudgetStatus)
        raise ValidationError(f"Invalid status {raw!r}, expected one of: {allowed}")


@dataclass
class BudgetItem:
    """One line of a budget.

    Description and unit price are copied from the catalog (or typed in by
    hand) when the line is written; the ``subtotal`` is computed once, at
    that moment, and stored alongside.
    """

    id: int | None
    description: str
    item_type: ItemType
    quantity: Quantity
    unit_price: Money
    subtotal: Money

    @staticmethod
    def create(
        description: str,
        item_type: ItemType,
        quantity: Quantity,
        unit_price: Money,
    ) -> BudgetItem:
        if not description or not description.strip():
            raise ValidationError("Item description is required")
        return BudgetItem(
            id=None,
            description=description.strip(),
            item_type=item_type,
            quantity=quantity,
            unit_price=unit_price,
            subtotal=unit_price * quantity.value,
        )


@dataclass
class Budget:
    """Aggregate root for quotes.

    Use ``Budget.create()`` for new budgets: it validates the header and
    pins the status to PENDING.  The ``__init__`` is intentionally simple so
    repositories can reconstitute stored budgets without re-validating.
    """

    id: int | None
    customer_name: str
    issue_date: date
    expiry_date: date | None
    customer_email: str | None = None
    notes: str | None = None
    status: BudgetStatus = BudgetStatus.PENDING
    total_amount: Money = field(default_factory=Money.zero)
    items: list[BudgetItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW budgets only) ----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        issue_date: date,
        expiry_date: date,
        items: list[BudgetItem],
        customer_email: str | None = None,
        notes: str | None = None,
    ) -> Budget:
        budget = Budget(
            id=None,
            customer_name=_require_customer(customer_name),
            issue_date=issue_date,
            expiry_date=expiry_date,
            customer_email=customer_email,
            notes=notes,
        )
        budget.replace_items(items)
        return budget

    # --- Mutations ------------------------------------------------------------

    def revise(
        self,
        customer_name: str | None = None,
        customer_email: str | None = None,
        issue_date: date | None = None,
        expiry_date: date | None = None,
        notes: str | None = None,
    ) -> None:
        """Overwrite the header fields that were supplied; keep the rest.

        A blank email or notes value clears the stored one.
        """
        if customer_name is not None:
            self.customer_name = _require_customer(customer_name)
        if customer_email is not None:
            self.customer_email = customer_email.strip() or None
        if issue_date is not None:
            self.issue_date = issue_date
        if expiry_date is not None:
            self.expiry_date = expiry_date
        if notes is not None:
            self.notes = notes.strip() or None

    def replace_items(self, items: list[BudgetItem]) -> None:
        """Swap the whole item set and recompute the total."""
        self.items = list(items)
        total = Money.zero()
        for item in self.items:
            total = total + item.subtotal
        self.total_amount = total


def _require_customer(customer_name: str | None) -> str:
    if not customer_name or not customer_name.strip():
        raise ValidationError("Customer name is required")
    return customer_name.strip()
