"""Unit tests for the Budget aggregate and its line items."""

from datetime import date
from decimal import Decimal

import pytest

from budgetmaster.domain.exceptions import ValidationError
from budgetmaster.domain.model.budget import Budget, BudgetItem, BudgetStatus
from budgetmaster.domain.model.value_objects import ItemType, Money, Quantity


def _make_item(description: str = "Logo", qty: int = 1, price: str = "100.00") -> BudgetItem:
    return BudgetItem.create(
        description=description,
        item_type=ItemType.SERVICE,
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


def _make_budget(items: list[BudgetItem] | None = None) -> Budget:
    return Budget.create(
        customer_name="ACME",
        issue_date=date(2024, 1, 1),
        expiry_date=date(2024, 1, 16),
        items=items if items is not None else [_make_item()],
    )


class TestBudgetItem:

    def test_subtotal_is_quantity_times_price(self):
        item = _make_item(qty=3, price="19.99")
        assert item.subtotal == Money.of("59.97")

    def test_zero_quantity_gives_zero_subtotal(self):
        assert _make_item(qty=0).subtotal == Money.zero()

    def test_blank_description_rejected(self):
        with pytest.raises(ValidationError, match="description is required"):
            _make_item(description="  ")

    def test_new_item_has_no_id(self):
        assert _make_item().id is None


class TestBudgetCreation:

    def test_status_starts_pending(self):
        assert _make_budget().status == BudgetStatus.PENDING

    def test_total_is_sum_of_subtotals(self):
        budget = _make_budget([_make_item(qty=2, price="10.00"), _make_item(qty=1, price="5.50")])
        assert budget.total_amount.amount == Decimal("25.50")

    def test_empty_budget_totals_zero(self):
        assert _make_budget([]).total_amount == Money.zero()

    def test_customer_name_is_stripped(self):
        budget = Budget.create("  ACME  ", date(2024, 1, 1), date(2024, 1, 2), [])
        assert budget.customer_name == "ACME"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_customer_rejected(self, name):
        with pytest.raises(ValidationError, match="Customer name"):
            Budget.create(name, date(2024, 1, 1), date(2024, 1, 2), [])


class TestBudgetRevision:

    def test_none_keeps_existing_fields(self):
        budget = _make_budget()
        budget.revise(notes="Call first")
        assert budget.customer_name == "ACME"
        assert budget.notes == "Call first"

    def test_blank_customer_rejected_on_revise(self):
        budget = _make_budget()
        with pytest.raises(ValidationError, match="Customer name"):
            budget.revise(customer_name="")

    def test_replace_items_recomputes_total(self):
        budget = _make_budget([_make_item(price="100.00")])
        budget.replace_items([_make_item(qty=2, price="1.25")])
        assert len(budget.items) == 1
        assert budget.total_amount == Money.of("2.50")


class TestBudgetStatus:

    def test_parse_is_case_insensitive(self):
        assert BudgetStatus.parse("approved") is BudgetStatus.APPROVED

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValidationError, match="Invalid status"):
            BudgetStatus.parse("Archived")
