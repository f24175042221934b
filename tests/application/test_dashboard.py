"""Tests for the ShowDashboard use case."""

from decimal import Decimal

from budgetmaster.application.create_budget import CreateBudgetHandler
from budgetmaster.application.dto import BudgetInput, BudgetItemInput
from budgetmaster.application.show_dashboard import ShowDashboardHandler
from budgetmaster.application.update_budget import UpdateBudgetHandler
from tests.fakes import FakeStorage


def _seed(storage: FakeStorage, count: int) -> list[int]:
    create = CreateBudgetHandler(storage)
    return [
        create.handle(
            BudgetInput(
                customer_name=f"Customer {n}",
                issue_date="2024-01-01",
                items=[BudgetItemInput(description="Work", quantity=1, unit_price="100")],
            )
        )
        for n in range(count)
    ]


class TestDashboard:

    def test_empty(self):
        dto = ShowDashboardHandler(FakeStorage()).handle()
        assert dto.total_count == 0
        assert dto.total_value == Decimal("0")
        assert dto.recent == []

    def test_counts_by_status(self):
        storage = FakeStorage()
        ids = _seed(storage, 4)
        update = UpdateBudgetHandler(storage)
        item = [BudgetItemInput(description="Work", quantity=1, unit_price="100")]
        update.handle(ids[0], BudgetInput(status="Approved", items=item))
        update.handle(ids[1], BudgetInput(status="Rejected", items=item))

        dto = ShowDashboardHandler(storage).handle()
        assert dto.total_count == 4
        assert dto.pending_count == 2
        assert dto.approved_count == 1
        assert dto.rejected_count == 1

    def test_total_value_sums_all_budgets(self):
        storage = FakeStorage()
        _seed(storage, 3)
        assert ShowDashboardHandler(storage).handle().total_value == Decimal("300.00")

    def test_recent_limited_and_newest_first(self):
        storage = FakeStorage()
        ids = _seed(storage, 7)
        dto = ShowDashboardHandler(storage).handle()
        assert [b.id for b in dto.recent] == list(reversed(ids))[:5]
