"""Application service: Show Dashboard use case (query).

Counts budgets per status, sums their totals and picks the most recent
ones for the summary table.
"""

from __future__ import annotations

from decimal import Decimal

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import DashboardDTO
from budgetmaster.application.mapping import budget_to_dto
from budgetmaster.domain.model.budget import BudgetStatus

RECENT_BUDGETS = 5


class ShowDashboardHandler(StorageBoundHandler):

    def handle(self, recent_limit: int = RECENT_BUDGETS) -> DashboardDTO:
        with self._storage.unit_of_work() as uow:
            budgets = uow.budgets.list_headers()
            recent = uow.budgets.list_headers(limit=recent_limit)

        def count(status: BudgetStatus) -> int:
            return sum(1 for b in budgets if b.status == status)

        return DashboardDTO(
            total_count=len(budgets),
            pending_count=count(BudgetStatus.PENDING),
            approved_count=count(BudgetStatus.APPROVED),
            rejected_count=count(BudgetStatus.REJECTED),
            total_value=sum((b.total_amount.amount for b in budgets), Decimal("0.00")),
            recent=[budget_to_dto(b) for b in recent],
        )
