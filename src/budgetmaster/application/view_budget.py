"""Application service: View Budget use case (query).

Feeds both the detail page and the printable quote.
"""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import BudgetDTO
from budgetmaster.application.mapping import budget_to_dto
from budgetmaster.domain.exceptions import NotFoundError


class ViewBudgetHandler(StorageBoundHandler):

    def handle(self, budget_id: int) -> BudgetDTO:
        with self._storage.unit_of_work() as uow:
            budget = uow.budgets.get_by_id(budget_id)
        if budget is None:
            raise NotFoundError(f"Budget #{budget_id} not found")
        return budget_to_dto(budget)
