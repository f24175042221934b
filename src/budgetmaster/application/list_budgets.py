"""Application service: List Budgets use case (query)."""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import BudgetDTO
from budgetmaster.application.mapping import budget_to_dto


class ListBudgetsHandler(StorageBoundHandler):

    def handle(self) -> list[BudgetDTO]:
        """Return every budget header, newest first. Items are not loaded."""
        with self._storage.unit_of_work() as uow:
            return [budget_to_dto(b) for b in uow.budgets.list_headers()]
