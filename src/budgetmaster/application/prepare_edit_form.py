"""Application service: data needed to edit an existing budget (query)."""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import EditFormDTO
from budgetmaster.application.mapping import budget_to_dto, product_to_dto
from budgetmaster.domain.exceptions import NotFoundError


class PrepareEditFormHandler(StorageBoundHandler):

    def handle(self, budget_id: int) -> EditFormDTO:
        with self._storage.unit_of_work() as uow:
            budget = uow.budgets.get_by_id(budget_id)
            if budget is None:
                raise NotFoundError(f"Budget #{budget_id} not found")
            products = [product_to_dto(p) for p in uow.products.list_by_name()]
        return EditFormDTO(budget=budget_to_dto(budget), products=products)
