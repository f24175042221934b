"""Application service: Delete Budget use case.

Items are removed explicitly before the header, in the same unit of work,
so the cascade does not depend on the store's foreign key settings.
"""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.domain.exceptions import NotFoundError
from budgetmaster.utils.logging import get_logger

logger = get_logger(__name__)


class DeleteBudgetHandler(StorageBoundHandler):

    def handle(self, budget_id: int) -> None:
        with self._storage.unit_of_work() as uow:
            if uow.budgets.get_by_id(budget_id) is None:
                raise NotFoundError(f"Budget #{budget_id} not found")
            removed = uow.budgets.delete_items(budget_id)
            uow.budgets.remove(budget_id)
            uow.commit()

        logger.info("Budget #{} deleted with {} items", budget_id, removed)
