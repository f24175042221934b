"""Application service: Create Budget use case.

Steps:
1. Validate the header (customer name and issue date are required).
2. Derive the expiry date from the issue date and the validity window.
3. Resolve every submitted line into a BudgetItem (price snapshot).
4. Write the header and the item set in one unit of work.

The status of a new budget is always PENDING; a status sent with the
form is ignored.
"""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import BudgetInput
from budgetmaster.application.input_resolution import (
    blank_to_none,
    require_date,
    resolve_items,
)
from budgetmaster.domain.model.budget import Budget
from budgetmaster.domain.repository.storage import StorageHandle
from budgetmaster.domain.service.expiry_policy import (
    DEFAULT_EXPIRY_DAYS,
    derive_expiry_date,
)
from budgetmaster.utils.logging import get_logger

logger = get_logger(__name__)


class CreateBudgetHandler(StorageBoundHandler):

    def __init__(
        self,
        storage: StorageHandle,
        default_expiry_days: int = DEFAULT_EXPIRY_DAYS,
    ) -> None:
        super().__init__(storage)
        self._default_expiry_days = default_expiry_days

    def handle(self, data: BudgetInput) -> int:
        """Create a budget and return its ID."""
        issue_date = require_date(data.issue_date, "issue date")

        budget = Budget.create(
            customer_name=data.customer_name or "",
            issue_date=issue_date,
            expiry_date=derive_expiry_date(
                issue_date, data.expiry_days, self._default_expiry_days
            ),
            items=resolve_items(data.items),
            customer_email=blank_to_none(data.customer_email),
            notes=blank_to_none(data.notes),
        )

        with self._storage.unit_of_work() as uow:
            uow.budgets.add(budget)
            uow.budgets.add_items(budget.id, budget.items)  # type: ignore[arg-type]
            uow.commit()

        logger.info(
            "Budget #{} created for '{}' ({} items, total {})",
            budget.id,
            budget.customer_name,
            len(budget.items),
            budget.total_amount,
        )
        return budget.id  # type: ignore[return-value]
