"""Application service: Update Budget use case.

Header fields sent with the form replace the stored ones (fields left as
None keep their value) and the status is honoured, subject to the
configured StatusPolicy.

Items are replaced wholesale: every stored line is deleted and the
submitted set inserted.  No attempt is made to match old and new lines.
An absent item list therefore leaves the budget empty.

The header update, the delete and the insert share one unit of work.
"""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import BudgetInput
from budgetmaster.application.input_resolution import parse_date, resolve_items
from budgetmaster.domain.exceptions import NotFoundError
from budgetmaster.domain.model.budget import BudgetStatus
from budgetmaster.domain.repository.storage import StorageHandle
from budgetmaster.domain.service.expiry_policy import (
    DEFAULT_EXPIRY_DAYS,
    ExpiryPrecedence,
)
from budgetmaster.domain.service.status_policy import StatusPolicy
from budgetmaster.utils.logging import get_logger

logger = get_logger(__name__)


class UpdateBudgetHandler(StorageBoundHandler):

    def __init__(
        self,
        storage: StorageHandle,
        status_policy: StatusPolicy = StatusPolicy.UNRESTRICTED,
        expiry_precedence: ExpiryPrecedence = ExpiryPrecedence.EXPLICIT_FIRST,
        default_expiry_days: int = DEFAULT_EXPIRY_DAYS,
    ) -> None:
        super().__init__(storage)
        self._status_policy = status_policy
        self._expiry_precedence = expiry_precedence
        self._default_expiry_days = default_expiry_days

    def handle(self, budget_id: int, data: BudgetInput) -> None:
        issue_date = parse_date(data.issue_date, "issue date")
        explicit_expiry = parse_date(data.expiry_date, "expiry date")
        new_status = BudgetStatus.parse(data.status) if data.status is not None else None
        items = resolve_items(data.items)

        with self._storage.unit_of_work() as uow:
            budget = uow.budgets.get_by_id(budget_id)
            if budget is None:
                raise NotFoundError(f"Budget #{budget_id} not found")

            issue_date = issue_date or budget.issue_date
            budget.revise(
                customer_name=data.customer_name,
                customer_email=data.customer_email,
                issue_date=issue_date,
                expiry_date=self._expiry_precedence.resolve(
                    issue_date,
                    explicit_expiry,
                    data.expiry_days,
                    self._default_expiry_days,
                ),
                notes=data.notes,
            )
            if new_status is not None:
                self._status_policy.apply(budget, new_status)
            budget.replace_items(items)

            uow.budgets.update(budget)
            uow.budgets.delete_items(budget_id)
            uow.budgets.add_items(budget_id, budget.items)
            uow.commit()

        logger.info(
            "Budget #{} updated (status {}, {} items, total {})",
            budget_id,
            budget.status.value,
            len(budget.items),
            budget.total_amount,
        )
