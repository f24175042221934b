"""Domain service: budget status transitions.

New budgets always start as PENDING. After that the status is changed
only through an update, and which moves are allowed depends on the
configured policy.
"""

from __future__ import annotations

from enum import Enum

from budgetmaster.domain.exceptions import ValidationError
from budgetmaster.domain.model.budget import Budget, BudgetStatus


class StatusPolicy(Enum):
    UNRESTRICTED = "unrestricted"
    PENDING_ONLY = "pending-only"

    def apply(self, budget: Budget, new_status: BudgetStatus) -> None:
        """Move *budget* to *new_status*, or raise if the policy forbids it.

        UNRESTRICTED accepts any enum value from any state.  PENDING_ONLY
        accepts PENDING -> APPROVED|REJECTED and same-state no-ops.
        """
        if new_status == budget.status:
            return
        if self is StatusPolicy.PENDING_ONLY and budget.status != BudgetStatus.PENDING:
            raise ValidationError(
                f"Cannot change status from {budget.status.value} "
                f"to {new_status.value}"
            )
        budget.status = new_status
