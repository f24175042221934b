"""Abstract repository for Budget aggregate.

Headers and items are written through separate methods so the workflow
handlers spell out each step (header, then item set) inside one unit of
work.  Item removal is explicit; implementations must not rely on the
store to cascade.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from budgetmaster.domain.model.budget import Budget, BudgetItem


class BudgetRepository(ABC):

    @abstractmethod
    def get_by_id(self, budget_id: int) -> Budget | None:
        """Return a budget with its items, or None if not found."""

    @abstractmethod
    def list_headers(self, limit: int | None = None) -> list[Budget]:
        """Return budgets without items, newest first."""

    @abstractmethod
    def add(self, budget: Budget) -> None:
        """Persist a new budget header and assign its ID."""

    @abstractmethod
    def update(self, budget: Budget) -> None:
        """Overwrite the stored header of an existing budget."""

    @abstractmethod
    def remove(self, budget_id: int) -> None:
        """Delete a budget header. Items must be deleted first."""

    @abstractmethod
    def add_items(self, budget_id: int, items: list[BudgetItem]) -> None:
        """Insert *items* under *budget_id*, assigning their IDs."""

    @abstractmethod
    def delete_items(self, budget_id: int) -> int:
        """Delete every item of a budget and return how many were removed."""
