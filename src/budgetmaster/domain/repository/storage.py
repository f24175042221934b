"""Storage handle and unit of work.

A ``StorageHandle`` is handed to every application handler.  Readiness is
checked once, when the handler is built, so a missing database fails at
wiring time instead of deep inside a request.

Every operation runs inside one ``UnitOfWork``: all repository writes made
through it are committed together by ``commit()``, and discarded if the
block exits with an exception or without committing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from budgetmaster.domain.repository.budget_repository import BudgetRepository
from budgetmaster.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    budgets: BudgetRepository
    products: ProductRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
        self.close()

    @abstractmethod
    def commit(self) -> None:
        """Make every write done through this unit of work permanent."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted write."""

    def close(self) -> None:
        """Release resources. Uncommitted writes are discarded."""


class StorageHandle(ABC):

    @abstractmethod
    def ensure_ready(self) -> None:
        """Raise StorageUnavailableError if the store cannot be used."""

    @abstractmethod
    def unit_of_work(self) -> UnitOfWork:
        """Open a new unit of work; use it as a context manager."""
