"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from budgetmaster.application.add_product import AddProductHandler
from budgetmaster.application.create_budget import CreateBudgetHandler
from budgetmaster.application.delete_budget import DeleteBudgetHandler
from budgetmaster.application.delete_product import DeleteProductHandler
from budgetmaster.application.list_budgets import ListBudgetsHandler
from budgetmaster.application.list_products import ListProductsHandler
from budgetmaster.application.prepare_create_form import PrepareCreateFormHandler
from budgetmaster.application.prepare_edit_form import PrepareEditFormHandler
from budgetmaster.application.show_dashboard import ShowDashboardHandler
from budgetmaster.application.update_budget import UpdateBudgetHandler
from budgetmaster.application.view_budget import ViewBudgetHandler
from budgetmaster.infrastructure.config import Settings
from budgetmaster.infrastructure.persistence.sql_storage import SqlStorage


@dataclass
class Container:
    """Builds handlers on demand.  Each build checks the store is ready."""

    settings: Settings
    storage: SqlStorage

    def list_products(self) -> ListProductsHandler:
        return ListProductsHandler(self.storage)

    def add_product(self) -> AddProductHandler:
        return AddProductHandler(self.storage)

    def delete_product(self) -> DeleteProductHandler:
        return DeleteProductHandler(self.storage)

    def list_budgets(self) -> ListBudgetsHandler:
        return ListBudgetsHandler(self.storage)

    def prepare_create_form(self) -> PrepareCreateFormHandler:
        return PrepareCreateFormHandler(self.storage)

    def create_budget(self) -> CreateBudgetHandler:
        return CreateBudgetHandler(
            self.storage, default_expiry_days=self.settings.default_expiry_days
        )

    def prepare_edit_form(self) -> PrepareEditFormHandler:
        return PrepareEditFormHandler(self.storage)

    def update_budget(self) -> UpdateBudgetHandler:
        return UpdateBudgetHandler(
            self.storage,
            status_policy=self.settings.status_policy,
            expiry_precedence=self.settings.expiry_precedence,
            default_expiry_days=self.settings.default_expiry_days,
        )

    def view_budget(self) -> ViewBudgetHandler:
        return ViewBudgetHandler(self.storage)

    def delete_budget(self) -> DeleteBudgetHandler:
        return DeleteBudgetHandler(self.storage)

    def show_dashboard(self) -> ShowDashboardHandler:
        return ShowDashboardHandler(self.storage)


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or Settings.from_env()
    storage = SqlStorage(settings.database_url, echo=settings.sql_echo)
    return Container(settings=settings, storage=storage)
