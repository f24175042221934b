"""Tests for the catalog handlers (list, add, delete products)."""

from decimal import Decimal

import pytest

from budgetmaster.application.add_product import AddProductHandler
from budgetmaster.application.create_budget import CreateBudgetHandler
from budgetmaster.application.delete_product import DeleteProductHandler
from budgetmaster.application.dto import BudgetInput, BudgetItemInput
from budgetmaster.application.list_products import ListProductsHandler
from budgetmaster.application.view_budget import ViewBudgetHandler
from budgetmaster.domain.exceptions import NotFoundError, StorageUnavailableError, ValidationError
from tests.fakes import FakeStorage


class TestAddProduct:

    def test_adds_with_id(self):
        storage = FakeStorage()
        dto = AddProductHandler(storage).handle("Logo", "300", "Service")
        assert dto.id == 1
        assert dto.item_type == "Service"
        assert dto.base_price == Decimal("300.00")

    def test_type_defaults_to_product(self):
        dto = AddProductHandler(FakeStorage()).handle("Mug", "8.50")
        assert dto.item_type == "Product"

    def test_duplicate_names_allowed(self):
        storage = FakeStorage()
        handler = AddProductHandler(storage)
        handler.handle("Mug", "8.50")
        handler.handle("Mug", "9.00")
        assert len(ListProductsHandler(storage).handle()) == 2

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_name_required(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeStorage()).handle(name, "1.00")

    @pytest.mark.parametrize("price", [None, "", "  "])
    def test_price_required(self, price):
        with pytest.raises(ValidationError, match="Base price is required"):
            AddProductHandler(FakeStorage()).handle("Mug", price)

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(FakeStorage()).handle("Mug", "cheap")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(FakeStorage()).handle("Mug", "-1")

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError, match="Invalid item type"):
            AddProductHandler(FakeStorage()).handle("Mug", "1", "Gadget")


class TestListProducts:

    def test_sorted_by_name(self):
        storage = FakeStorage()
        handler = AddProductHandler(storage)
        for name in ("Website", "Banner", "Logo"):
            handler.handle(name, "1")
        assert [p.name for p in ListProductsHandler(storage).handle()] == [
            "Banner",
            "Logo",
            "Website",
        ]

    def test_unready_storage(self):
        with pytest.raises(StorageUnavailableError):
            ListProductsHandler(FakeStorage(ready=False))


class TestDeleteProduct:

    def test_removes_product(self):
        storage = FakeStorage()
        dto = AddProductHandler(storage).handle("Mug", "8.50")
        DeleteProductHandler(storage).handle(dto.id)
        assert ListProductsHandler(storage).handle() == []

    def test_unknown_product(self):
        with pytest.raises(NotFoundError, match="Product #5 not found"):
            DeleteProductHandler(FakeStorage()).handle(5)

    def test_budget_items_survive_product_deletion(self):
        storage = FakeStorage()
        product = AddProductHandler(storage).handle("Logo", "300", "Service")
        budget_id = CreateBudgetHandler(storage).handle(
            BudgetInput(
                customer_name="ACME",
                issue_date="2024-01-01",
                items=[
                    BudgetItemInput(
                        description=product.name,
                        item_type=product.item_type,
                        quantity=1,
                        unit_price=product.base_price,
                    )
                ],
            )
        )

        DeleteProductHandler(storage).handle(product.id)

        [item] = ViewBudgetHandler(storage).handle(budget_id).items
        assert item.description == "Logo"
        assert item.unit_price == Decimal("300.00")
