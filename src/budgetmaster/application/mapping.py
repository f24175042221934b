"""Domain -> DTO mapping shared by the query and command handlers."""

from __future__ import annotations

from budgetmaster.application.dto import BudgetDTO, BudgetItemDTO, ProductDTO
from budgetmaster.domain.model.budget import Budget
from budgetmaster.domain.model.product import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        item_type=product.item_type.value,
        base_price=product.base_price.amount,
    )


def budget_to_dto(budget: Budget) -> BudgetDTO:
    return BudgetDTO(
        id=budget.id,  # type: ignore[arg-type]
        customer_name=budget.customer_name,
        customer_email=budget.customer_email,
        issue_date=budget.issue_date,
        expiry_date=budget.expiry_date,
        status=budget.status.value,
        total_amount=budget.total_amount.amount,
        notes=budget.notes,
        created_at=budget.created_at,
        items=[
            BudgetItemDTO(
                id=item.id,
                description=item.description,
                item_type=item.item_type.value,
                quantity=item.quantity.value,
                unit_price=item.unit_price.amount,
                subtotal=item.subtotal.amount,
            )
            for item in budget.items
        ],
    )
