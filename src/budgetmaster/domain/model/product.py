"""Product aggregate.

Products live independently of budgets. Budget items copy the description
and price they need, so removing a product from the catalog never touches
an existing budget.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from budgetmaster.domain.exceptions import ValidationError
from budgetmaster.domain.model.value_objects import ItemType, Money


@dataclass
class Product:
    """A product or service in the catalog."""

    id: int | None
    name: str
    item_type: ItemType
    base_price: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str, item_type: ItemType, base_price: Money) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return Product(
            id=None, name=name.strip(), item_type=item_type, base_price=base_price
        )
