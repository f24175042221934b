"""Application service: Add Product use case.

Catalog entries are validated strictly: unlike budget lines, a missing or
unreadable base price is an error, not zero.
"""

from __future__ import annotations

from decimal import Decimal

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import ProductDTO
from budgetmaster.application.mapping import product_to_dto
from budgetmaster.domain.exceptions import ValidationError
from budgetmaster.domain.model.product import Product
from budgetmaster.domain.model.value_objects import ItemType, Money
from budgetmaster.utils.logging import get_logger

logger = get_logger(__name__)


class AddProductHandler(StorageBoundHandler):

    def handle(
        self,
        name: str | None,
        base_price: str | int | Decimal | None,
        item_type: str | None = None,
    ) -> ProductDTO:
        """Add a new product or service to the catalog."""
        if base_price is None or (isinstance(base_price, str) and not base_price.strip()):
            raise ValidationError("Base price is required")

        product = Product.create(
            name=name or "",
            item_type=ItemType.parse(item_type),
            base_price=Money.of(base_price),
        )

        with self._storage.unit_of_work() as uow:
            uow.products.add(product)
            uow.commit()

        logger.info("Product #{} '{}' added", product.id, product.name)
        return product_to_dto(product)
