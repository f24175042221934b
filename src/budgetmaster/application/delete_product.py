"""Application service: Delete Product use case.

Budget items hold their own copy of description and price, so a product
can be removed even when past budgets were built from it.
"""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.domain.exceptions import NotFoundError
from budgetmaster.utils.logging import get_logger

logger = get_logger(__name__)


class DeleteProductHandler(StorageBoundHandler):

    def handle(self, product_id: int) -> None:
        with self._storage.unit_of_work() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise NotFoundError(f"Product #{product_id} not found")
            uow.products.remove(product_id)
            uow.commit()

        logger.info("Product #{} deleted", product_id)
