"""Application service: List Products use case (query)."""

from __future__ import annotations

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import ProductDTO
from budgetmaster.application.mapping import product_to_dto


class ListProductsHandler(StorageBoundHandler):

    def handle(self) -> list[ProductDTO]:
        """Return the whole catalog ordered by name."""
        with self._storage.unit_of_work() as uow:
            return [product_to_dto(p) for p in uow.products.list_by_name()]
