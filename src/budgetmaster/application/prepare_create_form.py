"""Application service: data needed to compose a new budget (query)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from budgetmaster.application.base import StorageBoundHandler
from budgetmaster.application.dto import CreateFormDTO
from budgetmaster.application.mapping import product_to_dto
from budgetmaster.domain.repository.storage import StorageHandle


class PrepareCreateFormHandler(StorageBoundHandler):

    def __init__(
        self,
        storage: StorageHandle,
        today: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(storage)
        self._today = today

    def handle(self) -> CreateFormDTO:
        with self._storage.unit_of_work() as uow:
            products = [product_to_dto(p) for p in uow.products.list_by_name()]
        return CreateFormDTO(products=products, today=self._today())
