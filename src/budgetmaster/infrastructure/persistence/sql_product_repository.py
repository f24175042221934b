"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy.orm import Session

from budgetmaster.domain.model.product import Product
from budgetmaster.domain.model.value_objects import Money
from budgetmaster.domain.repository.product_repository import ProductRepository
from budgetmaster.infrastructure.persistence.database_models import (
    ProductRecord,
    as_utc,
)


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        record = self._session.get(ProductRecord, product_id)
        return self._to_domain(record) if record is not None else None

    def list_by_name(self) -> list[Product]:
        records = (
            self._session.query(ProductRecord)
            .order_by(ProductRecord.name.asc(), ProductRecord.id.asc())
            .all()
        )
        return [self._to_domain(r) for r in records]

    def add(self, product: Product) -> None:
        record = ProductRecord(
            name=product.name,
            item_type=product.item_type,
            base_price=product.base_price.amount,
            created_at=product.created_at,
        )
        self._session.add(record)
        self._session.flush()
        product.id = record.id

    def remove(self, product_id: int) -> None:
        self._session.query(ProductRecord).filter(
            ProductRecord.id == product_id
        ).delete(synchronize_session=False)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            name=record.name,
            item_type=record.item_type,
            base_price=Money(record.base_price),
            created_at=as_utc(record.created_at),
        )
