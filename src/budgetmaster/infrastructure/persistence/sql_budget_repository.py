"""SQLAlchemy-backed implementation of BudgetRepository."""

from __future__ import annotations

from sqlalchemy.orm import Session

from budgetmaster.domain.exceptions import NotFoundError
from budgetmaster.domain.model.budget import Budget, BudgetItem
from budgetmaster.domain.model.value_objects import Money, Quantity
from budgetmaster.domain.repository.budget_repository import BudgetRepository
from budgetmaster.infrastructure.persistence.database_models import (
    BudgetItemRecord,
    BudgetRecord,
    as_utc,
)


class SqlBudgetRepository(BudgetRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- BudgetRepository interface -------------------------------------------

    def get_by_id(self, budget_id: int) -> Budget | None:
        record = self._session.get(BudgetRecord, budget_id)
        if record is None:
            return None
        budget = self._to_domain(record)
        item_records = (
            self._item_query(budget_id).order_by(BudgetItemRecord.id.asc()).all()
        )
        budget.items = [self._item_to_domain(r) for r in item_records]
        return budget

    def list_headers(self, limit: int | None = None) -> list[Budget]:
        query = self._session.query(BudgetRecord).order_by(
            BudgetRecord.created_at.desc(), BudgetRecord.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(r) for r in query.all()]

    def add(self, budget: Budget) -> None:
        record = BudgetRecord(created_at=budget.created_at)
        self._copy_header(budget, record)
        self._session.add(record)
        self._session.flush()
        budget.id = record.id

    def update(self, budget: Budget) -> None:
        record = self._session.get(BudgetRecord, budget.id)
        if record is None:
            raise NotFoundError(f"Budget #{budget.id} not found")
        self._copy_header(budget, record)
        self._session.flush()

    def remove(self, budget_id: int) -> None:
        self._session.query(BudgetRecord).filter(
            BudgetRecord.id == budget_id
        ).delete(synchronize_session=False)

    def add_items(self, budget_id: int, items: list[BudgetItem]) -> None:
        records = [
            BudgetItemRecord(
                budget_id=budget_id,
                description=item.description,
                item_type=item.item_type,
                quantity=item.quantity.value,
                unit_price=item.unit_price.amount,
                subtotal=item.subtotal.amount,
            )
            for item in items
        ]
        self._session.add_all(records)
        self._session.flush()
        for item, record in zip(items, records):
            item.id = record.id

    def delete_items(self, budget_id: int) -> int:
        return self._item_query(budget_id).delete(synchronize_session=False)

    # --- Mapping --------------------------------------------------------------

    def _item_query(self, budget_id: int):
        return self._session.query(BudgetItemRecord).filter(
            BudgetItemRecord.budget_id == budget_id
        )

    @staticmethod
    def _copy_header(budget: Budget, record: BudgetRecord) -> None:
        record.customer_name = budget.customer_name
        record.customer_email = budget.customer_email
        record.issue_date = budget.issue_date
        record.expiry_date = budget.expiry_date
        record.status = budget.status
        record.total_amount = budget.total_amount.amount
        record.notes = budget.notes

    @staticmethod
    def _to_domain(record: BudgetRecord) -> Budget:
        return Budget(
            id=record.id,
            customer_name=record.customer_name,
            customer_email=record.customer_email,
            issue_date=record.issue_date,
            expiry_date=record.expiry_date,
            status=record.status,
            total_amount=Money(record.total_amount),
            notes=record.notes,
            created_at=as_utc(record.created_at),
        )

    @staticmethod
    def _item_to_domain(record: BudgetItemRecord) -> BudgetItem:
        return BudgetItem(
            id=record.id,
            description=record.description,
            item_type=record.item_type,
            quantity=Quantity(record.quantity),
            unit_price=Money(record.unit_price),
            subtotal=Money(record.subtotal),
        )
