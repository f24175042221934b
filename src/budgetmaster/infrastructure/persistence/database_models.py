from datetime import timezone

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    NUMERIC,
    String,
    Text,
    func,
)
from sqlalchemy.orm import declarative_base

from budgetmaster.domain.model.budget import BudgetStatus
from budgetmaster.domain.model.value_objects import ItemType


Base = declarative_base()


def _enum_column(enum_cls, name):
    return SQLEnum(
        enum_cls,
        name=name,
        values_callable=lambda obj: [e.value for e in obj],
        native_enum=False,
        validate_strings=True,
    )


class TimestampMixin:
    """Mixin for adding timestamp fields to models"""

    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class ProductRecord(TimestampMixin, Base):
    """Catalog entry (product or service)"""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    item_type = Column(_enum_column(ItemType, "item_type"), nullable=False)
    base_price = Column(NUMERIC(10, 2), nullable=False, default=0)


class BudgetRecord(TimestampMixin, Base):
    """Budget header"""

    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255))
    issue_date = Column(Date, nullable=False)
    expiry_date = Column(Date)
    status = Column(
        _enum_column(BudgetStatus, "budget_status"),
        nullable=False,
        default=BudgetStatus.PENDING,
    )
    total_amount = Column(NUMERIC(10, 2), nullable=False, default=0)
    notes = Column(Text)


class BudgetItemRecord(TimestampMixin, Base):
    """Budget line; a snapshot, not a reference to the catalog"""

    __tablename__ = "budget_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    budget_id = Column(
        Integer,
        ForeignKey("budgets.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    description = Column(String(255), nullable=False)
    item_type = Column(_enum_column(ItemType, "budget_item_type"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(NUMERIC(10, 2), nullable=False)
    subtotal = Column(NUMERIC(10, 2), nullable=False)


def as_utc(value):
    """SQLite hands timestamps back naive; they were written as UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
