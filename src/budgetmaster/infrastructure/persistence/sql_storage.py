"""SQLAlchemy implementation of StorageHandle and UnitOfWork.

One engine per process, one session per unit of work.  Driver errors
meaning "the database is gone" surface as StorageUnavailableError,
constraint violations and out-of-range values as ValidationError.
"""

from __future__ import annotations

from types import TracebackType

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import (
    DataError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    StatementError,
)
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from budgetmaster.domain.exceptions import StorageUnavailableError, ValidationError
from budgetmaster.domain.repository.storage import StorageHandle, UnitOfWork
from budgetmaster.infrastructure.persistence.database_models import Base
from budgetmaster.infrastructure.persistence.sql_budget_repository import (
    SqlBudgetRepository,
)
from budgetmaster.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from budgetmaster.utils.logging import get_logger

logger = get_logger(__name__)

_CONNECTION_ERRORS = (OperationalError, InterfaceError)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # Every session must see the same in-memory database.
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session = session_factory()
        self.budgets = SqlBudgetRepository(self._session)
        self.products = SqlProductRepository(self._session)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        super().__exit__(exc_type, exc, tb)
        if isinstance(exc, IntegrityError):
            logger.error("Database integrity error: {}", exc)
            raise ValidationError("Database constraint violation") from exc
        if isinstance(exc, _CONNECTION_ERRORS):
            logger.error("Database operation error: {}", exc)
            raise StorageUnavailableError("Database is unavailable") from exc
        # A bare StatementError wraps a value the driver could not bind.
        if isinstance(exc, DataError) or type(exc) is StatementError:
            logger.error("Database rejected a value: {}", exc)
            raise ValidationError("Value out of range for storage") from exc

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()

    def close(self) -> None:
        self._session.close()


class SqlStorage(StorageHandle):

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._engine = build_engine(database_url, echo=echo)
        self._session_factory = sessionmaker(
            bind=self._engine, autocommit=False, autoflush=False
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        """Create any missing tables."""
        try:
            Base.metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            logger.error("Could not create schema: {}", exc)
            raise StorageUnavailableError(f"Could not create schema: {exc}") from exc

    def ensure_ready(self) -> None:
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
                existing = set(inspect(conn).get_table_names())
        except SQLAlchemyError as exc:
            logger.error("Database unreachable: {}", exc)
            raise StorageUnavailableError(f"Database unreachable: {exc}") from exc

        missing = sorted(set(Base.metadata.tables) - existing)
        if missing:
            raise StorageUnavailableError(
                "Database schema is not initialised (missing tables: "
                f"{', '.join(missing)}); run 'budgetmaster db init'"
            )

    def unit_of_work(self) -> SqlUnitOfWork:
        return SqlUnitOfWork(self._session_factory)

    def dispose(self) -> None:
        self._engine.dispose()
