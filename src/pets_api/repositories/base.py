"""Store protocol and the SQLAlchemy-backed base implementation.

A store offers keyed lookup plus staged insert/delete over one entity type.
Staged work only becomes durable on ``commit``; callers decide when to
commit.
"""

from typing import (
    Generic,
    List,
    Optional,
    Protocol,
    Type,
    TypeVar,
    runtime_checkable,
)

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pets_api.models.base import Base

logger = structlog.get_logger(__name__)

Entity = TypeVar("Entity", bound=Base)


class StoreError(Exception):
    """Raised when the underlying database fails to stage or persist work."""

    def __init__(self, operation: str, entity_type: str, cause: Exception):
        self.operation = operation
        self.entity_type = entity_type
        self.cause = cause
        super().__init__(f"{operation} failed for {entity_type}: {cause}")


@runtime_checkable
class Store(Protocol[Entity]):
    """Persistence contract used by the resource handlers."""

    async def find(self, id: int) -> Optional[Entity]:
        """Get entity by ID, or None if absent."""
        ...

    async def list(self) -> List[Entity]:
        """Get all entities in insertion order."""
        ...

    async def add(self, entity: Entity) -> Entity:
        """Stage an insert and return the entity with its ID assigned."""
        ...

    async def remove(self, entity: Entity) -> None:
        """Stage a delete."""
        ...

    async def commit(self) -> None:
        """Persist all staged work."""
        ...

    async def rollback(self) -> None:
        """Discard all staged work."""
        ...


class CRUDMixin:
    """Mixin providing keyed lookup and staged writes."""

    session: AsyncSession
    model_class: Type[Base]

    async def find(self, id: int) -> Optional[Entity]:
        """Get entity by ID."""
        return await self.session.get(self.model_class, id)

    async def add(self, entity: Entity) -> Entity:
        """Stage an insert; flushing assigns the ID without committing."""
        try:
            self.session.add(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self._fail("add", e)
        return entity

    async def remove(self, entity: Entity) -> None:
        """Stage a delete."""
        try:
            await self.session.delete(entity)
        except SQLAlchemyError as e:
            await self._fail("remove", e)


class QueryMixin:
    """Mixin providing query capabilities."""

    session: AsyncSession
    model_class: Type[Base]

    async def list(self) -> List[Entity]:
        """Get all entities ordered by ID."""
        stmt = select(self.model_class).order_by(self.model_class.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class TransactionMixin:
    """Mixin providing transaction management."""

    session: AsyncSession
    model_class: Type[Base]

    async def commit(self) -> None:
        """Commit the current transaction."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail("commit", e)

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self.session.rollback()

    async def _fail(self, operation: str, error: SQLAlchemyError) -> None:
        entity_type = self.model_class.__name__
        logger.error(
            "store_operation_failed",
            operation=operation,
            entity_type=entity_type,
            error=str(error),
        )
        await self.rollback()
        raise StoreError(operation, entity_type, error) from error


class SQLAlchemyStore(CRUDMixin, QueryMixin, TransactionMixin, Generic[Entity]):
    """Store over one model class, bound to a request-scoped session."""

    model_class: Type[Base]

    def __init__(self, session: AsyncSession, model_class: Optional[Type[Base]] = None):
        """Initialize store with session and model class."""
        self.session = session
        if model_class is not None:
            self.model_class = model_class
