"""Pet repository implementation."""

from sqlalchemy.ext.asyncio import AsyncSession

from pets_api.models.pet import Pet
from pets_api.repositories.base import SQLAlchemyStore


class PetRepository(SQLAlchemyStore[Pet]):
    """Store for Pet entities."""

    model_class = Pet

    def __init__(self, session: AsyncSession):
        """Initialize PetRepository with session."""
        super().__init__(session)
