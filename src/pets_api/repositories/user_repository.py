"""User repository implementation."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pets_api.models.user import User
from pets_api.repositories.base import SQLAlchemyStore


class UserRepository(SQLAlchemyStore[User]):
    """Store for User entities."""

    model_class = User

    def __init__(self, session: AsyncSession):
        """Initialize UserRepository with session."""
        super().__init__(session)

    async def remove(self, entity: User) -> None:
        """Stage a user delete, orphaning the user's pets.

        The pets collection is reloaded first so that pets added since the
        user was loaded also get their owner reference cleared.
        """
        try:
            await self.session.refresh(entity, attribute_names=["pets"])
        except SQLAlchemyError as e:
            await self._fail("remove", e)
        await super().remove(entity)
