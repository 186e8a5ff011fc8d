"""FastAPI dependency injection.

Stores and handlers are built per request on top of the request-scoped
session from ``get_session``.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pets_api.api.handlers.pet_handler import PetHandler
from pets_api.api.handlers.user_handler import UserHandler
from pets_api.core.database import get_session
from pets_api.repositories.pet_repository import PetRepository
from pets_api.repositories.user_repository import UserRepository


# Repository dependencies
def get_user_repository(session: AsyncSession = Depends(get_session)) -> UserRepository:
    """Get user repository."""
    return UserRepository(session)


def get_pet_repository(session: AsyncSession = Depends(get_session)) -> PetRepository:
    """Get pet repository."""
    return PetRepository(session)


# Handler dependencies
def get_user_handler(
    users: UserRepository = Depends(get_user_repository),
) -> UserHandler:
    """Get user handler."""
    return UserHandler(users)


def get_pet_handler(
    pets: PetRepository = Depends(get_pet_repository),
    users: UserRepository = Depends(get_user_repository),
) -> PetHandler:
    """Get pet handler."""
    return PetHandler(pets, users)
