"""Store implementations over SQLAlchemy async sessions."""

from pets_api.repositories.base import SQLAlchemyStore, Store, StoreError
from pets_api.repositories.pet_repository import PetRepository
from pets_api.repositories.user_repository import UserRepository

__all__ = [
    "PetRepository",
    "SQLAlchemyStore",
    "Store",
    "StoreError",
    "UserRepository",
]
