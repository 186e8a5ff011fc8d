"""Pet resource handler."""

from typing import Dict

import structlog

from pets_api.api.handlers.base import HandlerResult
from pets_api.api.mappers.pet_mapper import (
    apply_pet_update_request,
    pet_create_request_to_entity,
    pet_to_response,
)
from pets_api.api.schemas.pets import PetCreateRequest, PetUpdateRequest
from pets_api.models.pet import Pet
from pets_api.models.user import User
from pets_api.repositories.base import Store, StoreError

logger = structlog.get_logger(__name__)


class PetHandler:
    """CRUD operations for pets.

    The user store is only read, to check that a new pet's owner exists.
    """

    def __init__(self, pets: Store[Pet], users: Store[User]):
        self.pets = pets
        self.users = users

    async def get_all(self) -> HandlerResult:
        """List every pet in store order."""
        pets = await self.pets.list()
        return HandlerResult.ok([pet_to_response(pet) for pet in pets])

    async def get_by_id(self, pet_id: int) -> HandlerResult:
        """Get one pet."""
        pet = await self.pets.find(pet_id)
        if pet is None:
            return HandlerResult.not_found(f"Pet {pet_id} not found")
        return HandlerResult.ok(pet_to_response(pet))

    async def create(self, dto: PetCreateRequest) -> HandlerResult:
        """Create a pet, optionally owned by ``dto.user_id``.

        Returns:
            CREATED with the new pet, or VALIDATION_ERROR when the name is
            blank or the owner does not exist
        """
        errors = self._validate_create(dto)
        if errors:
            return HandlerResult.validation_error(errors)

        if dto.user_id is not None and await self.users.find(dto.user_id) is None:
            return HandlerResult.validation_error(
                {"user_id": f"User {dto.user_id} does not exist"}
            )

        return await self._insert(dto)

    async def create_for_user(self, user_id: int, dto: PetCreateRequest) -> HandlerResult:
        """Create a pet owned by ``user_id``, taken from the route.

        Returns:
            NOT_FOUND when the user does not exist, otherwise as ``create``
        """
        errors = self._validate_create(dto)
        if errors:
            return HandlerResult.validation_error(errors)

        if await self.users.find(user_id) is None:
            return HandlerResult.not_found(f"User {user_id} not found")

        return await self._insert(dto.model_copy(update={"user_id": user_id}))

    async def update(self, pet_id: int, dto: PetUpdateRequest) -> HandlerResult:
        """Overwrite the writable fields of an existing pet."""
        pet = await self.pets.find(pet_id)
        if pet is None:
            return HandlerResult.not_found(f"Pet {pet_id} not found")

        apply_pet_update_request(pet, dto)
        try:
            await self.pets.commit()
        except StoreError as e:
            return HandlerResult.failure(str(e))

        logger.info("pet_updated", pet_id=pet.id)
        return HandlerResult.ok(pet_to_response(pet))

    async def delete(self, pet_id: int) -> HandlerResult:
        """Delete a pet."""
        pet = await self.pets.find(pet_id)
        if pet is None:
            return HandlerResult.not_found(f"Pet {pet_id} not found")

        try:
            await self.pets.remove(pet)
            await self.pets.commit()
        except StoreError as e:
            return HandlerResult.failure(str(e))

        logger.info("pet_deleted", pet_id=pet_id)
        return HandlerResult.no_content()

    async def _insert(self, dto: PetCreateRequest) -> HandlerResult:
        try:
            pet = await self.pets.add(pet_create_request_to_entity(dto))
            await self.pets.commit()
        except StoreError as e:
            return HandlerResult.failure(str(e))

        logger.info("pet_created", pet_id=pet.id, user_id=pet.user_id)
        return HandlerResult.created(pet_to_response(pet))

    @staticmethod
    def _validate_create(dto: PetCreateRequest) -> Dict[str, str]:
        if not dto.name or not dto.name.strip():
            return {"name": "Name is required"}
        return {}
