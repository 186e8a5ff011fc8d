"""Mapping functions between pet DTOs and the Pet entity."""

from pets_api.api.schemas.pets import PetCreateRequest, PetResponse, PetUpdateRequest
from pets_api.models.pet import Pet


def pet_to_response(pet: Pet) -> PetResponse:
    """Convert Pet entity to PetResponse DTO. The owner is never exposed."""
    return PetResponse(
        id=pet.id,
        name=pet.name,
        animal=pet.animal,
    )


def pet_create_request_to_entity(dto: PetCreateRequest) -> Pet:
    """Convert PetCreateRequest DTO to a new Pet; the store assigns the ID."""
    return Pet(
        name=dto.name,
        animal=dto.animal,
        user_id=dto.user_id,
    )


def apply_pet_update_request(pet: Pet, dto: PetUpdateRequest) -> Pet:
    """Overwrite the writable fields of ``pet`` in place.

    Only name and animal are touched; ``user_id`` is never changed here.
    """
    if dto.name is not None:
        pet.name = dto.name
    if dto.animal is not None:
        pet.animal = dto.animal
    return pet
