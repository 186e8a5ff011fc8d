"""Explicit DTO <-> entity mapping functions."""

from pets_api.api.mappers.pet_mapper import (
    apply_pet_update_request,
    pet_create_request_to_entity,
    pet_to_response,
)
from pets_api.api.mappers.user_mapper import (
    apply_user_update_request,
    user_create_request_to_entity,
    user_to_response,
)

__all__ = [
    "apply_pet_update_request",
    "apply_user_update_request",
    "pet_create_request_to_entity",
    "pet_to_response",
    "user_create_request_to_entity",
    "user_to_response",
]
