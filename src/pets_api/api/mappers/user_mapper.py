"""Mapping functions between user DTOs and the User entity."""

from pets_api.api.schemas.users import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from pets_api.models.user import User


def user_to_response(user: User) -> UserResponse:
    """Convert User entity to UserResponse DTO."""
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        age=user.age,
    )


def user_create_request_to_entity(dto: UserCreateRequest) -> User:
    """Convert UserCreateRequest DTO to a new User; the store assigns the ID."""
    return User(
        first_name=dto.first_name,
        last_name=dto.last_name,
        age=dto.age,
    )


def apply_user_update_request(user: User, dto: UserUpdateRequest) -> User:
    """Overwrite the writable fields of ``user`` in place.

    Only first_name, last_name and age are touched, and only when provided.
    """
    if dto.first_name is not None:
        user.first_name = dto.first_name
    if dto.last_name is not None:
        user.last_name = dto.last_name
    if dto.age is not None:
        user.age = dto.age
    return user
