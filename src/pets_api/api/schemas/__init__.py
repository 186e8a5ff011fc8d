"""API request and response schemas."""

from pets_api.api.schemas.common import ErrorDetail, ErrorResponse, HealthResponse
from pets_api.api.schemas.pets import PetCreateRequest, PetResponse, PetUpdateRequest
from pets_api.api.schemas.users import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "PetCreateRequest",
    "PetResponse",
    "PetUpdateRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
