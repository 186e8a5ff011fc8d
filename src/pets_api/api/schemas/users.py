"""User request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from pets_api.api.schemas.common import INT32_MAX


class UserCreateRequest(BaseModel):
    """Request to create a user."""

    first_name: str = Field(..., max_length=100, description="User's first name")
    last_name: str = Field(..., max_length=100, description="User's last name")
    age: int = Field(default=0, ge=0, le=INT32_MAX, description="Age in years")


class UserUpdateRequest(BaseModel):
    """Request to update a user.

    Omitted (or null) fields are left unchanged; provided values overwrite,
    including empty strings.
    """

    first_name: Optional[str] = Field(
        default=None, max_length=100, description="User's first name"
    )
    last_name: Optional[str] = Field(
        default=None, max_length=100, description="User's last name"
    )
    age: Optional[int] = Field(
        default=None, ge=0, le=INT32_MAX, description="Age in years"
    )


class UserResponse(BaseModel):
    """User response model."""

    id: int
    first_name: str
    last_name: str
    age: int
