"""Pet request/response schemas."""

from typing import Annotated, Optional

from pydantic import BaseModel, Field
from pydantic.json_schema import SkipJsonSchema

from pets_api.api.schemas.common import INT32_MAX

OwnerId = Annotated[int, Field(ge=1, le=INT32_MAX)]


class PetCreateRequest(BaseModel):
    """Request to create a pet."""

    name: str = Field(..., max_length=100, description="Pet's name")
    animal: str = Field(default="", max_length=100, description="Species, e.g. dog")
    # Accepted on POST /pets but left out of the published schema; the nested
    # /users/{user_id}/pets route takes the owner from the path instead
    user_id: SkipJsonSchema[Optional[OwnerId]] = Field(
        default=None, description="Owning user"
    )


class PetUpdateRequest(BaseModel):
    """Request to update a pet.

    The owner is not writable through an update.
    """

    name: Optional[str] = Field(default=None, max_length=100, description="Pet's name")
    animal: Optional[str] = Field(
        default=None, max_length=100, description="Species, e.g. dog"
    )


class PetResponse(BaseModel):
    """Pet response model."""

    id: int
    name: str
    animal: str
