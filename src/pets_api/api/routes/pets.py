"""Pet endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from pets_api.api.dependencies import get_pet_handler
from pets_api.api.handlers import PetHandler, unwrap
from pets_api.api.schemas.common import INT32_MAX, ErrorResponse
from pets_api.api.schemas.pets import PetCreateRequest, PetResponse, PetUpdateRequest

router = APIRouter()

PetId = Annotated[int, Path(ge=1, le=INT32_MAX, description="Pet ID")]

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=List[PetResponse])
async def list_pets(handler: PetHandler = Depends(get_pet_handler)):
    """List all pets."""
    return unwrap(await handler.get_all(), "Pet")


@router.get("/{pet_id}", response_model=PetResponse, responses=NOT_FOUND_RESPONSE)
async def get_pet(pet_id: PetId, handler: PetHandler = Depends(get_pet_handler)):
    """Get a pet by ID."""
    return unwrap(await handler.get_by_id(pet_id), "Pet", pet_id)


@router.post(
    "",
    response_model=PetResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
)
async def create_pet(
    pet_data: PetCreateRequest,
    request: Request,
    response: Response,
    handler: PetHandler = Depends(get_pet_handler),
):
    """Create a pet, optionally owned by ``user_id``."""
    pet = unwrap(await handler.create(pet_data), "Pet")
    response.headers["Location"] = str(request.url_for("get_pet", pet_id=pet.id))
    return pet


@router.put(
    "/{pet_id}",
    response_model=PetResponse,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_pet(
    pet_id: PetId,
    pet_data: PetUpdateRequest,
    handler: PetHandler = Depends(get_pet_handler),
):
    """Update a pet's name and animal."""
    return unwrap(await handler.update(pet_id, pet_data), "Pet", pet_id)


@router.delete(
    "/{pet_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_pet(pet_id: PetId, handler: PetHandler = Depends(get_pet_handler)):
    """Delete a pet."""
    unwrap(await handler.delete(pet_id), "Pet", pet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
